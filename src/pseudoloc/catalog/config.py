"""
Module: catalog.config

Purpose:
    Configuration dataclass for pseudo-translating a message catalog.
    Immutable configuration with validation on construction.

Key Classes:
    - OutputFormat: How transformed messages are written
    - CatalogConfig: Main configuration for catalog builds

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - catalog.controller: build_catalog()
    - cli: Built from command-line arguments
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class OutputFormat(str, Enum):
    """Output representation of each pseudo-translated message."""
    JSON = "json"  # Node list, same shape as the input
    ICU = "icu"    # Rendered ICU MessageFormat string

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CatalogConfig:
    """
    Configuration for a catalog build (immutable).

    Attributes:
        input_path: Source catalog JSON ({message_id: [nodes...]})
        output_path: Where the pseudo-translated catalog is written
        output_format: JSON node lists or rendered ICU strings
        validate: Validate the input against the message schema
        merge: Merge into an existing output object instead of replacing it
        indent: JSON indentation of the output file

    Invariants:
        - indent >= 0
        - input_path and output_path differ

    Example:
        >>> config = CatalogConfig(Path("en.json"), Path("en-XA.json"))
        >>> config.output_format
        <OutputFormat.JSON: 'json'>
    """

    input_path: Path
    output_path: Path
    output_format: OutputFormat = OutputFormat.JSON
    validate: bool = True
    merge: bool = False
    indent: int = 2

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.output_format, OutputFormat):
            object.__setattr__(self, "output_format", OutputFormat(self.output_format))
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative: {self.indent}")
        if Path(self.input_path).resolve() == Path(self.output_path).resolve():
            raise ValueError(f"output_path must differ from input_path: {self.input_path}")
