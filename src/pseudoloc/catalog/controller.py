"""
Module: catalog.controller

Purpose:
    Orchestrate pseudo-translation of a whole message catalog.
    Load → Validate → Transform → Render → Write

Key Functions:
    - pseudo_translate_catalog(): Transform every message of a catalog
    - build_catalog(): Main entry point, file to file

Key Classes:
    - CatalogResult: Summary of a catalog build
    - CatalogError: Exception for catalog build failures

Dependencies:
    - core.utils: Catalog loading, serialization, ICU rendering
    - transform: pseudo_translate
    - catalog.file_locking: Locked output writes

Used By:
    - cli: Command-line entry point
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

from pseudoloc.core.models import Message
from pseudoloc.core.schemas import ValidationError
from pseudoloc.core.utils import load_catalog_json, render_message, serialize_message
from pseudoloc.transform import pseudo_translate

from .config import CatalogConfig, OutputFormat
from .file_locking import locked_merge_json, locked_write_json

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Error during a catalog build."""
    pass


@dataclass(frozen=True)
class CatalogResult:
    """
    Catalog build result (immutable).

    Attributes:
        output_path: File that was written
        message_count: Number of messages pseudo-translated
        literal_count: Number of source literal nodes transformed
        output_format: Representation used in the output file
        total_entries: Entries in the output file after a merge
            (equals message_count when not merging)
    """
    output_path: Path
    message_count: int
    literal_count: int
    output_format: OutputFormat
    total_entries: int


def pseudo_translate_catalog(messages: Mapping[str, Message]) -> Dict[str, Message]:
    """
    Pseudo-translate every message of a catalog.

    Each message is seeded independently, so its output does not depend
    on the other messages or on catalog order.

    Args:
        messages: Message id to source message

    Returns:
        Message id to pseudo-translated message, in input order
    """
    return {message_id: pseudo_translate(msg) for message_id, msg in messages.items()}


def build_catalog(config: CatalogConfig) -> CatalogResult:
    """
    Pseudo-translate a catalog file into an output file.

    Pipeline:
    1. Load and (optionally) validate the input catalog
    2. Pseudo-translate every message
    3. Encode each message as node JSON or an ICU string
    4. Write the output, or merge into the existing output object

    Args:
        config: Catalog build configuration

    Returns:
        CatalogResult summarizing what was written

    Raises:
        CatalogError: If the input cannot be read or is invalid, or the
            existing output cannot be merged into

    Example:
        >>> result = build_catalog(CatalogConfig(Path("en.json"), Path("en-XA.json")))
        >>> print(f"Wrote {result.message_count} messages")
    """
    logger.info(f"Loading catalog {config.input_path}")

    # 1. Load
    try:
        messages = load_catalog_json(config.input_path, validate=config.validate)
    except FileNotFoundError as e:
        raise CatalogError(str(e)) from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {config.input_path}: {e}") from e
    except ValidationError as e:
        details = "; ".join(e.errors) if e.errors else str(e)
        raise CatalogError(f"Invalid catalog {config.input_path}: {details}") from e
    except OSError as e:
        raise CatalogError(f"Failed to read {config.input_path}: {e}") from e

    if not messages:
        logger.warning(f"Catalog {config.input_path} contains no messages")

    literal_count = sum(len(msg.literals) for msg in messages.values())
    logger.debug(f"Loaded {len(messages)} messages with {literal_count} literals")

    # 2-3. Transform and encode
    translated = pseudo_translate_catalog(messages)
    encoded = {
        message_id: _encode(msg, config.output_format)
        for message_id, msg in translated.items()
    }

    # 4. Write
    try:
        if config.merge:
            written = locked_merge_json(
                config.output_path,
                lambda existing: _merge(existing, encoded, config.output_path),
                indent=config.indent,
            )
        else:
            locked_write_json(config.output_path, encoded, indent=config.indent)
            written = encoded
    except json.JSONDecodeError as e:
        raise CatalogError(f"Cannot merge into {config.output_path}: invalid JSON ({e})") from e
    except OSError as e:
        raise CatalogError(f"Failed to write {config.output_path}: {e}") from e

    logger.info(
        f"Wrote {len(encoded)} pseudo-translated messages to {config.output_path} "
        f"({config.output_format.value})"
    )

    return CatalogResult(
        output_path=config.output_path,
        message_count=len(encoded),
        literal_count=literal_count,
        output_format=config.output_format,
        total_entries=len(written),
    )


def _encode(message: Message, output_format: OutputFormat) -> Any:
    if output_format == OutputFormat.ICU:
        return render_message(message)
    return serialize_message(message)


def _merge(existing: Any, encoded: Dict[str, Any], path: Path) -> Dict[str, Any]:
    if not isinstance(existing, dict):
        raise CatalogError(
            f"Cannot merge into {path}: expected a JSON object, got {type(existing).__name__}"
        )
    replaced = sorted(set(existing) & set(encoded))
    if replaced:
        logger.debug(f"Replacing {len(replaced)} existing entries in {path.name}")
    existing.update(encoded)
    return existing
