"""
Catalog Package

File-level pseudo-translation of message catalogs.
"""

from .config import CatalogConfig, OutputFormat
from .controller import (
    CatalogError,
    CatalogResult,
    build_catalog,
    pseudo_translate_catalog,
)

__all__ = [
    "CatalogConfig",
    "CatalogError",
    "CatalogResult",
    "OutputFormat",
    "build_catalog",
    "pseudo_translate_catalog",
]
