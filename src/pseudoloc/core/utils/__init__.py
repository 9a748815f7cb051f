"""
Utils Package

Serialization and rendering of message trees.
"""

from .serialization import (
    serialize_node,
    deserialize_node,
    serialize_message,
    deserialize_message,
    serialize_catalog,
    deserialize_catalog,
    load_catalog_json,
    save_catalog_json,
)
from .render import escape_literal, render_message

__all__ = [
    "serialize_node",
    "deserialize_node",
    "serialize_message",
    "deserialize_message",
    "serialize_catalog",
    "deserialize_catalog",
    "load_catalog_json",
    "save_catalog_json",
    "escape_literal",
    "render_message",
]
