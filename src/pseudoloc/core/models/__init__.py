"""
Core Models Package

Immutable message tree nodes shared by the transformer, serializers
and catalog controller.

All models in this package are frozen dataclasses, so a transformed
message is always a new tree and the input is never mutated.
"""

from .nodes import (
    Argument,
    Branch,
    FormatKind,
    Formatted,
    Literal,
    Location,
    Message,
    Node,
    Placeholder,
    Plural,
    Pound,
    Select,
    is_literal,
)

__all__ = [
    "Argument",
    "Branch",
    "FormatKind",
    "Formatted",
    "Literal",
    "Location",
    "Message",
    "Node",
    "Placeholder",
    "Plural",
    "Pound",
    "Select",
    "is_literal",
]
