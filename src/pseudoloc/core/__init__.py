"""
pseudoloc Core Package

Shared data models, JSON serialization and schema validation for
message trees.
"""

from .models import (
    Argument,
    Branch,
    FormatKind,
    Formatted,
    Literal,
    Location,
    Message,
    Plural,
    Pound,
    Select,
)

__all__ = [
    "Argument",
    "Branch",
    "FormatKind",
    "Formatted",
    "Literal",
    "Location",
    "Message",
    "Plural",
    "Pound",
    "Select",
]
