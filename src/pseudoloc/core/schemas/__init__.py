"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_message,
    validate_catalog,
    ValidationError,
)

__all__ = [
    "validate_message",
    "validate_catalog",
    "ValidationError",
]
