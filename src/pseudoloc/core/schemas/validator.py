"""
Schema Validation Utilities

Validates JSON message data against the bundled JSON Schemas before it is
turned into model objects.

- `message.schema.json`: one message (a list of node objects)
- `catalog.schema.json`: an object mapping ids to messages; refers to the
  message schema by URI
- Every schema violation is collected, not just the first one
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

import jsonschema
from referencing import Registry, Resource


SCHEMA_NAMES = ("message", "catalog")

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}
_VALIDATORS: dict[str, jsonschema.Draft202012Validator] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


def _get_validator(name: str) -> jsonschema.Draft202012Validator:
    """Validator for a bundled schema, with every bundled schema resolvable by $id."""
    if name not in _VALIDATORS:
        registry = Registry().with_resources(
            (schema["$id"], Resource.from_contents(schema))
            for schema in (_load_schema(n) for n in SCHEMA_NAMES)
        )
        _VALIDATORS[name] = jsonschema.Draft202012Validator(_load_schema(name), registry=registry)
    return _VALIDATORS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _format_path(parts: Iterable[Any]) -> str:
    return ".".join(str(p) for p in parts)


def _validate(name: str, data: Any, prefix: str = "") -> None:
    failures = sorted(
        _get_validator(name).iter_errors(data),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    if not failures:
        return

    def location(error: jsonschema.ValidationError) -> str:
        parts = [prefix, *error.absolute_path] if prefix else error.absolute_path
        return _format_path(parts)

    errors = [f"{location(error) or '<root>'}: {error.message}" for error in failures]
    first = failures[0]
    raise ValidationError(
        f"Schema validation failed: {first.message}",
        path=location(first),
        errors=errors,
    )


def validate_message(data: Any, *, path: str = "") -> None:
    """
    Validate one message against the message schema.

    Args:
        data: Decoded JSON, expected to be a list of node objects
        path: Prefix used when reporting error locations (e.g. a message id)

    Raises:
        ValidationError: If data is invalid. `errors` holds one entry per
            violation as "<path>: <message>"; `path` is the first failing path.
    """
    _validate("message", data, path)


def validate_catalog(data: Any) -> None:
    """
    Validate a catalog object of the form {message_id: [nodes...]}.

    Raises:
        ValidationError: If the catalog is not an object or any message is
            invalid. Errors from every message are collected, each path
            starting with its message id.
    """
    _validate("catalog", data)
