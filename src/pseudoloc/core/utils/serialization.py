"""
Serialization Utilities

Provides to/from JSON utilities for message trees.

Wire form:
- A message is a JSON array of node objects
- Every node object carries a "type" discriminator
- Optional fields (location, style) are omitted when unset
- A catalog is a JSON object mapping message ids to messages

Validation against `message.schema.json` happens before deserialization,
so malformed input fails with a ValidationError naming the bad path.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from ..models.nodes import (
    Argument,
    Branch,
    FormatKind,
    Formatted,
    Literal,
    Location,
    Message,
    Node,
    Plural,
    Pound,
    Select,
)
from ..schemas.validator import validate_catalog, validate_message, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Node Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_node(node: Node) -> dict[str, Any]:
    """
    Serialize a single node to a dictionary.

    Args:
        node: Any message node

    Returns:
        Dictionary suitable for JSON serialization

    Raises:
        TypeError: If node is not a known node type
    """
    if isinstance(node, Literal):
        data: dict[str, Any] = {"type": "literal", "text": node.text}
        if node.location is not None:
            data["location"] = node.location.to_dict()
        return data
    if isinstance(node, Argument):
        return {"type": "argument", "name": node.name}
    if isinstance(node, Formatted):
        data = {"type": node.kind.value, "name": node.name}
        if node.style is not None:
            data["style"] = node.style
        return data
    if isinstance(node, Plural):
        return {
            "type": "plural",
            "name": node.name,
            "offset": node.offset,
            "ordinal": node.ordinal,
            "branches": [_serialize_branch(b) for b in node.branches],
        }
    if isinstance(node, Select):
        return {
            "type": "select",
            "name": node.name,
            "branches": [_serialize_branch(b) for b in node.branches],
        }
    if isinstance(node, Pound):
        return {"type": "pound"}
    raise TypeError(f"Cannot serialize node of type {type(node).__name__}")


def _serialize_branch(branch: Branch) -> dict[str, Any]:
    return {"key": branch.key, "message": serialize_message(branch.message)}


def deserialize_node(data: dict[str, Any]) -> Node:
    """
    Deserialize a single node from a dictionary.

    The data is assumed to be schema-valid; use `deserialize_message`
    with validate=True for untrusted input.

    Raises:
        ValueError: If the node type is unknown or a model invariant fails
    """
    node_type = data["type"]

    if node_type == "literal":
        location = Location.from_dict(data["location"]) if "location" in data else None
        return Literal(text=data["text"], location=location)
    if node_type == "argument":
        return Argument(name=data["name"])
    if node_type in (kind.value for kind in FormatKind):
        return Formatted(
            name=data["name"],
            kind=FormatKind(node_type),
            style=data.get("style"),
        )
    if node_type == "plural":
        return Plural(
            name=data["name"],
            branches=_deserialize_branches(data["branches"]),
            offset=data.get("offset", 0),
            ordinal=data.get("ordinal", False),
        )
    if node_type == "select":
        return Select(
            name=data["name"],
            branches=_deserialize_branches(data["branches"]),
        )
    if node_type == "pound":
        return Pound()
    raise ValueError(f"Unknown node type: {node_type!r}")


def _deserialize_branches(data: list[dict[str, Any]]) -> tuple[Branch, ...]:
    return tuple(
        Branch(key=b["key"], message=_deserialize_nodes(b["message"]))
        for b in data
    )


def _deserialize_nodes(data: list[dict[str, Any]]) -> Message:
    return Message(tuple(deserialize_node(item) for item in data))


# ─────────────────────────────────────────────────────────────────────────────
# Message Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_message(message: Message) -> list[dict[str, Any]]:
    """Serialize a Message to a list of node dictionaries."""
    return [serialize_node(node) for node in message.nodes]


def deserialize_message(
    data: Any,
    *,
    validate: bool = True,
    path: str = "",
) -> Message:
    """
    Deserialize a Message from decoded JSON.

    Args:
        data: List of node dictionaries
        validate: Whether to validate against the schema first
        path: Location prefix for validation errors

    Returns:
        Message instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data violates a model invariant (e.g. duplicate branch keys)
    """
    if validate:
        validate_message(data, path=path)
    return _deserialize_nodes(data)


# ─────────────────────────────────────────────────────────────────────────────
# Catalog Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_catalog(messages: Mapping[str, Message]) -> dict[str, Any]:
    """Serialize a catalog, preserving key order."""
    return {message_id: serialize_message(msg) for message_id, msg in messages.items()}


def deserialize_catalog(data: Any, *, validate: bool = True) -> dict[str, Message]:
    """
    Deserialize a catalog object.

    Args:
        data: Decoded JSON object mapping message ids to node lists
        validate: Whether to validate every message first

    Returns:
        Dictionary of message id to Message, in input order

    Raises:
        ValidationError: If validation fails or a message breaks a model invariant
    """
    if validate:
        validate_catalog(data)
    elif not isinstance(data, dict):
        raise ValidationError(
            f"Catalog must be a JSON object, got {type(data).__name__}",
            errors=[f"<root>: expected an object, got {type(data).__name__}"],
        )

    messages: dict[str, Message] = {}
    for message_id, nodes in data.items():
        try:
            messages[message_id] = _deserialize_nodes(nodes)
        except KeyError as e:
            raise _malformed(message_id, f"missing field {e}") from e
        except (TypeError, AttributeError, ValueError) as e:
            raise _malformed(message_id, str(e)) from e
    return messages


def _malformed(message_id: str, detail: str) -> ValidationError:
    return ValidationError(
        f"Invalid message {message_id!r}: {detail}",
        path=message_id,
        errors=[f"{message_id}: {detail}"],
    )


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_catalog_json(path: Path, *, validate: bool = True) -> dict[str, Message]:
    """
    Load a catalog from a JSON file.

    Args:
        path: Path to catalog JSON
        validate: Whether to validate against the schema

    Returns:
        Dictionary of message id to Message

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
        ValidationError: If any message is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return deserialize_catalog(data, validate=validate)


def save_catalog_json(path: Path, messages: Mapping[str, Message], *, indent: int = 2) -> None:
    """
    Save a catalog to a JSON file.

    Args:
        path: Output path
        messages: Catalog to write
        indent: JSON indentation
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    data = serialize_catalog(messages)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)
