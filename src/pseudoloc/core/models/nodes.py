"""
Module: nodes

Purpose:
    Provides the message tree - an immutable, ordered sequence of nodes
    describing one localizable ICU-style message. Literal nodes carry
    displayable text; every other node kind is a placeholder whose payload
    the pseudo-translator never inspects.

Key Classes:
    - Location: Optional source position of a literal
    - Literal: Plain text segment
    - Argument: Simple interpolated argument, e.g. "{name}"
    - Formatted: Number/date/time formatter, e.g. "{n, number, percent}"
    - Plural / Select: Branching placeholders holding nested messages
    - Pound: The "#" marker inside plural branches
    - Message: Root (or nested) ordered sequence of nodes

Dependencies:
    - dataclasses (std)
    - enum (std)
    - typing (std)

Used By:
    - core.utils.serialization
    - core.utils.render
    - transform.message
    - catalog.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple, Union


class FormatKind(str, Enum):
    """Formatter kind of a Formatted placeholder."""
    NUMBER = "number"
    DATE = "date"
    TIME = "time"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Location:
    """
    Source position of a literal within its original message string.

    Opaque to the pseudo-translator: carried through unchanged.

    Invariants:
        - line >= 1
        - column >= 0
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"Location line must be >= 1: {self.line}")
        if self.column < 0:
            raise ValueError(f"Location column must be >= 0: {self.column}")

    def to_dict(self) -> dict:
        return {"line": self.line, "column": self.column}

    @classmethod
    def from_dict(cls, data: dict) -> Location:
        return cls(line=data["line"], column=data["column"])


@dataclass(frozen=True, slots=True)
class Literal:
    """
    Plain-text segment of a message.

    Attributes:
        text: Displayable text (may be empty)
        location: Optional source position metadata

    Example:
        >>> Literal("Hello, ").text
        'Hello, '
    """

    text: str
    location: Optional[Location] = None

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Literal text must be a string, got {type(self.text).__name__}")

    def with_text(self, text: str) -> Literal:
        """Copy of this literal with new text, keeping its location."""
        return Literal(text=text, location=self.location)


@dataclass(frozen=True, slots=True)
class Argument:
    """Simple argument reference, rendered as "{name}"."""

    name: str

    def __post_init__(self) -> None:
        _check_name(self.name)


@dataclass(frozen=True, slots=True)
class Formatted:
    """
    Argument passed through a number, date or time formatter.

    Attributes:
        name: Argument name
        kind: Which formatter applies
        style: Optional style or skeleton, e.g. "percent" or "short"
    """

    name: str
    kind: FormatKind
    style: Optional[str] = None

    def __post_init__(self) -> None:
        _check_name(self.name)
        # Accept plain strings ("number") from callers and deserializers
        if not isinstance(self.kind, FormatKind):
            object.__setattr__(self, "kind", FormatKind(self.kind))


@dataclass(frozen=True, slots=True)
class Pound:
    """The "#" marker standing for the plural value inside a branch."""


@dataclass(frozen=True, slots=True)
class Branch:
    """
    One case of a plural or select placeholder.

    Attributes:
        key: Case selector such as "one", "other", "=0" or "male"
        message: Nested message rendered when the case matches
    """

    key: str
    message: Message

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Branch key cannot be empty")


@dataclass(frozen=True, slots=True)
class Plural:
    """
    Plural (or ordinal) placeholder.

    Invariants:
        - at least one branch
        - branch keys unique
        - offset >= 0
    """

    name: str
    branches: Tuple[Branch, ...]
    offset: int = 0
    ordinal: bool = False

    def __post_init__(self) -> None:
        _check_name(self.name)
        _check_branches(self.name, self.branches)
        if self.offset < 0:
            raise ValueError(f"Plural offset cannot be negative: {self.offset}")


@dataclass(frozen=True, slots=True)
class Select:
    """Select placeholder choosing a branch by argument value."""

    name: str
    branches: Tuple[Branch, ...]

    def __post_init__(self) -> None:
        _check_name(self.name)
        _check_branches(self.name, self.branches)


Placeholder = Union[Argument, Formatted, Plural, Select, Pound]
Node = Union[Literal, Placeholder]


@dataclass(frozen=True, slots=True)
class Message:
    """
    Ordered sequence of nodes (immutable).

    Used both for the top-level message and for the nested message of
    each plural/select branch.

    Example:
        >>> msg = Message((Literal("Hi "), Argument("name")))
        >>> [lit.text for lit in msg.literals]
        ['Hi ']
        >>> msg.placeholders
        (Argument(name='name'),)
    """

    nodes: Tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.nodes, tuple):
            object.__setattr__(self, "nodes", tuple(self.nodes))

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def literals(self) -> Tuple[Literal, ...]:
        """Top-level literal nodes in document order."""
        return tuple(node for node in self.nodes if is_literal(node))

    @property
    def placeholders(self) -> Tuple[Placeholder, ...]:
        """Top-level non-literal nodes in document order."""
        return tuple(node for node in self.nodes if not is_literal(node))

    def iter_all(self) -> Iterator[Node]:
        """
        Iterate over every node including those nested in branches (pre-order).

        Yields:
            Each node, followed by the nodes of its branches in key order
            as declared.
        """
        for node in self.nodes:
            yield node
            if isinstance(node, (Plural, Select)):
                for branch in node.branches:
                    yield from branch.message.iter_all()


def is_literal(node: Node) -> bool:
    """True for literal text nodes, False for every placeholder kind."""
    return isinstance(node, Literal)


def _check_name(name: str) -> None:
    if not name:
        raise ValueError("Argument name cannot be empty")


def _check_branches(name: str, branches: Tuple[Branch, ...]) -> None:
    if not branches:
        raise ValueError(f"{name}: at least one branch is required")
    keys = [branch.key for branch in branches]
    duplicates = sorted({key for key in keys if keys.count(key) > 1})
    if duplicates:
        raise ValueError(f"{name}: duplicate branch keys {duplicates}")
