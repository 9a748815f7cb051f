"""
Module: core.utils.render

Purpose:
    Renders a message tree back to an ICU MessageFormat string so a
    pseudo-translated catalog can be dropped into a formatting engine.

Key Functions:
    - render_message(): Message -> ICU string
    - escape_literal(): Quote ICU syntax characters in literal text

Dependencies:
    - core.models.nodes

Used By:
    - catalog.controller: "icu" output format
    - cli: --text mode
"""

from __future__ import annotations

from itertools import groupby

from ..models.nodes import (
    Argument,
    Branch,
    Formatted,
    Message,
    Node,
    Plural,
    Pound,
    Select,
    is_literal,
)


def escape_literal(text: str, *, in_plural: bool = False) -> str:
    """
    Escape literal text for ICU MessageFormat.

    Apostrophes are doubled. Syntax characters (braces, plus "#" inside a
    plural branch) are quoted; a quoted section runs from the first syntax
    character over any following syntax characters and apostrophes, so a
    closing quote is never followed by another apostrophe.

    Example:
        >>> escape_literal("it's {x}")
        "it''s '{'x'}'"
        >>> escape_literal("{}")
        "'{}'"
    """
    special = "{}#" if in_plural else "{}"
    out = []
    quoted = False
    for ch in text:
        if ch in special:
            if not quoted:
                out.append("'")
                quoted = True
            out.append(ch)
        elif ch == "'":
            out.append("''")
        else:
            if quoted:
                out.append("'")
                quoted = False
            out.append(ch)
    if quoted:
        out.append("'")
    return "".join(out)


def render_message(message: Message) -> str:
    """
    Render a message to its ICU MessageFormat string.

    Args:
        message: Message tree to render

    Returns:
        ICU string, e.g. "{count, plural, one {# file} other {# files}}"
    """
    return _render_nodes(message, in_plural=False)


def _render_nodes(message: Message, *, in_plural: bool) -> str:
    # Adjacent literals are escaped as one text so quoted runs do not touch
    parts = []
    for is_text, group in groupby(message.nodes, key=is_literal):
        if is_text:
            text = "".join(node.text for node in group)
            parts.append(escape_literal(text, in_plural=in_plural))
        else:
            parts.extend(_render_node(node, in_plural=in_plural) for node in group)
    return "".join(parts)


def _render_node(node: Node, *, in_plural: bool) -> str:
    if isinstance(node, Argument):
        return f"{{{node.name}}}"
    if isinstance(node, Formatted):
        if node.style is None:
            return f"{{{node.name}, {node.kind.value}}}"
        return f"{{{node.name}, {node.kind.value}, {node.style}}}"
    if isinstance(node, Plural):
        keyword = "selectordinal" if node.ordinal else "plural"
        offset = f"offset:{node.offset} " if node.offset else ""
        cases = _render_branches(node.branches, in_plural=True)
        return f"{{{node.name}, {keyword}, {offset}{cases}}}"
    if isinstance(node, Select):
        cases = _render_branches(node.branches, in_plural=in_plural)
        return f"{{{node.name}, select, {cases}}}"
    if isinstance(node, Pound):
        return "#"
    raise TypeError(f"Cannot render node of type {type(node).__name__}")


def _render_branches(branches: tuple[Branch, ...], *, in_plural: bool) -> str:
    return " ".join(
        f"{b.key} {{{_render_nodes(b.message, in_plural=in_plural)}}}"
        for b in branches
    )
