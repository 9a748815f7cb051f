"""
Module: transform.message

Purpose:
    Pseudo-translates a whole message tree. Literal nodes are rewritten
    by transform.text; placeholder nodes are kept as-is, in place and in
    order. The result is wrapped in "[" ... "]" literal markers.

Key Functions:
    - literal_seed(message): PRNG seed for a message
    - pseudo_translate(message): Main entry point

Algorithm:
    1. seed = total code-point length of the top-level literals
    2. One PRNG state is created from the seed
    3. Top-level nodes are folded in document order; only literals draw
       from (and advance) the state
    4. "[" and "]" literals are added around the result

Dependencies:
    - core.models.nodes
    - transform.prng, transform.text

Used By:
    - catalog.controller
    - cli
"""

from __future__ import annotations

import logging

from ..core.models.nodes import Literal, Message, Node, is_literal
from .constants import CLOSE_BRACKET, OPEN_BRACKET
from .prng import seed
from .text import pseudo_text

logger = logging.getLogger(__name__)


def literal_seed(message: Message) -> int:
    """
    Seed for a message: sum of code-point lengths of its top-level literals.

    Placeholders, including the literals nested in their branches, do
    not contribute. Messages with equal literal length totals therefore
    share a PRNG trajectory.

    Example:
        >>> literal_seed(Message((Literal("Hi "), Literal("!"))))
        4
    """
    return sum(len(node.text) for node in message.nodes if is_literal(node))


def pseudo_translate(message: Message) -> Message:
    """
    Pseudo-translate a message tree.

    Args:
        message: Message to transform (not modified)

    Returns:
        New message: "[" literal, transformed nodes, "]" literal

    Invariants:
        - placeholders are the same objects, in the same order
        - exactly two literals are added, first and last
        - same input always gives an equal output

    Example:
        >>> out = pseudo_translate(Message((Literal(""),)))
        >>> [n.text for n in out.nodes]
        ['[', '', ']']
    """
    state = seed(literal_seed(message))
    logger.debug(f"Pseudo-translating {len(message)} node(s) with seed {state.value}")

    nodes: list[Node] = [Literal(OPEN_BRACKET)]
    for node in message.nodes:
        if is_literal(node):
            text, state = pseudo_text(node.text, state)
            nodes.append(node.with_text(text))
        else:
            nodes.append(node)
    nodes.append(Literal(CLOSE_BRACKET))

    return Message(tuple(nodes))
