"""
Module: transform.prng

Purpose:
    Deterministic pseudo-random number generator for pseudo-translation.
    A linear-congruential generator whose state is an immutable value
    threaded through every draw: each call returns the drawn value and
    a new state, the old state is never modified.

Key Functions:
    - seed(n): Initial state from an integer
    - LcgState.next(): Draw one integer
    - LcgState.choose(choices): Draw one element of a non-empty collection

Dependencies:
    - transform.constants: LcgParameters, Choices

Used By:
    - transform.text: Vowel repetition and accenting passes
    - transform.message: Seeds one state per message
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, TypeVar

from .constants import DEFAULT_LCG, Choices, LcgParameters

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class LcgState:
    """
    Current LCG state (immutable).

    Attributes:
        value: Current state integer, always in [0, params.modulus)
        params: Generator constants

    Example:
        >>> value, state = seed(3).next()
        >>> value
        1163074432
        >>> state.value == value
        True
    """

    value: int
    params: LcgParameters = DEFAULT_LCG

    def next(self) -> Tuple[int, LcgState]:
        """
        Advance the generator one step.

        Returns:
            (drawn value, new state); the drawn value is the new state integer
        """
        p = self.params
        value = (p.multiplier * self.value + p.increment) % p.modulus
        return value, LcgState(value, p)

    def choose(self, choices: Choices[T]) -> Tuple[T, LcgState]:
        """
        Draw one element of choices.

        Args:
            choices: Non-empty collection (emptiness is impossible by construction)

        Returns:
            (element at index drawn % len(choices), new state)
        """
        value, state = self.next()
        return choices[value % len(choices)], state


def seed(n: int, params: LcgParameters = DEFAULT_LCG) -> LcgState:
    """
    Initial generator state for an integer seed.

    Pure: no clock or OS entropy is involved. Negative seeds are reduced
    modulo the generator modulus.
    """
    return LcgState(n % params.modulus, params)
