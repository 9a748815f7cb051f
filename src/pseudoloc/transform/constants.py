"""Fixed constants of the pseudo-translation algorithm.

Everything here is part of the reproducibility contract: changing the LCG
parameters, the order of the combining marks or the repeat distribution
changes every pseudo-translation ever produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class LcgParameters:
    """
    Linear-congruential generator parameters: state' = (a * state + c) mod m.

    Defaults are the ANSI C rand() constants.
    """

    multiplier: int = 1103515245
    increment: int = 12345
    modulus: int = 2 ** 31

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError(f"modulus must be positive: {self.modulus}")
        if not 0 < self.multiplier < self.modulus:
            raise ValueError(f"multiplier must be in (0, modulus): {self.multiplier}")
        if not 0 <= self.increment < self.modulus:
            raise ValueError(f"increment must be in [0, modulus): {self.increment}")


@dataclass(frozen=True)
class Choices(Generic[T]):
    """
    Non-empty ordered collection to draw from.

    Emptiness is rejected here, at construction, so drawing from a
    Choices never needs to check it.
    """

    items: Tuple[T, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        if not self.items:
            raise ValueError("Choices cannot be empty")

    @classmethod
    def of(cls, items: Iterable[T]) -> Choices[T]:
        return cls(tuple(items))

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)


def _code_point_range(first: int, last: int) -> Iterator[str]:
    return (chr(cp) for cp in range(first, last + 1))


DEFAULT_LCG = LcgParameters()

# U+034F (combining grapheme joiner) is excluded
COMBINING_MARKS: Choices[str] = Choices.of([
    *_code_point_range(0x0300, 0x034E),
    *_code_point_range(0x0350, 0x036F),
    *_code_point_range(0xFE20, 0xFE23),
])

# 1: 5/11, 2: 3/11, 3: 2/11, 4: 1/11
VOWEL_REPEATS: Choices[int] = Choices.of([1] * 5 + [2] * 3 + [3] * 2 + [4])

VOWELS = frozenset("aeiouAEIOU")

OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
