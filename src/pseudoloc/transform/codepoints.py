"""Code-point classification for the pseudo-translation passes.

Both predicates take a single code point as a one-character string.
Unpaired surrogates fall through as "neither", so they are passed on
unchanged by the text passes.
"""

from __future__ import annotations

from .constants import VOWELS

LATIN1_MAX = 0xFF


def is_plain_latin_letter(ch: str) -> bool:
    """True for alphabetic characters in the Latin-1 range (U+0000-U+00FF)."""
    return ord(ch) <= LATIN1_MAX and ch.isalpha()


def is_vowel(ch: str) -> bool:
    """True for the ASCII vowels a e i o u, either case."""
    return ch in VOWELS
