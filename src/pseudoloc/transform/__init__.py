"""
Transform Package

Deterministic pseudo-translation of message trees.

Layers, leaves first:
- prng: seeded linear-congruential generator with immutable state
- codepoints: letter and vowel classification
- text: vowel repetition and accenting of one string
- message: seeding, tree fold and bracket wrapping
"""

from .message import literal_seed, pseudo_translate
from .prng import LcgState, seed
from .text import add_accents, pseudo_text, repeat_vowels

__all__ = [
    "LcgState",
    "add_accents",
    "literal_seed",
    "pseudo_text",
    "pseudo_translate",
    "repeat_vowels",
    "seed",
]
