"""
Module: transform.text

Purpose:
    Pseudo-translates one literal string. Two passes, always in this
    order, each threading the PRNG state left to right:

    1. repeat_vowels: every ASCII vowel is emitted 1-4 times
    2. add_accents: every Latin-1 letter (including repeated vowels)
       is followed by one combining diacritical mark

Key Functions:
    - repeat_vowels(text, state)
    - add_accents(text, state)
    - pseudo_text(text, state): Both passes composed

Dependencies:
    - transform.prng: LcgState
    - transform.codepoints: Classifiers
    - transform.constants: COMBINING_MARKS, VOWEL_REPEATS

Used By:
    - transform.message: Applied to every top-level literal
"""

from __future__ import annotations

from typing import Tuple

from .codepoints import is_plain_latin_letter, is_vowel
from .constants import COMBINING_MARKS, VOWEL_REPEATS
from .prng import LcgState


def repeat_vowels(text: str, state: LcgState) -> Tuple[str, LcgState]:
    """
    Repeat each vowel a randomly drawn number of times.

    Non-vowels are copied once and consume no state.

    Args:
        text: Input text
        state: PRNG state before the first vowel

    Returns:
        (expanded text, state after the last vowel)
    """
    out = []
    for ch in text:
        if is_vowel(ch):
            count, state = state.choose(VOWEL_REPEATS)
            out.append(ch * count)
        else:
            out.append(ch)
    return "".join(out), state


def add_accents(text: str, state: LcgState) -> Tuple[str, LcgState]:
    """
    Follow each plain Latin letter with one randomly drawn combining mark.

    Args:
        text: Input text (normally the output of repeat_vowels)
        state: PRNG state before the first letter

    Returns:
        (accented text, state after the last letter)
    """
    out = []
    for ch in text:
        out.append(ch)
        if is_plain_latin_letter(ch):
            mark, state = state.choose(COMBINING_MARKS)
            out.append(mark)
    return "".join(out), state


def pseudo_text(text: str, state: LcgState) -> Tuple[str, LcgState]:
    """
    Pseudo-translate one string: vowel repetition, then accenting.

    Example:
        >>> from pseudoloc.transform.prng import seed
        >>> pseudo_text("cat", seed(3))[0] == "c\\u0315a\\u032ft\\u033c"
        True
    """
    text, state = repeat_vowels(text, state)
    return add_accents(text, state)
