"""
Unit Tests for the Literal-Text Transformer

Tests for repeat_vowels, add_accents and pseudo_text.
"""

import re

import pytest

from pseudoloc.transform.constants import COMBINING_MARKS
from pseudoloc.transform.prng import seed
from pseudoloc.transform.text import add_accents, pseudo_text, repeat_vowels

MARKS = set(COMBINING_MARKS.items)


class TestRepeatVowels:
    """Tests for the vowel repetition pass."""

    def test_repeat_when_seed_four_then_reference_output(self):
        """'i' draws index 9 of the distribution from seed 4, i.e. three copies."""
        text, state = repeat_vowels("Hi ", seed(4))
        assert text == "Hiii "
        assert state.value == 119106029

    def test_repeat_when_no_vowels_then_no_state_consumed(self):
        state = seed(10)
        text, after = repeat_vowels("rhythm 42!", state)
        assert text == "rhythm 42!"
        assert after == state

    def test_repeat_when_many_vowels_then_each_run_between_one_and_four(self):
        """Separated vowels expand to runs of 1-4 copies."""
        source = "a-e-i-o-u-A-E-I-O-U-" * 20
        text, _ = repeat_vowels(source, seed(123))
        lengths = [m.end() - m.start() for m in re.finditer(r"([aeiouAEIOU])\1*", text)]
        assert len(lengths) == 200
        assert all(1 <= n <= 4 for n in lengths)
        assert text.replace("-", "").strip("aeiouAEIOU") == ""

    def test_repeat_when_accented_vowel_then_untouched(self):
        state = seed(1)
        text, after = repeat_vowels("\u00e9\u00fc", state)
        assert text == "\u00e9\u00fc"
        assert after == state


class TestAddAccents:
    """Tests for the accenting pass."""

    def test_accent_when_letters_then_each_followed_by_one_mark(self):
        text, _ = add_accents("Ab c", seed(9))
        assert text[0] == "A" and text[1] in MARKS
        assert text[2] == "b" and text[3] in MARKS
        assert text[4] == " "
        assert text[5] == "c" and text[6] in MARKS
        assert len(text) == 7

    def test_accent_when_non_letters_then_unchanged_and_no_state_consumed(self):
        state = seed(5)
        text, after = add_accents("123 !?\u0416\u4e2d", state)
        assert text == "123 !?\u0416\u4e2d"
        assert after == state

    def test_accent_when_unpaired_surrogate_then_passed_through(self):
        text, _ = add_accents("\ud800", seed(5))
        assert text == "\ud800"


class TestPseudoText:
    """Tests for the composed transformation."""

    def test_pseudo_text_when_cat_seed_three_then_golden(self):
        """'cat' from seed 3: 'a' kept once, marks U+0315, U+032F, U+033C."""
        text, state = pseudo_text("cat", seed(3))
        assert text == "c\u0315a\u032ft\u033c"
        assert state.value == 544774495

    def test_pseudo_text_when_single_vowel_seed_one_then_golden(self):
        """Draw 95 lands in the second mark range (U+0350 + 16)."""
        text, _ = pseudo_text("a", seed(1))
        assert text == "a\u0360"

    def test_pseudo_text_when_repeated_vowels_then_every_copy_accented(self):
        text, _ = pseudo_text("Hi ", seed(4))
        assert text == "H\u0321i\u031fi\u0348i\u0359 "

    def test_pseudo_text_when_empty_then_empty_and_state_unchanged(self):
        state = seed(0)
        assert pseudo_text("", state) == ("", state)

    @pytest.mark.parametrize("source", ["Hello, world!", "\u00dcn\u00efc\u00f6d\u00e9 fa\u00e7ade", "x = 1 + 2"])
    def test_pseudo_text_when_stripped_of_marks_then_letters_preserved(self, source):
        """Removing marks and collapsing vowel runs gives back the source."""
        text, _ = pseudo_text(source, seed(len(source)))
        stripped = "".join(ch for ch in text if ch not in MARKS)
        collapsed = re.sub(r"([aeiouAEIOU])\1*", r"\1", stripped)
        assert collapsed == re.sub(r"([aeiouAEIOU])\1*", r"\1", source)

    def test_pseudo_text_when_called_twice_then_identical(self):
        assert pseudo_text("Deterministic", seed(13)) == pseudo_text("Deterministic", seed(13))
