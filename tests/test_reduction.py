"""Unit tests for vowel classification and word reduction.

WHY: The fingerprint is the dictionary key and the compressed form of
every substituted word. A wrong vowel set or capital count would silently
change which words collide and how they are recapitalised.

HOW: Table-driven checks of is_vowel, Reduction.from_word and
restore_capitalisation.

RULES:
- Cyrillic vowels are covered alongside Latin ones
- Non-letters pass through into the fingerprint unchanged
"""

import pytest

from serbzip.core.reduction import (
    VOWELS,
    Reduction,
    contains_vowels,
    is_vowel,
    restore_capitalisation,
)


class TestVowels:
    @pytest.mark.parametrize("ch", list("aeiouAEIOU") + list("аэыуяеёюиоАЭЫУЯЕЁЮИО"))
    def test_vowels(self, ch):
        assert is_vowel(ch)

    @pytest.mark.parametrize("ch", ["b", "Y", "y", "б", "Щ", "é", "1", " ", "\\"])
    def test_non_vowels(self, ch):
        assert not is_vowel(ch)

    def test_vowel_set_size(self):
        assert len(VOWELS) == 30

    def test_contains_vowels(self):
        assert contains_vowels("rhythm and")
        assert contains_vowels("блок")
        assert not contains_vowels("rhythm")
        assert not contains_vowels("")


class TestReduction:
    @pytest.mark.parametrize(
        "word, fingerprint, leading, trailing",
        [
            ("fox", "fx", False, 0),
            (" foxy ", " fxy ", False, 0),
            ("Fox", "fx", True, 0),
            ("FoX", "fx", True, 1),
            (" FoX", " fx", False, 2),
            ("AIO", "", True, 2),
            ("", "", False, 0),
            ("Яблоко", "блк", True, 0),
            ("half-time", "hlf-tm", False, 0),
        ],
    )
    def test_from_word(self, word, fingerprint, leading, trailing):
        assert Reduction.from_word(word) == Reduction(fingerprint, leading, trailing)

    def test_is_lowercase(self):
        assert Reduction.from_word("test").is_lowercase
        assert not Reduction.from_word("tesT").is_lowercase
        assert not Reduction.from_word("Test").is_lowercase

    def test_fingerprint_never_contains_vowels(self):
        for word in ["Education", "ОБОРОНА", "queueing", "sky"]:
            assert not contains_vowels(Reduction.from_word(word).fingerprint)


class TestRestoreCapitalisation:
    @pytest.mark.parametrize(
        "word, leading, nonleading, expected",
        [
            ("count", False, False, "count"),
            ("count", True, False, "Count"),
            ("count", True, True, "COUNT"),
            ("count", False, True, "COUNT"),
            ("n", True, False, "N"),
            ("блк", True, False, "Блк"),
            ("", True, False, ""),
        ],
    )
    def test_restore(self, word, leading, nonleading, expected):
        assert restore_capitalisation(word, leading, nonleading) == expected
