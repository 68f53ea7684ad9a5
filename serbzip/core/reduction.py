"""Vowel classification and word reduction.

WHY: A word's fingerprint is its consonant skeleton: every vowel removed
and every remaining letter lower-cased. Fingerprints are the dictionary
keys, and they are what appears in compressed text in place of a
dictionary word. The capitalisation of the original word is recorded
separately so it can be re-applied to the fingerprint and, on expansion,
to the resolved word.

HOW: Reduction.from_word() walks the characters once, recording upper-case
positions and appending non-vowels (lower-cased) to the fingerprint.
restore_capitalisation() re-applies the two-flag capitalisation rule.

RULES:
- The vowel set is fixed: Latin a e i o u plus Cyrillic а э ы у я е ё ю и о,
  in both cases; no other normalisation is performed
- A fingerprint never contains a vowel; it may be empty
- A reduction is "lowercase" iff it has no capitals at all
"""

from __future__ import annotations

from dataclasses import dataclass

_LOWER_VOWELS = "aeiou" "аэыуяеёюио"

VOWELS = frozenset(_LOWER_VOWELS + _LOWER_VOWELS.upper())
"""Latin and Cyrillic vowels, both cases."""


def is_vowel(ch: str) -> bool:
    return ch in VOWELS


def contains_vowels(text: str) -> bool:
    return any(ch in VOWELS for ch in text)


@dataclass(frozen=True)
class Reduction:
    """The fingerprint of a word together with its capitalisation metadata.

    Attributes:
        fingerprint: The word with vowels removed, remaining letters lower-cased.
        leading_capital: True if the first character was upper-case.
        trailing_capitals: Number of upper-case characters after the first.
    """

    fingerprint: str
    leading_capital: bool = False
    trailing_capitals: int = 0

    @classmethod
    def from_word(cls, word: str) -> Reduction:
        fingerprint = []
        leading_capital = False
        trailing_capitals = 0
        for position, ch in enumerate(word):
            if ch.isupper():
                if position == 0:
                    leading_capital = True
                else:
                    trailing_capitals += 1
            if ch not in VOWELS:
                # some characters lower-case to more than one code point
                fingerprint.append(ch.lower()[0] if ch.isupper() else ch)
        return cls("".join(fingerprint), leading_capital, trailing_capitals)

    @property
    def is_lowercase(self) -> bool:
        return not self.leading_capital and self.trailing_capitals == 0


def restore_capitalisation(
    lowercase_word: str,
    leading_capital: bool,
    nonleading_capital: bool,
) -> str:
    """Re-apply capitalisation to a lower-case word.

    A non-leading capital upper-cases the whole word; a leading capital
    alone upper-cases the first character; otherwise the word is returned
    as is.
    """
    if nonleading_capital:
        return lowercase_word.upper()
    if leading_capital and lowercase_word:
        return lowercase_word[0].upper() + lowercase_word[1:]
    return lowercase_word
