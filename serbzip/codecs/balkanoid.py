"""Balkanoid: the fingerprint-substitution codec.

WHY: Most words in prose are common words. If the compressing and the
expanding side share a Dictionary, a common word can be written as its
vowel-free fingerprint plus a position within the fingerprint's group.
The position costs nothing for the most frequent forms, which sit at the
front of their group, and is otherwise written as extra leading spaces.

HOW: Every whitespace-delimited token is split into an alphabetic prefix
and a verbatim suffix (punctuation, digits, symbols). The prefix is then
encoded by one of five rules (see CompressionRule). Expansion reverses
the rules using only what is visible in the compressed text: a leading
escape marker, the presence of vowels, and the run of spaces before the
token.

RULES:
- Substituted words are always vowel-free, so any token with a vowel is
  a literal
- An all-consonant literal whose fingerprint is in the dictionary is
  escaped with a leading backslash; so is a literal that already starts
  with a backslash
- Expansion strips exactly one escape marker and does nothing else to an
  escaped word
- Literal words keep their capitalisation exactly; substituted words
  carry only the two-flag capitalisation (leading, any non-leading)
- Tokens are re-joined with single spaces; leading and repeated
  whitespace in the source line is not preserved
- U+200E LEFT-TO-RIGHT MARK separates words in compressed text, so a mark
  inside a source token comes back as a space after expansion
- A dictionary word whose capitalised fingerprint does not lower-case back
  to the fingerprint is written as a literal instead
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Tuple

from serbzip.codecs.base import BaseCodec
from serbzip.core.dictionary import Dictionary
from serbzip.core.reduction import Reduction, contains_vowels, restore_capitalisation
from serbzip.errors import WordResolveError

ESCAPE = "\\"
"""Marks a word to be taken literally on expansion."""

# Treated as a space when parsing compressed text, for bidi-aware editors
_LEFT_TO_RIGHT_MARK = "\u200e"
_SEPARATORS = frozenset((" ", _LEFT_TO_RIGHT_MARK))


class CompressionRule(enum.Enum):
    """How the prefix of a token was encoded.

    RULES:
    - IN_DICT: the lower-cased prefix is a dictionary word; written as its
      recapitalised fingerprint, position as extra leading spaces
    - NOT_IN_DICT_WITH_VOWELS: literal; vowels make it unambiguous
    - NO_FINGERPRINT_IN_DICT: all-consonant literal whose fingerprint is
      unknown to the dictionary, so expansion leaves it alone
    - CONFLICT: all-consonant literal that collides with a known
      fingerprint; escaped
    - ESCAPED: literal that already begins with the escape marker; escaped
    """

    IN_DICT = "in_dict"
    NOT_IN_DICT_WITH_VOWELS = "not_in_dict_with_vowels"
    NO_FINGERPRINT_IN_DICT = "no_fingerprint_in_dict"
    CONFLICT = "conflict"
    ESCAPED = "escaped"


@dataclass(frozen=True)
class EncodedWord:
    """One token of compressed text.

    Attributes:
        leading_spaces: Extra spaces written before the body (the position
            of a substituted word; 0 for literals).
        body: The encoded token, never empty.
    """

    leading_spaces: int
    body: str

    @classmethod
    def parse_line(cls, line: str) -> List[EncodedWord]:
        """Split compressed text into words, counting the spaces before each.

        The single separator after a word is consumed with it, so the count
        for every word but the first is the number of *extra* spaces.
        """
        words: List[EncodedWord] = []
        buf: List[str] = []
        leading_spaces = 0
        for ch in line:
            if ch in _SEPARATORS:
                if buf:
                    words.append(cls(leading_spaces, "".join(buf)))
                    buf = []
                    leading_spaces = 0
                else:
                    leading_spaces += 1
            else:
                buf.append(ch)
        if buf:
            words.append(cls(leading_spaces, "".join(buf)))
        return words


@dataclass(frozen=True)
class SplitWord:
    """A token split into its alphabetic prefix and verbatim suffix."""

    prefix: str
    suffix: str

    @classmethod
    def from_token(cls, token: str) -> SplitWord:
        """Split at the first character that cannot continue the prefix.

        The first character may be a letter or the escape marker; every
        later one must be a letter.
        """
        for position, ch in enumerate(token):
            if position == 0:
                continues = ch.isalpha() or ch == ESCAPE
            else:
                continues = ch.isalpha()
            if not continues:
                return cls(token[:position], token[position:])
        return cls(token, "")


def encode_prefix(dictionary: Dictionary, prefix: str) -> Tuple[CompressionRule, int, str]:
    """Encode the alphabetic prefix of a token.

    Returns:
        (rule, leading_spaces, encoded_prefix)
    """
    if prefix.startswith(ESCAPE):
        return CompressionRule.ESCAPED, 0, ESCAPE + prefix

    reduction = Reduction.from_word(prefix)
    position = dictionary.position(reduction.fingerprint, prefix.lower())
    if position is not None:
        encoded = restore_capitalisation(
            reduction.fingerprint,
            reduction.leading_capital,
            reduction.trailing_capitals != 0,
        )
        # upper() is not always length-preserving ("ß" -> "SS")
        if encoded.lower() == reduction.fingerprint:
            return CompressionRule.IN_DICT, position, encoded
    if contains_vowels(prefix):
        return CompressionRule.NOT_IN_DICT_WITH_VOWELS, 0, prefix
    if not dictionary.contains_fingerprint(reduction.fingerprint):
        return CompressionRule.NO_FINGERPRINT_IN_DICT, 0, prefix
    return CompressionRule.CONFLICT, 0, ESCAPE + prefix


def compress_word(dictionary: Dictionary, word: str) -> EncodedWord:
    """Compress a single non-empty token."""
    split = SplitWord.from_token(word)
    _, leading_spaces, encoded_prefix = encode_prefix(dictionary, split.prefix)
    return EncodedWord(leading_spaces, encoded_prefix + split.suffix)


def expand_word(dictionary: Dictionary, word: EncodedWord) -> str:
    """Expand a single compressed token.

    Raises:
        WordResolveError: If the token names a known fingerprint at a
            position that holds no word.
    """
    split = SplitWord.from_token(word.body)
    prefix = split.prefix
    if not prefix:
        return word.body

    if prefix.startswith(ESCAPE):
        return prefix[1:] + split.suffix

    if contains_vowels(prefix):
        return prefix + split.suffix

    leading_capital = prefix[0].isupper()
    nonleading_capital = len(prefix) > 1 and prefix[1].isupper()
    resolved = dictionary.resolve(prefix.lower(), word.leading_spaces)
    if resolved is None:
        return prefix + split.suffix
    return restore_capitalisation(resolved, leading_capital, nonleading_capital) + split.suffix


class Balkanoid(BaseCodec):
    """Dictionary-backed fingerprint codec.

    WHY: Shrinks prose by replacing dictionary words with their consonant
    skeletons, while keeping the output readable text.

    HOW: compress_line() encodes every whitespace-delimited token and
    re-joins them with one space plus each token's leading spaces.
    expand_line() parses those runs back and expands each token, stopping
    at the first one that cannot be resolved.

    RULES:
    - The dictionary is shared read-only; one instance may serve many threads
    - compress_line() never raises
    - expand_line() raises WordResolveError for the first bad token
    """

    expand_errors = (WordResolveError,)

    def __init__(self, dictionary: Dictionary) -> None:
        self._dictionary = dictionary

    @property
    def name(self) -> str:
        return "Balkanoid"

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    def compress_line(self, line: str) -> str:
        parts: List[str] = []
        for index, token in enumerate(line.split()):
            if index > 0:
                parts.append(" ")
            encoded = compress_word(self._dictionary, token)
            parts.append(" " * encoded.leading_spaces)
            parts.append(encoded.body)
        return "".join(parts)

    def expand_line(self, line: str) -> str:
        expanded: List[str] = []
        for word in EncodedWord.parse_line(line):
            expanded.append(expand_word(self._dictionary, word))
        return " ".join(expanded)
