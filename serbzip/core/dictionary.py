"""The fingerprint dictionary: word groups keyed by consonant skeleton.

WHY: Many words share a fingerprint ("in", "on", "an" all reduce to "n").
Compressed text carries only the fingerprint plus a position, so every
fingerprint needs a stable, ordered list of the words behind it. Both the
compressing and the expanding side must build the same lists.

HOW: WordVec is a sorted, duplicate-free list of at most 255 words. The
sort key is (UTF-8 byte length, then lexicographic), so short, common
forms take the low positions, which are the cheapest to encode (zero or
one extra space). Dictionary maps fingerprint -> WordVec and owns
population from wordlists and persistence to and from binary images.

RULES:
- Only pure-lowercase words with a non-empty fingerprint are indexed
- Pushing into a full WordVec raises DictOverflowError, even for a
  word already present
- Positions are 0..254; resolve() distinguishes "unknown fingerprint"
  (None) from "known fingerprint, no such position" (WordResolveError)
- A populated Dictionary is never mutated by the codecs
"""

from __future__ import annotations

import bisect
import logging
from typing import BinaryIO, Dict, Iterable, Iterator, List, Mapping, Optional, TextIO, Tuple

from serbzip.core import image
from serbzip.core.reduction import Reduction
from serbzip.errors import DictOverflowError, WordResolveError

logger = logging.getLogger(__name__)

WORD_VEC_CAPACITY = 255
"""Maximum number of words per fingerprint group.

An 8-bit position could address 256 entries; the last one is left unused
for compatibility with existing dictionaries and compressed streams.
"""


def _sort_key(word: str) -> Tuple[int, str]:
    return len(word.encode("utf-8")), word


class WordVec:
    """A capacity-bounded, sorted, duplicate-free list of words."""

    __slots__ = ("_words", "_keys")

    def __init__(self) -> None:
        self._words: List[str] = []
        self._keys: List[Tuple[int, str]] = []

    @classmethod
    def from_words(cls, words: Iterable[str]) -> WordVec:
        vec = cls()
        for word in words:
            vec.push(word)
        return vec

    @classmethod
    def from_ordered(cls, words: Iterable[str]) -> WordVec:
        """Build a vector that keeps the given order verbatim.

        Used when loading a dictionary image, where the stored order is
        what positions refer to.

        Raises:
            DictOverflowError: If there are more than WORD_VEC_CAPACITY words.
        """
        vec = cls()
        vec._words = list(words)
        if len(vec._words) > WORD_VEC_CAPACITY:
            raise DictOverflowError(
                "{} words exceed the group limit of {}".format(len(vec._words), WORD_VEC_CAPACITY)
            )
        vec._keys = [_sort_key(word) for word in vec._words]
        return vec

    def push(self, word: str) -> None:
        """Insert a word at its sorted position; no-op if already present.

        Raises:
            DictOverflowError: If the vector already holds WORD_VEC_CAPACITY words.
        """
        if len(self._words) >= WORD_VEC_CAPACITY:
            raise DictOverflowError(
                "too many words associated with the fingerprint of '{}' (limit {})".format(
                    word, WORD_VEC_CAPACITY
                )
            )
        key = _sort_key(word)
        index = bisect.bisect_left(self._keys, key)
        if index < len(self._keys) and self._keys[index] == key:
            return
        self._keys.insert(index, key)
        self._words.insert(index, word)

    def position_of(self, word: str) -> Optional[int]:
        try:
            return self._words.index(word)
        except ValueError:
            return None

    def get(self, position: int) -> Optional[str]:
        if 0 <= position < len(self._words):
            return self._words[position]
        return None

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordVec):
            return NotImplemented
        return self._words == other._words

    def __repr__(self) -> str:
        return "WordVec({!r})".format(self._words)


class Dictionary:
    """Map from fingerprint to the ordered group of words sharing it.

    WHY: This is the codebook that both parties must hold. Its group order
    is part of the contract: a word's position inside its group is what
    the compressed text encodes.

    HOW: Built once, via populate(), read_from_text_file() or
    read_from_binary_image(); then only queried.

    RULES:
    - populate() silently skips capitalised words and pure-vowel words
    - Equality compares every group, including word order
    """

    def __init__(self, entries: Optional[Dict[str, WordVec]] = None) -> None:
        self._entries: Dict[str, WordVec] = entries if entries is not None else {}

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        dictionary = cls()
        dictionary.populate(words)
        return dictionary

    @classmethod
    def from_entries(cls, entries: Mapping[str, Iterable[str]]) -> Dictionary:
        """Build a dictionary from a prepared fingerprint -> words mapping.

        The words are pushed through WordVec, so they end up sorted and
        de-duplicated regardless of the input order.
        """
        return cls({fingerprint: WordVec.from_words(words) for fingerprint, words in entries.items()})

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def populate(self, words: Iterable[str]) -> None:
        """Index every pure-lowercase word with a non-empty fingerprint.

        Raises:
            DictOverflowError: If a fingerprint group would exceed capacity.
        """
        for word in words:
            reduction = Reduction.from_word(word)
            if not reduction.is_lowercase or not reduction.fingerprint:
                continue
            vec = self._entries.get(reduction.fingerprint)
            if vec is None:
                vec = self._entries[reduction.fingerprint] = WordVec()
            vec.push(word)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def count(self) -> int:
        """Total number of words across all fingerprint groups."""
        return sum(len(vec) for vec in self._entries.values())

    def position(self, fingerprint: str, word: str) -> Optional[int]:
        vec = self._entries.get(fingerprint)
        if vec is None:
            return None
        return vec.position_of(word)

    def resolve(self, fingerprint: str, position: int) -> Optional[str]:
        """Resolve the word at a position within a fingerprint group.

        Returns None if the fingerprint is not in the dictionary: such a
        word was never substituted and is to be taken literally.

        Raises:
            WordResolveError: If the fingerprint exists but no word sits
                at the given position.
        """
        vec = self._entries.get(fingerprint)
        if vec is None:
            return None
        word = vec.get(position)
        if word is None:
            raise WordResolveError(fingerprint, position)
        return word

    def contains_fingerprint(self, fingerprint: str) -> bool:
        return fingerprint in self._entries

    def groups(self) -> Dict[str, List[str]]:
        """Return a plain copy of every group, in position order."""
        return {fingerprint: list(vec) for fingerprint, vec in self._entries.items()}

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return "Dictionary({} fingerprints, {} words)".format(len(self._entries), self.count())

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def write_to_binary_image(self, stream: BinaryIO) -> int:
        """Write the dictionary as a binary image; return the bytes written."""
        data = image.encode_groups(self.groups())
        stream.write(data)
        logger.debug("Wrote dictionary image: %d bytes, %d words", len(data), self.count())
        return len(data)

    @classmethod
    def read_from_binary_image(cls, stream: BinaryIO) -> Dictionary:
        """Load a dictionary from a binary image.

        Raises:
            ImageFormatError: If the image is truncated or malformed.
            DictOverflowError: If a stored group exceeds capacity.
        """
        groups = image.decode_groups(stream.read())
        entries = {fingerprint: WordVec.from_ordered(words) for fingerprint, words in groups.items()}
        dictionary = cls(entries)
        logger.debug("Loaded dictionary image: %r", dictionary)
        return dictionary

    @classmethod
    def read_from_text_file(cls, stream: TextIO) -> Dictionary:
        """Load a dictionary from a whitespace-delimited wordlist.

        Raises:
            DictOverflowError: If a fingerprint group would exceed capacity.
        """
        dictionary = cls()
        for line in stream:
            dictionary.populate(line.split())
        logger.debug("Loaded wordlist: %r", dictionary)
        return dictionary
