"""Shared test fixtures for the serbzip test suite.

WHY: Most codec tests need the same handful of small dictionaries whose
group order is easy to reason about by hand.

HOW: Pytest fixtures build Dictionary instances from short wordlists.

RULES:
- Group order follows (UTF-8 byte length, then lexicographic), so
  "in" is position 0 and "on" position 1 under fingerprint "n"
- Fixtures return fresh instances; tests may not rely on shared state
"""

from typing import List

import pytest

from serbzip.codecs.balkanoid import Balkanoid
from serbzip.core.dictionary import Dictionary

SMALL_WORDS: List[str] = ["in", "on", "as", "is"]
CONFLICT_WORDS: List[str] = ["count", "canet"]

SAMPLE_WORDLIST = """\
the of and to in a is that for it as was with be by on not he
i this are or his from at which but have an they you were her she
there one all we their has been would more when if will what so no
said who up out into them my can only other new some time could
these two may then do first any now such like our over man me even
most made after also did many before must through back years where
much your way down should because each just those people mr how too
little state good very make world still own see men work long get
here between both life being under never day same another know while
last might us great old year off come since against go came right
used take three
"""


@pytest.fixture
def sample_wordlist():
    """Whitespace-delimited wordlist text of common English words."""
    return SAMPLE_WORDLIST


@pytest.fixture
def small_dict():
    """Dictionary {"in", "on", "as", "is"}: groups n=[in, on], s=[as, is]."""
    return Dictionary.from_words(SMALL_WORDS)


@pytest.fixture
def conflict_dict():
    """Dictionary {"count", "canet"}: group cnt=[canet, count]."""
    return Dictionary.from_words(CONFLICT_WORDS)


@pytest.fixture
def sample_dict():
    """Dictionary built from a short list of common English words."""
    return Dictionary.from_words(SAMPLE_WORDLIST.split())


@pytest.fixture
def balkanoid(sample_dict):
    return Balkanoid(sample_dict)
