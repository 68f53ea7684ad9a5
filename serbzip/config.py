"""Configuration constants, dictionary locations, and .env loading.

WHY: Centralizes the values a user may want to change (where the default
dictionary lives, where it is downloaded from, which codec runs by
default) so they are easy to find and override without touching logic.

HOW: python-dotenv loads the .env file on import. Constants are plain
module-level strings; the few that make sense to override read from the
environment with a hardcoded fallback.

RULES:
- Dictionary files are recognised by extension: .txt (wordlist) or .blk (image)
- The home dictionary path may start with "~"; expand it before use
- All overridable defaults use the SERBZIP_ prefix
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

# ---------------------------------------------------------------------------
# Dictionary file formats
# ---------------------------------------------------------------------------

DICT_EXT_BINARY = ".blk"
"""Extension of compiled (binary image) dictionaries."""

DICT_EXT_TEXT = ".txt"
"""Extension of plain whitespace-delimited wordlists."""

DEFAULT_DICT_BINARY_FILE = "dict.blk"
DEFAULT_DICT_TEXT_FILE = "dict.txt"

# ---------------------------------------------------------------------------
# Overridable defaults
# ---------------------------------------------------------------------------

DICT_URL = os.getenv(
    "SERBZIP_DICT_URL",
    "https://github.com/ekoutanov/serbzip/raw/master/dict.blk",
)
HOME_DICT_FILE = os.getenv("SERBZIP_HOME_DICT", "~/.serbzip/dict.blk")
DEFAULT_CODEC = os.getenv("SERBZIP_DEFAULT_CODEC", "balkanoid")


def home_dict_path() -> Path:
    """Return the per-user dictionary path with "~" expanded."""
    return Path(HOME_DICT_FILE).expanduser()
