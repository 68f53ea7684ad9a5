"""Codec registry: pluggable codec hub.

WHY: The CLI needs a single lookup to find a codec by name, and adding a
codec should not require touching the CLI.

HOW: CODECS maps string keys to codec *classes* (not instances). Callers
instantiate with whatever the codec needs, e.g.
``codec = CODECS["balkanoid"](dictionary)``.

RULES:
- Keys are lowercase identifiers (used by the --codec flag)
- Values are BaseCodec subclasses
- Every codec listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

from serbzip.codecs.balkanoid import Balkanoid

if TYPE_CHECKING:
    from serbzip.codecs.base import BaseCodec

CODECS: Dict[str, Type[BaseCodec]] = {
    "balkanoid": Balkanoid,
}
