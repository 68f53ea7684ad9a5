"""Abstract base codec.

WHY: The CLI and library users should be able to drive any codec the same
way: per line, or over a whole stream. This base class fixes that
interface so codecs only implement the per-line transforms.

HOW: BaseCodec is an ABC with a ``name`` property and two per-line
methods. compress() and expand() are concrete and run the per-line
methods through the stream transcoder. ``expand_errors`` lists the
exception types a codec's expand_line() raises for an unexpandable line.

RULES:
- compress_line() is total: it must accept any text and never raise
- expand_line() may raise only the types listed in expand_errors
- Whole-stream expand() reports failures as TranscodeError with a line number

To add a new codec:
1. Create a new module in codecs/
2. Subclass BaseCodec and implement name, compress_line() and expand_line()
3. Register it in CODECS in codecs/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, TextIO, Tuple, Type

from serbzip.core.transcoder import transcode


class BaseCodec(ABC):
    """Abstract base for all line codecs."""

    expand_errors: ClassVar[Tuple[Type[Exception], ...]] = ()
    """Exception types expand_line() raises for a line it cannot expand."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable codec name, e.g. 'Balkanoid'."""

    @abstractmethod
    def compress_line(self, line: str) -> str:
        """Encode one line of text (without its newline)."""

    @abstractmethod
    def expand_line(self, line: str) -> str:
        """Decode one line previously produced by compress_line()."""

    def compress(self, reader: TextIO, writer: TextIO) -> int:
        """Compress every line of ``reader`` into ``writer``.

        Returns:
            The number of lines written.
        """
        return transcode(reader, writer, lambda _, line: self.compress_line(line))

    def expand(self, reader: TextIO, writer: TextIO) -> int:
        """Expand every line of ``reader`` into ``writer``.

        Returns:
            The number of lines written.

        Raises:
            TranscodeError: If a line could not be expanded.
        """
        return transcode(
            reader,
            writer,
            lambda _, line: self.expand_line(line),
            conversion_errors=self.expand_errors,
        )
