"""Line-by-line stream transcoding.

WHY: Codecs work on single lines. Something has to read a stream, feed
each line to the codec, write the result, and, when a line cannot be
converted, report which one it was.

HOW: transcode() iterates the reader's lines, strips one trailing
newline, hands (line_no, line) to the processor, and writes the output
followed by a newline. Exceptions of the declared conversion types are
re-raised as TranscodeError carrying the 1-based line number.

RULES:
- Line numbers start at 1
- Exactly one trailing "\\n" is stripped per line; every output line ends with "\\n"
- Only the declared conversion error types are wrapped; OSError and
  anything else propagate unchanged
- Output already written for earlier lines is left in place on failure
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TextIO, Tuple, Type

from serbzip.errors import TranscodeError

logger = logging.getLogger(__name__)

LineProcessor = Callable[[int, str], str]


def transcode(
    reader: TextIO,
    writer: TextIO,
    processor: LineProcessor,
    conversion_errors: Tuple[Type[Exception], ...] = (),
) -> int:
    """Transcode a text stream line by line.

    Args:
        reader: Source of lines (any iterable text stream).
        writer: Destination; only write() is used.
        processor: Called with (line_no, line) for every line; returns the
            converted line without its newline.
        conversion_errors: Exception types raised by the processor that
            signal an unconvertible line.

    Returns:
        The number of lines transcoded.

    Raises:
        TranscodeError: If the processor raised one of conversion_errors.
    """
    line_no = 0
    for line_no, line in enumerate(reader, start=1):
        if line.endswith("\n"):
            line = line[:-1]
        try:
            output = processor(line_no, line)
        except conversion_errors as e:
            raise TranscodeError(line_no, e) from e
        writer.write(output)
        writer.write("\n")
    logger.debug("Transcoded %d line(s)", line_no)
    return line_no
