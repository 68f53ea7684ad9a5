"""Exception hierarchy shared by every serbzip layer.

WHY: Callers (the CLI, the stream transcoder, library users) need typed
exceptions to tell a corrupted stream apart from an over-full dictionary
or a bad dictionary image, without parsing message strings.

HOW: Every package error derives from SerbzipError. Where a built-in
exception already describes the failure category (OverflowError,
ValueError), the package error also derives from it so generic handlers
keep working.

RULES:
- I/O errors are never wrapped; OSError propagates unchanged
- Compression never raises any of these
- Expansion raises WordResolveError, wrapped per line in TranscodeError
"""

from __future__ import annotations


class SerbzipError(Exception):
    """Base class for all serbzip errors."""


class DictOverflowError(SerbzipError, OverflowError):
    """Raised when a fingerprint group would exceed its fixed capacity.

    WHY: Positions are encoded as a run of up to 255 extra spaces, so a
    group cannot hold more words than an 8-bit index can address.

    RULES:
    - Raised by WordVec.push and therefore by Dict.populate
    - Fatal to the populate call; the caller decides whether to abort
    """


class WordResolveError(SerbzipError):
    """Raised when a known fingerprint has no word at the given position.

    WHY: This only happens when the compressed stream was mangled or was
    produced with a different dictionary. It is not retryable.
    """

    def __init__(self, fingerprint: str, position: int) -> None:
        self.fingerprint = fingerprint
        self.position = position
        super().__init__(
            "no dictionary word at position {} for fingerprint '{}'".format(
                position, fingerprint
            )
        )


class ImageFormatError(SerbzipError, ValueError):
    """Raised when a binary dictionary image cannot be decoded."""


class TranscodeError(SerbzipError):
    """Raised when a codec fails to convert one line of a stream.

    WHY: The codec only sees single lines. The transcoder knows which line
    it was processing, so it attaches the 1-based line number here.

    RULES:
    - line_no is 1-based
    - error is the original codec exception (also set as __cause__)
    """

    def __init__(self, line_no: int, error: Exception) -> None:
        self.line_no = line_no
        self.error = error
        super().__init__("conversion error on line {}: {}".format(line_no, error))


class DownloadError(SerbzipError):
    """Raised when the dictionary download returns a non-OK status."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__("download of {} failed with HTTP status {}".format(url, status_code))
