"""Binary dictionary image encoding and decoding.

WHY: Parsing a large wordlist means reducing and sorting every word on
each start-up. A compiled image stores the finished fingerprint groups,
already in position order, so loading is a straight read. The order is
the contract: a word's index in its stored group is the position that
compressed text refers to.

HOW: A self-describing, length-prefixed layout, byte-compatible with the
published serbzip dictionary images (bincode "standard"
configuration):

  image  = varint(n_groups) group*
  group  = string(fingerprint) varint(n_words) string(word)*
  string = varint(n_bytes) utf8-bytes

Unsigned varints are one byte for values below 251; tags 251, 252 and 253
announce a little-endian u16, u32 or u64 respectively.

RULES:
- Group word order is written and read verbatim
- Any truncation, unknown tag, bad UTF-8 or trailing data raises
  ImageFormatError
- Group order inside the image carries no meaning
"""

from __future__ import annotations

import struct
from typing import Dict, List, Mapping, Sequence, Tuple

from serbzip.errors import ImageFormatError

_SINGLE_BYTE_MAX = 250
_TAG_U16 = 251
_TAG_U32 = 252
_TAG_U64 = 253

_WIDE_FORMATS = {
    _TAG_U16: struct.Struct("<H"),
    _TAG_U32: struct.Struct("<I"),
    _TAG_U64: struct.Struct("<Q"),
}


def _varint_encode(value: int) -> bytes:
    if value < 0:
        raise ValueError("negative varint is not supported")
    if value <= _SINGLE_BYTE_MAX:
        return bytes((value,))
    if value <= 0xFFFF:
        return bytes((_TAG_U16,)) + _WIDE_FORMATS[_TAG_U16].pack(value)
    if value <= 0xFFFFFFFF:
        return bytes((_TAG_U32,)) + _WIDE_FORMATS[_TAG_U32].pack(value)
    return bytes((_TAG_U64,)) + _WIDE_FORMATS[_TAG_U64].pack(value)


def _varint_decode(data: bytes, offset: int) -> Tuple[int, int]:
    if offset >= len(data):
        raise ImageFormatError("truncated image: expected varint at offset {}".format(offset))
    tag = data[offset]
    if tag <= _SINGLE_BYTE_MAX:
        return tag, offset + 1
    fmt = _WIDE_FORMATS.get(tag)
    if fmt is None:
        raise ImageFormatError("invalid varint tag {} at offset {}".format(tag, offset))
    start = offset + 1
    end = start + fmt.size
    if end > len(data):
        raise ImageFormatError("truncated image: varint at offset {}".format(offset))
    return fmt.unpack_from(data, start)[0], end


def _encode_string(out: bytearray, text: str) -> None:
    raw = text.encode("utf-8")
    out.extend(_varint_encode(len(raw)))
    out.extend(raw)


def _decode_string(data: bytes, offset: int) -> Tuple[str, int]:
    length, pos = _varint_decode(data, offset)
    end = pos + length
    if end > len(data):
        raise ImageFormatError("truncated image: string at offset {}".format(offset))
    try:
        return data[pos:end].decode("utf-8", errors="strict"), end
    except UnicodeDecodeError as e:
        raise ImageFormatError("invalid UTF-8 in string at offset {}".format(offset)) from e


def encode_groups(groups: Mapping[str, Sequence[str]]) -> bytes:
    """Encode a fingerprint -> ordered words mapping into image bytes."""
    out = bytearray()
    out.extend(_varint_encode(len(groups)))
    for fingerprint, words in groups.items():
        _encode_string(out, fingerprint)
        out.extend(_varint_encode(len(words)))
        for word in words:
            _encode_string(out, word)
    return bytes(out)


def decode_groups(data: bytes) -> Dict[str, List[str]]:
    """Decode image bytes into a fingerprint -> ordered words mapping."""
    pos = 0
    group_count, pos = _varint_decode(data, pos)
    groups: Dict[str, List[str]] = {}
    for _ in range(group_count):
        fingerprint, pos = _decode_string(data, pos)
        word_count, pos = _varint_decode(data, pos)
        words: List[str] = []
        for _ in range(word_count):
            word, pos = _decode_string(data, pos)
            words.append(word)
        if fingerprint in groups:
            raise ImageFormatError("duplicate fingerprint '{}' in image".format(fingerprint))
        groups[fingerprint] = words
    if pos != len(data):
        raise ImageFormatError("trailing bytes in image: {} unread".format(len(data) - pos))
    return groups
