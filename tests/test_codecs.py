"""Tests for the codec interface and registry."""

import io

import pytest

from serbzip.codecs import CODECS
from serbzip.codecs.balkanoid import Balkanoid
from serbzip.codecs.base import BaseCodec
from serbzip.errors import TranscodeError


class _ReverseCodec(BaseCodec):
    """Reverses each line; refuses to expand lines containing '#'."""

    expand_errors = (ValueError,)

    @property
    def name(self):
        return "Reverse"

    def compress_line(self, line):
        return line[::-1]

    def expand_line(self, line):
        if "#" in line:
            raise ValueError("unexpected marker")
        return line[::-1]


class TestBaseCodec:
    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            BaseCodec()

    def test_stream_round_trip(self):
        codec = _ReverseCodec()
        compressed = io.StringIO()
        assert codec.compress(io.StringIO("abc\ndef\n"), compressed) == 2
        assert compressed.getvalue() == "cba\nfed\n"

        expanded = io.StringIO()
        codec.expand(io.StringIO(compressed.getvalue()), expanded)
        assert expanded.getvalue() == "abc\ndef\n"

    def test_compress_never_wraps(self):
        codec = _ReverseCodec()
        output = io.StringIO()
        codec.compress(io.StringIO("a#b\n"), output)
        assert output.getvalue() == "b#a\n"

    def test_expand_failure_carries_line_number(self):
        codec = _ReverseCodec()
        with pytest.raises(TranscodeError) as exc_info:
            codec.expand(io.StringIO("ok\nstill ok\nnot # ok\n"), io.StringIO())
        assert exc_info.value.line_no == 3
        assert isinstance(exc_info.value.error, ValueError)


class TestRegistry:
    def test_balkanoid_registered(self):
        assert CODECS["balkanoid"] is Balkanoid

    def test_all_registered_are_codecs(self):
        for codec_cls in CODECS.values():
            assert issubclass(codec_cls, BaseCodec)

    def test_registered_codec_from_dictionary(self, small_dict):
        codec = CODECS["balkanoid"](small_dict)
        assert codec.name == "Balkanoid"
        assert codec.compress_line("in on") == "n  n"
