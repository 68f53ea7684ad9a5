"""Tests for the line-by-line stream transcoder."""

import io

import pytest

from serbzip.core.transcoder import transcode
from serbzip.errors import TranscodeError


class _FailingWriter(io.StringIO):
    def write(self, s):
        raise OSError("disk full")


class TestTranscode:
    def test_line_numbers_start_at_one(self):
        seen = []

        def processor(line_no, line):
            seen.append((line_no, line))
            return line.upper()

        output = io.StringIO()
        count = transcode(io.StringIO("one\ntwo\n\nfour\n"), output, processor)

        assert count == 4
        assert seen == [(1, "one"), (2, "two"), (3, ""), (4, "four")]
        assert output.getvalue() == "ONE\nTWO\n\nFOUR\n"

    def test_last_line_without_newline_gets_one(self):
        output = io.StringIO()
        transcode(io.StringIO("alpha\nbeta"), output, lambda _, line: line)
        assert output.getvalue() == "alpha\nbeta\n"

    def test_strips_only_one_newline(self):
        output = io.StringIO()
        transcode(io.StringIO("carriage\r\n"), output, lambda _, line: repr(line))
        assert output.getvalue() == "'carriage\\r'\n"

    def test_empty_input(self):
        output = io.StringIO()
        assert transcode(io.StringIO(""), output, lambda _, line: line) == 0
        assert output.getvalue() == ""

    def test_declared_error_is_wrapped_with_line_number(self):
        def processor(line_no, line):
            if line_no == 2:
                raise KeyError(line)
            return line

        output = io.StringIO()
        with pytest.raises(TranscodeError) as exc_info:
            transcode(io.StringIO("a\nb\nc\n"), output, processor, conversion_errors=(KeyError,))

        assert exc_info.value.line_no == 2
        assert isinstance(exc_info.value.error, KeyError)
        assert exc_info.value.__cause__ is exc_info.value.error
        assert str(exc_info.value).startswith("conversion error on line 2: ")
        assert output.getvalue() == "a\n"

    def test_undeclared_error_propagates_unchanged(self):
        def processor(line_no, line):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            transcode(io.StringIO("a\n"), io.StringIO(), processor, conversion_errors=(KeyError,))

    def test_io_error_propagates(self):
        with pytest.raises(OSError, match="disk full"):
            transcode(io.StringIO("a\n"), _FailingWriter(), lambda _, line: line)
