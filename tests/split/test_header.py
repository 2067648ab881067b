"""Tests for header capture."""

import io

import pytest

from csv_splitter.split.errors import TruncatedInputError
from csv_splitter.split.header import capture_header, strip_terminator
from csv_splitter.split.types import BOM


def test_strip_terminator() -> None:
    assert strip_terminator(b"a,b\r\n") == b"a,b"
    assert strip_terminator(b"a,b\n") == b"a,b"
    assert strip_terminator(b"a,b") == b"a,b"
    assert strip_terminator(b"a,b\r\r\n") == b"a,b\r"


class TestCaptureHeader:
    """Test cases for capture_header."""

    def test_captures_single_line(self) -> None:
        """Test that one header line is captured and the cursor advances past it."""
        handle = io.BytesIO(b"id,name\n1,a\n")
        header = capture_header(handle, 1)

        assert header.lines == (b"id,name\n",)
        assert header.raw_length == 8
        assert header.has_bom is False
        assert handle.read() == b"1,a\n"

    def test_zero_count_consumes_nothing(self) -> None:
        """Test that header_count=0 yields an empty block."""
        handle = io.BytesIO(b"1,a\n")
        header = capture_header(handle, 0)

        assert header.lines == ()
        assert header.data == b""
        assert header.raw_length == 0
        assert handle.tell() == 0

    def test_reterminates_crlf_but_counts_raw_bytes(self) -> None:
        """Test that CRLF header lines are stored with LF but counted raw."""
        handle = io.BytesIO(b"a\r\nb\r\n1\r\n")
        header = capture_header(handle, 2)

        assert header.data == b"a\nb\n"
        assert header.raw_length == 6

    def test_unterminated_last_header_line(self) -> None:
        """Test that a header ending at EOF without newline gets one."""
        handle = io.BytesIO(b"id,name")
        header = capture_header(handle, 1)

        assert header.data == b"id,name\n"
        assert header.raw_length == 7

    def test_lifts_leading_bom(self) -> None:
        """Test that a BOM at the start of the input is not kept in the block."""
        handle = io.BytesIO(BOM + b"id\n1\n")
        header = capture_header(handle, 1)

        assert header.has_bom is True
        assert header.data == b"id\n"
        assert header.raw_length == len(BOM) + 3

    def test_raises_when_input_too_short(self) -> None:
        """Test that TruncatedInputError is raised for too few lines."""
        with pytest.raises(TruncatedInputError):
            capture_header(io.BytesIO(b"only\n"), 2)

        with pytest.raises(TruncatedInputError):
            capture_header(io.BytesIO(b""), 1)

    def test_rejects_negative_count(self) -> None:
        with pytest.raises(ValueError):
            capture_header(io.BytesIO(b"a\n"), -1)
