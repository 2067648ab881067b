"""Tests for the range copier."""

from pathlib import Path

import pytest

from csv_splitter.split import copy as copy_module
from csv_splitter.split.copy import copy_part, part_path
from csv_splitter.split.errors import OutputCreateError, ShortReadError
from csv_splitter.split.types import BOM, Boundary, HeaderBlock

NO_HEADER = HeaderBlock()


def write_input(tmp_path: Path, content: bytes) -> str:
    input_path = tmp_path / "data.csv"
    input_path.write_bytes(content)
    return str(input_path)


def test_part_path_uses_input_stem(tmp_path: Path) -> None:
    assert part_path("/some/where/sales.2024.csv", tmp_path, 3) == tmp_path / "sales.2024_3.csv"


class TestCopyPart:
    """Test cases for copy_part."""

    def test_first_part_has_no_bom(self, tmp_path: Path) -> None:
        """Test that part 0 is copied without an injected BOM."""
        input_path = write_input(tmp_path, b"a\nb\nc\n")
        result = copy_part(input_path, str(tmp_path), Boundary(0, 4, 0, 2), NO_HEADER)

        assert result.path == tmp_path / "data_0.csv"
        assert result.path.read_bytes() == b"a\nb\n"
        assert result.bytes_written == 4

    def test_later_part_gets_bom_and_header(self, tmp_path: Path) -> None:
        """Test that non-first parts start with BOM followed by the header."""
        input_path = write_input(tmp_path, b"h\na\nb\nc\n")
        header = HeaderBlock(lines=(b"h\n",), raw_length=2)
        result = copy_part(input_path, str(tmp_path), Boundary(4, 4, 1, 2), header)

        assert result.path.read_bytes() == BOM + b"h\nb\nc\n"
        assert result.bytes_written == len(BOM) + 2 + 4

    def test_first_part_restores_lifted_bom(self, tmp_path: Path) -> None:
        """Test that part 0 keeps the input's own BOM when the header held it."""
        input_path = write_input(tmp_path, BOM + b"h\na\n")
        header = HeaderBlock(lines=(b"h\n",), raw_length=len(BOM) + 2, has_bom=True)
        result = copy_part(input_path, str(tmp_path), Boundary(len(BOM) + 2, 2, 0, 1), header)

        assert result.path.read_bytes() == BOM + b"h\na\n"

    def test_copies_exact_length_across_buffers(self, tmp_path: Path, monkeypatch) -> None:
        """Test that the final read is truncated to the boundary length."""
        monkeypatch.setattr(copy_module, "BUFFER_SIZE", 4)
        input_path = write_input(tmp_path, b"0123456789abcdef")
        result = copy_part(input_path, str(tmp_path), Boundary(3, 10, 0, 1), NO_HEADER)

        assert result.path.read_bytes() == b"3456789abc"

    def test_large_range(self, tmp_path: Path) -> None:
        """Test a range spanning many default-sized buffers."""
        content = b"".join(f"{i},{'x' * (i % 50)}\n".encode() for i in range(2000))
        input_path = write_input(tmp_path, content)
        result = copy_part(input_path, str(tmp_path), Boundary(0, len(content), 0, 2000), NO_HEADER)

        assert result.path.read_bytes() == content

    def test_existing_output_raises(self, tmp_path: Path) -> None:
        """Test that an existing part file is never overwritten."""
        input_path = write_input(tmp_path, b"a\n")
        (tmp_path / "data_0.csv").write_bytes(b"keep")

        with pytest.raises(OutputCreateError):
            copy_part(input_path, str(tmp_path), Boundary(0, 2, 0, 1), NO_HEADER)

        assert (tmp_path / "data_0.csv").read_bytes() == b"keep"

    def test_short_input_raises(self, tmp_path: Path) -> None:
        """Test that a range past EOF raises ShortReadError and leaves no part behind."""
        input_path = write_input(tmp_path, b"a\nb\n")
        header = HeaderBlock(lines=(b"h\n",), raw_length=2)

        with pytest.raises(ShortReadError):
            copy_part(input_path, str(tmp_path), Boundary(2, 10, 1, 5), header)

        assert not (tmp_path / "data_1.csv").exists()
