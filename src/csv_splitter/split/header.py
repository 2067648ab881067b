"""Header block capture."""

from typing import BinaryIO

from csv_splitter.split.errors import TruncatedInputError
from csv_splitter.split.types import BOM, NEWLINE, HeaderBlock


def strip_terminator(raw_line: bytes) -> bytes:
    """Remove a single trailing CRLF or LF from a raw line."""
    if raw_line.endswith(b"\r\n"):
        return raw_line[:-2]
    if raw_line.endswith(b"\n"):
        return raw_line[:-1]
    return raw_line


def capture_header(handle: BinaryIO, header_count: int) -> HeaderBlock:
    """
    Consume the first `header_count` lines of `handle` as a header block.

    Lines are re-terminated with NEWLINE. A UTF-8 BOM at the very start of the
    input is lifted out of the block and reported through `has_bom`, so that
    replicating the header never duplicates the mark. `raw_length` counts the
    bytes actually consumed, BOM and original terminators included.
    """
    if header_count < 0:
        raise ValueError(f"header_count must be >= 0, got {header_count}")

    lines: list[bytes] = []
    raw_length = 0
    has_bom = False

    for index in range(header_count):
        raw_line = handle.readline()
        if not raw_line:
            raise TruncatedInputError(
                f"expected {header_count} header lines, input has only {index}"
            )
        raw_length += len(raw_line)

        if index == 0 and raw_line.startswith(BOM):
            has_bom = True
            raw_line = raw_line[len(BOM):]

        lines.append(strip_terminator(raw_line) + NEWLINE)

    return HeaderBlock(lines=tuple(lines), raw_length=raw_length, has_bom=has_bom)
