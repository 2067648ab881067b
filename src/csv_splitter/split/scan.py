"""Line scanning: turn a line quota into byte-range boundaries."""

from collections.abc import Iterable, Iterator

from csv_splitter.split.types import Boundary, ScanStats


def iter_boundaries(
    lines: Iterable[bytes],
    file_lines: int,
    start_offset: int = 0,
    emit_remainder: bool = False,
    stats: ScanStats | None = None,
) -> Iterator[Boundary]:
    """
    Yield one Boundary per `file_lines` raw lines.

    `lines` must yield raw lines exactly as stored in the input, terminators
    included (iterating a file opened in "rb" mode does this). Byte lengths are
    the sum of those raw lengths, so a CRLF line counts two terminator bytes
    and an unterminated last line counts none.

    A final chunk holding fewer than `file_lines` lines is dropped unless
    `emit_remainder` is set; dropped counts are recorded in `stats`.
    """
    if file_lines <= 0:
        raise ValueError(f"file_lines must be > 0, got {file_lines}")

    if stats is None:
        stats = ScanStats()

    sequence_index = 0
    chunk_lines = 0
    chunk_bytes = 0

    for raw_line in lines:
        stats.lines_read += 1
        stats.bytes_read += len(raw_line)
        chunk_lines += 1
        chunk_bytes += len(raw_line)

        if chunk_lines == file_lines:
            stats.boundaries += 1
            yield Boundary(start_offset, chunk_bytes, sequence_index, chunk_lines)
            start_offset += chunk_bytes
            sequence_index += 1
            chunk_lines = 0
            chunk_bytes = 0

    if chunk_lines == 0:
        return

    if emit_remainder:
        stats.boundaries += 1
        yield Boundary(start_offset, chunk_bytes, sequence_index, chunk_lines)
    else:
        stats.dropped_lines = chunk_lines
        stats.dropped_bytes = chunk_bytes
