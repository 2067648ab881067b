"""Shared constants and metadata structures for splitting."""

from dataclasses import dataclass, field
from pathlib import Path

# Read size used by range copiers.
BUFFER_SIZE = 1024

# UTF-8 byte-order mark, injected at the start of every part after the first.
BOM = b"\xef\xbb\xbf"

# Terminator used when re-emitting header lines. Data lines are copied raw.
NEWLINE = b"\n"

DEFAULT_FILE_LINES = 100000
DEFAULT_OUTPUT_PATH = "./output"
DEFAULT_HEADER_LINES = 1


@dataclass(frozen=True, slots=True)
class HeaderBlock:
    """Leading lines replicated into every output part."""

    lines: tuple[bytes, ...] = ()
    raw_length: int = 0
    has_bom: bool = False

    @property
    def data(self) -> bytes:
        return b"".join(self.lines)


@dataclass(frozen=True, slots=True)
class Boundary:
    """Byte range of the input that becomes one output part."""

    start_offset: int
    byte_length: int
    sequence_index: int
    line_count: int

    @property
    def is_first(self) -> bool:
        return self.sequence_index == 0


@dataclass
class ScanStats:
    """Statistics from iter_boundaries."""

    lines_read: int = 0
    bytes_read: int = 0
    boundaries: int = 0
    dropped_lines: int = 0
    dropped_bytes: int = 0


@dataclass(frozen=True, slots=True)
class PartResult:
    """A part that was written successfully."""

    sequence_index: int
    path: Path
    bytes_written: int


@dataclass(frozen=True, slots=True)
class PartFailure:
    """A part whose copy task raised."""

    sequence_index: int
    error: str


@dataclass
class SplitReport:
    """Outcome of a split run, aggregated at the completion barrier."""

    header: HeaderBlock
    stats: ScanStats
    parts: list[PartResult] = field(default_factory=list)
    failures: list[PartFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
