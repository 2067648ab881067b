"""Byte-range copy of one boundary into its output part."""

import logging
from pathlib import Path

from csv_splitter.split.errors import OutputCreateError, ShortReadError
from csv_splitter.split.types import BOM, BUFFER_SIZE, Boundary, HeaderBlock, PartResult

logger = logging.getLogger(__name__)


def part_path(input_path: str | Path, output_dir: str | Path, sequence_index: int) -> Path:
    """Deterministic output name: {input-stem}_{sequence_index}.csv."""
    return Path(output_dir) / f"{Path(input_path).stem}_{sequence_index}.csv"


def copy_part(
    input_path: str,
    output_dir: str,
    boundary: Boundary,
    header: HeaderBlock,
) -> PartResult:
    """
    Materialize one boundary as a standalone output file.

    Opens its own handle on the input so copiers never share a seek cursor.
    Parts after the first get a BOM; part 0 only carries one when the input
    began with a BOM that header capture lifted out of its range.
    """
    out_path = part_path(input_path, output_dir, boundary.sequence_index)

    with open(input_path, "rb") as source:
        source.seek(boundary.start_offset)

        try:
            target = open(out_path, "xb")  # noqa: SIM115
        except OSError as exc:
            raise OutputCreateError(f"cannot create {out_path}: {exc}") from exc

        # A part is only kept once fully written and flushed.
        try:
            with target:
                prefix = 0
                if not boundary.is_first or header.has_bom:
                    target.write(BOM)
                    prefix += len(BOM)

                header_data = header.data
                if header_data:
                    target.write(header_data)
                    prefix += len(header_data)

                remaining = boundary.byte_length
                while remaining > 0:
                    chunk = source.read(min(BUFFER_SIZE, remaining))
                    if not chunk:
                        raise ShortReadError(
                            f"{input_path} ended {remaining} bytes short of part "
                            f"{boundary.sequence_index}"
                        )
                    target.write(chunk)
                    remaining -= len(chunk)
        except BaseException:
            out_path.unlink(missing_ok=True)
            raise

    logger.debug(
        "Part %d written: %s (%d data bytes)",
        boundary.sequence_index,
        out_path,
        boundary.byte_length,
    )
    return PartResult(boundary.sequence_index, out_path, prefix + boundary.byte_length)
