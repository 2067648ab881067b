import logging
import os
import time
from collections.abc import Callable
from concurrent.futures import Future
from functools import partial
from pathlib import Path

from csv_splitter.solver.execution import (
    CSV_SPLIT_EXECUTOR_ENV,
    describe_executor,
    get_executor_class,
)
from csv_splitter.split import capture_header, copy_part, iter_boundaries
from csv_splitter.split.errors import (
    InputNotFoundError,
    OutputDirectoryExistsError,
    SplitError,
)
from csv_splitter.split.types import (
    DEFAULT_FILE_LINES,
    DEFAULT_HEADER_LINES,
    DEFAULT_OUTPUT_PATH,
    PartFailure,
    PartResult,
    ScanStats,
    SplitReport,
)

logger = logging.getLogger(__name__)


def _collect_outcome(
    report: SplitReport,
    sequence_index: int,
    outcome: Callable[[], PartResult],
) -> None:
    """Record one copy task's result or failure in the report."""
    try:
        report.parts.append(outcome())
    except (SplitError, OSError) as exc:
        logger.error("Part %d failed: %s", sequence_index, exc)
        report.failures.append(PartFailure(sequence_index, str(exc)))


def split_file(
    input_path: str,
    output_path: str = DEFAULT_OUTPUT_PATH,
    file_lines: int = DEFAULT_FILE_LINES,
    header_count: int = DEFAULT_HEADER_LINES,
    emit_remainder: bool = False,
    workers: int | None = None,
) -> SplitReport:
    """
    Split a CSV file into parts of `file_lines` data lines each.

    Two-phase algorithm:
    1. Scan the input once, converting the line quota into byte boundaries
    2. Copy each boundary into its own part on the executor, dispatched as
       soon as the boundary is known
    3. Wait for every copy and aggregate results into a SplitReport

    Pre-flight problems (missing input, existing output directory, short
    header) raise before any part is dispatched. Per-part failures are
    collected in the report instead of being raised.
    """
    total_start = time.perf_counter()
    input_file = Path(input_path)
    output_dir = Path(output_path)

    if not input_file.is_file():
        raise InputNotFoundError(f"cannot find input file: {input_path}")
    if file_lines <= 0:
        raise ValueError(f"file_lines must be > 0, got {file_lines}")
    if workers is not None and workers <= 0:
        raise ValueError(f"workers must be > 0, got {workers}")
    if output_dir.exists():
        raise OutputDirectoryExistsError(f"output path already exists: {output_path}")

    # Not resolved: part names use the stem of the path as given.
    input_path = str(input_file.absolute())

    executor_class = get_executor_class()
    executor_name = describe_executor(executor_class)
    workers_desc = "auto" if workers is None else str(workers)
    executor_override = os.environ.get(CSV_SPLIT_EXECUTOR_ENV, "")
    override_info = (
        f", {CSV_SPLIT_EXECUTOR_ENV}={executor_override}" if executor_override else ""
    )

    logger.info(
        f"Starting: file={input_file.name}, file_lines={file_lines}, "
        f"header={header_count}, executor={executor_name}, "
        f"workers={workers_desc}{override_info}"
    )

    with open(input_path, "rb") as handle:
        header = capture_header(handle, header_count)

        try:
            output_dir.mkdir(parents=True)
        except FileExistsError as exc:
            raise OutputDirectoryExistsError(
                f"output path already exists: {output_path}"
            ) from exc
        out_dir = str(output_dir)

        stats = ScanStats()
        report = SplitReport(header=header, stats=stats)
        boundaries = iter_boundaries(
            handle,
            file_lines,
            start_offset=header.raw_length,
            emit_remainder=emit_remainder,
            stats=stats,
        )

        t_start = time.perf_counter()

        if executor_class is None:
            for boundary in boundaries:
                logger.debug("Copying part %d inline", boundary.sequence_index)
                _collect_outcome(
                    report,
                    boundary.sequence_index,
                    partial(copy_part, input_path, out_dir, boundary, header),
                )
            logger.info(
                "Scan and copy done: %d lines, %d parts in %.2fs",
                stats.lines_read,
                stats.boundaries,
                time.perf_counter() - t_start,
            )
        else:
            with executor_class(max_workers=workers) as executor:
                pending: list[tuple[int, Future[PartResult]]] = []
                for boundary in boundaries:
                    logger.debug(
                        "Dispatching part %d: offset=%d, bytes=%d",
                        boundary.sequence_index,
                        boundary.start_offset,
                        boundary.byte_length,
                    )
                    future = executor.submit(copy_part, input_path, out_dir, boundary, header)
                    pending.append((boundary.sequence_index, future))

                logger.info(
                    "Scan done: %d lines, %d parts dispatched in %.2fs",
                    stats.lines_read,
                    stats.boundaries,
                    time.perf_counter() - t_start,
                )

                # Completion barrier.
                for sequence_index, future in pending:
                    _collect_outcome(report, sequence_index, future.result)

    if stats.dropped_lines > 0:
        logger.warning(
            "Dropped %d trailing lines (%d bytes) short of a full %d-line part",
            stats.dropped_lines,
            stats.dropped_bytes,
            file_lines,
        )

    total_time = time.perf_counter() - total_start
    if report.failures:
        logger.error(
            "Result: %d of %d parts failed (total %.2fs)",
            len(report.failures),
            stats.boundaries,
            total_time,
        )
    else:
        logger.info("Result: %d parts written (total %.2fs)", len(report.parts), total_time)
    return report


def main_split(
    input_path: str,
    output_path: str = DEFAULT_OUTPUT_PATH,
    file_lines: int = DEFAULT_FILE_LINES,
    header_count: int = DEFAULT_HEADER_LINES,
    emit_remainder: bool = False,
    workers: int | None = None,
) -> int:
    """Main entry point that prints written parts to stdout and returns an exit code."""
    report = split_file(
        input_path,
        output_path=output_path,
        file_lines=file_lines,
        header_count=header_count,
        emit_remainder=emit_remainder,
        workers=workers,
    )

    for part in report.parts:
        print(part.path)

    return 0 if report.ok else 1
