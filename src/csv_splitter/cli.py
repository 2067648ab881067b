"""Command-line interface for csv splitter."""

import argparse
import logging
import sys

from csv_splitter.solver.split import main_split
from csv_splitter.split.errors import (
    InputNotFoundError,
    OutputDirectoryExistsError,
    TruncatedInputError,
)
from csv_splitter.split.types import (
    DEFAULT_FILE_LINES,
    DEFAULT_HEADER_LINES,
    DEFAULT_OUTPUT_PATH,
)

logger = logging.getLogger(__name__)

# Exit status for errors detected before any part is written.
EXIT_PREFLIGHT = 2


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="csv-splitter",
        description="Split a large CSV file into parts with a fixed number of lines.",
    )

    parser.add_argument(
        "input_path",
        help="Path to the input CSV file",
    )

    parser.add_argument(
        "--file-lines", "-f",
        type=int,
        default=DEFAULT_FILE_LINES,
        help=f"Data lines per output file (default: {DEFAULT_FILE_LINES})",
    )

    parser.add_argument(
        "--output-path", "-o",
        default=DEFAULT_OUTPUT_PATH,
        help=f"Output directory, must not exist yet (default: {DEFAULT_OUTPUT_PATH})",
    )

    parser.add_argument(
        "--header",
        type=int,
        default=DEFAULT_HEADER_LINES,
        help=(
            "Leading lines copied into every output file, 0 to disable "
            f"(default: {DEFAULT_HEADER_LINES})"
        ),
    )

    parser.add_argument(
        "--keep-remainder",
        action="store_true",
        help="Write trailing lines that do not fill a whole part as a last, smaller part",
    )

    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=None,
        help="Maximum number of parts copied concurrently (default: executor default)",
    )

    parser.add_argument(
        "--debug", "-d",
        action="count",
        default=0,
        help="Turn debugging info on",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.debug else logging.INFO)

    if args.file_lines <= 0:
        parser.error(f"--file-lines must be positive, got {args.file_lines}")
    if args.header < 0:
        parser.error(f"--header must not be negative, got {args.header}")
    if args.workers is not None and args.workers <= 0:
        parser.error(f"--workers must be positive, got {args.workers}")

    try:
        return main_split(
            input_path=args.input_path,
            output_path=args.output_path,
            file_lines=args.file_lines,
            header_count=args.header,
            emit_remainder=args.keep_remainder,
            workers=args.workers,
        )
    except (InputNotFoundError, OutputDirectoryExistsError, TruncatedInputError) as exc:
        logger.error("%s", exc)
        return EXIT_PREFLIGHT


if __name__ == "__main__":
    sys.exit(main())
