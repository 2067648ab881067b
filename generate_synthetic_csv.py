#!/usr/bin/env python3
"""
Synthetic CSV generator for splitter benchmarks.

Generates a large CSV file with a header row and many data rows of varying
width, so part boundaries land at irregular byte offsets. Optional BOM and
CRLF terminators exercise the splitter's byte accounting.
"""

import argparse
import random
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

BOM = b"\xef\xbb\xbf"

HEADER_FIELDS = ("id", "customer", "amount", "note")


def generate_row(row_id: int, rng: random.Random) -> str:
    """Build one data row with a variable-length note column."""
    customer = f"C{rng.randrange(100000):05d}"
    amount = f"{rng.uniform(0, 10000):.2f}"
    note = "x" * rng.randrange(0, 64)
    return f"{row_id},{customer},{amount},{note}"


def generate_synthetic_csv(
    output_path: str,
    rows: int,
    crlf: bool,
    bom: bool,
    seed: int,
) -> int:
    """
    Generate a synthetic CSV file.

    Streams output row by row to avoid memory issues.

    Returns:
        Total number of bytes written.
    """
    rng = random.Random(seed)
    newline = "\r\n" if crlf else "\n"
    total_bytes = 0

    with open(output_path, "wb", buffering=BUFFER_SIZE) as f:
        if bom:
            f.write(BOM)
            total_bytes += len(BOM)

        header = (",".join(HEADER_FIELDS) + newline).encode("utf-8")
        f.write(header)
        total_bytes += len(header)

        for row_id in range(rows):
            line = (generate_row(row_id, rng) + newline).encode("utf-8")
            f.write(line)
            total_bytes += len(line)

            # Progress indicator every 1M rows
            if (row_id + 1) % 1_000_000 == 0:
                print(f"  Generated {row_id + 1}/{rows} rows...", file=sys.stderr)

    return total_bytes


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic CSV file for splitting.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 10M rows, LF terminators
  python generate_synthetic_csv.py --out data/synthetic.csv --rows 10000000

  # Windows-style file with a BOM
  python generate_synthetic_csv.py --out data/synthetic_win.csv --crlf --bom
""",
    )

    parser.add_argument(
        "--out",
        required=True,
        help="Output file path",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=1_000_000,
        help="Number of data rows (default: 1000000)",
    )
    parser.add_argument(
        "--crlf",
        action="store_true",
        help="Terminate lines with CRLF instead of LF",
    )
    parser.add_argument(
        "--bom",
        action="store_true",
        help="Start the file with a UTF-8 BOM",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    if args.rows < 0:
        parser.error("--rows must not be negative")

    print(f"Generating {args.rows:,} rows into {args.out}...", file=sys.stderr)
    total_bytes = generate_synthetic_csv(
        output_path=args.out,
        rows=args.rows,
        crlf=args.crlf,
        bom=args.bom,
        seed=args.seed,
    )
    print(f"Done! Wrote {total_bytes / (1024 * 1024):.1f} MB to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
