"""Command line: compute every vertex's parents in the n-1 spanning trees of B_n."""

from __future__ import annotations

import argparse
import sys
import time
from math import factorial

from .table import parent_rows, partition, write_csv

DEFAULT_OUTPUT = "Sequential_parents.csv"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bubble-ist",
        description=(
            "Enumerates all N! vertices of B_n and computes each vertex's "
            "parent in the n-1 independent spanning trees."
        ),
    )
    parser.add_argument("n", type=int, metavar="N", help="number of symbols")
    parser.add_argument("-o", "--output", help="CSV file to write")
    parser.add_argument(
        "--parts", type=int, default=1, help="split the vertex range into this many chunks"
    )
    parser.add_argument(
        "--index", type=int, default=0, help="which chunk to compute (0-based)"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = _parser().parse_args(argv)
    n = args.n
    if n < 2:
        print("Error: N must be ≥ 2.", file=sys.stderr)
        return 1
    try:
        start, count = partition(factorial(n), args.parts, args.index)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    chunked = args.parts > 1
    output = args.output or (
        f"Parallel_parents_rank{args.index}.csv" if chunked else DEFAULT_OUTPUT
    )

    began = time.perf_counter()
    try:
        written = write_csv(output, n, parent_rows(n, start, count))
    except OSError as error:
        print(f"Error: cannot write {output}: {error}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - began

    if chunked:
        print(f"Rank {args.index} finished in {elapsed} seconds.")
    else:
        print(f"Done. Written {written} vertices × {n - 1} trees -> {output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())