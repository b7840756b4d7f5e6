"""Transposes the output of a benchmark program.

Assumes several benchmarks were run over the same range, and turns::

    Name,Time (ns)
    range_bench/bm_vector_range/1024,102541
    range_bench/bm_vector_range/4096,423289
    gen_bench/bm_vector_gen/1024,102316
    gen_bench/bm_vector_gen/4096,416523

into::

    Size,range_bench/bm_vector_range,gen_bench/bm_vector_gen
    1024,102541,102316
    4096,423289,416523

Usage:
    python examples/example1.py | pew-transpose [--file FILE]
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence, TextIO

from pewbench.logging import get_logger
from pewbench.reporting import ComparativeReporter


def transpose(lines: Iterable[str], echo: TextIO | None = None) -> ComparativeReporter:
    """Collect result rows from ``lines``, echoing each line to ``echo`` if given."""
    reporter = ComparativeReporter()
    for line in lines:
        if echo is not None:
            echo.write(line if line.endswith("\n") else line + "\n")
        reporter.add_line(line)
    return reporter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pew-transpose",
        description="Transpose benchmark CSV read from stdin into one column per benchmark",
    )
    parser.add_argument(
        "--file",
        "-f",
        default=None,
        metavar="FILE",
        help="File to write out to. If omitted, will write out to stdout",
    )
    return parser


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin

    # With a file target the raw results still show on the terminal.
    reporter = transpose(stdin, echo=sys.stdout if args.file else None)

    if args.file:
        try:
            with open(args.file, "w") as file:
                reporter.write(file)
            return 0
        except OSError as exc:
            logger = get_logger()
            logger.error(f"Could not open {args.file}: {exc}")
            logger.error("Displaying results below:")

    reporter.write(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
