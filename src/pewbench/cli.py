"""Command-line interface for benchmark programs.

A benchmark program hands its sets to ``main``::

    if __name__ == "__main__":
        pewbench.main(list_bench, dict_bench)

which accepts ``--filter``, ``--min-duration``, ``--min-runs`` and
``--output`` and runs every set with the resulting config.
"""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING, Sequence

from pewbench.config import (
    DEFAULT_MIN_RUNS,
    NS_PER_S,
    RunnerConfig,
    set_config,
)
from pewbench.logging import LogLevel, get_logger
from pewbench.runner import get_runner, reset_runner

if TYPE_CHECKING:
    from .benchmark import Benchmark

DEFAULT_MIN_DURATION_S = 1.0


class BenchmarkCLI:
    """Builder for benchmark command-line interfaces.

    Provides consistent CLI construction with the runner arguments
    pre-configured. Uses builder pattern for extensibility.

    Args:
        description: Benchmark description for --help.
        prog: Program name for --help.
    """

    def __init__(self, description: str = "Run micro-benchmarks", prog: str | None = None) -> None:
        self.parser = argparse.ArgumentParser(prog=prog, description=description)
        self._add_common_args()

    def _add_common_args(self) -> None:
        """Add the arguments every benchmark program understands."""
        self.parser.add_argument(
            "--filter",
            "-f",
            default="",
            metavar="FILTER",
            help="Only run benchmarks whose name matches this pattern",
        )
        self.parser.add_argument(
            "--min-duration",
            "-d",
            type=float,
            default=DEFAULT_MIN_DURATION_S,
            metavar="RUN_UNTIL",
            help=f"Run each benchmark for at least this many seconds of CPU time (default: {DEFAULT_MIN_DURATION_S:g})",
        )
        self.parser.add_argument(
            "--min-runs",
            "-r",
            type=int,
            default=DEFAULT_MIN_RUNS,
            metavar="MIN_RUNS",
            help=f"Run each benchmark at least this many times (default: {DEFAULT_MIN_RUNS})",
        )
        self.parser.add_argument(
            "--output",
            "-o",
            default=None,
            metavar="FILE",
            help="Write results to this file instead of stdout",
        )
        self.parser.add_argument(
            "--log-level",
            choices=[level.name for level in LogLevel],
            default=LogLevel.INFO.name,
            help="Minimum level of diagnostics written to stderr (default: INFO)",
        )

    def add_argument(self, *args, **kwargs) -> BenchmarkCLI:
        """Add a program-specific argument.

        Returns:
            Self for method chaining.
        """
        self.parser.add_argument(*args, **kwargs)
        return self

    def parse_args(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        return self.parser.parse_args(argv)

    def parse(self, argv: Sequence[str] | None = None) -> RunnerConfig:
        """Parse command-line arguments into a runner config.

        Exits with a usage error if the values are rejected by ``RunnerConfig``.
        """
        args = self.parse_args(argv)
        get_logger().set_log_level(LogLevel[args.log_level])
        return self.to_config(args)

    def to_config(self, args: argparse.Namespace) -> RunnerConfig:
        try:
            return RunnerConfig(
                filter=args.filter,
                min_runs=args.min_runs,
                min_duration_ns=int(args.min_duration * NS_PER_S),
                output=args.output,
            )
        except (ValueError, OverflowError) as exc:
            self.parser.error(str(exc))


def main(*benchmarks: Benchmark, argv: Sequence[str] | None = None) -> int:
    """Parse the command line, then run each benchmark set in order.

    Returns:
        Process exit status.
    """
    config = BenchmarkCLI().parse(argv)
    set_config(config)

    runner = get_runner()
    try:
        for benchmark in benchmarks:
            benchmark.run(runner)
    finally:
        reset_runner()
        get_logger().flush()
    return 0
