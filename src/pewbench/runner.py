"""Benchmark execution loop.

For every size of a benchmark set, the generator chain produces one input.
Each benchmark function whose composed name passes the filter is then
repeated, each time against a fresh ``State`` holding a fresh clone of that
input, until the stability threshold is met. The truncated mean is
reported as one CSV row.

Cloning happens before the ``State`` is built, so its cost is never timed.
Exceptions raised by a benchmark function are not caught: they end the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pewbench.config import RunnerConfig, get_config
from pewbench.errors import ConfigurationError
from pewbench.filter import BenchmarkFilter
from pewbench.logging import Logger, get_logger
from pewbench.reporting import CsvReporter
from pewbench.state import State
from pewbench.stats import Measurement, RunAccumulator, StabilityThreshold
from pewbench.time import cpu_time_ns

if TYPE_CHECKING:
    from collections.abc import Callable

    from .benchmark import Benchmark, BenchFn


class BenchmarkRunner:
    """Runs benchmark sets against a fixed configuration.

    Args:
        config: Stability threshold, filter and output settings. Defaults
            to the process-wide config at construction time.
        reporter: Destination for result rows. Defaults to a ``CsvReporter``
            on ``config.output``.
        logger: Logger for diagnostics.
        now: Nanosecond time source handed to every ``State``.
    """

    def __init__(
        self,
        config: RunnerConfig | None = None,
        reporter: CsvReporter | None = None,
        logger: Logger | None = None,
        now: Callable[[], int] = cpu_time_ns,
    ) -> None:
        self.config = config or get_config()
        self.logger = logger or get_logger()
        self.reporter = reporter or CsvReporter(self.config.output, logger=self.logger)
        self.filter = BenchmarkFilter(self.config.filter, logger=self.logger)
        self.threshold = StabilityThreshold(
            self.config.min_runs, self.config.min_duration_ns
        )
        self._now = now

    def should_run(self, name: str) -> bool:
        return self.filter.is_match(name)

    def measure(self, name: str, fn: BenchFn, input, benchmark: Benchmark) -> Measurement:
        """Repeat ``fn`` until the stability threshold is met.

        Args:
            name: Composed benchmark name.
            fn: Benchmark function taking a ``State``.
            input: Generated input, cloned for every repetition.
            benchmark: The set ``fn`` belongs to, for its clone and default.
        """
        acc = RunAccumulator(name)
        while not self.threshold.is_satisfied(acc.runs, acc.total_ns):
            state = State(benchmark.clone(input), benchmark.default, self._now)
            fn(state)
            acc.add(state.finish())
        return acc.to_measurement()

    def run(self, benchmark: Benchmark) -> list[Measurement]:
        """Run ``benchmark`` and report one row per configuration that ran.

        Returns:
            The reported measurements, in output order.

        Raises:
            ConfigurationError: If the set has no benchmark functions or its
                range never terminates.
        """
        if not benchmark.benches:
            raise ConfigurationError("cannot run an empty benchmark set")

        sizes = benchmark.sizes()
        self.logger.debug(
            f"Running {benchmark.name!r} over range {benchmark.range} "
            f"with {len(benchmark.benches)} function(s)"
        )

        results: list[Measurement] = []
        for i in sizes:
            input = benchmark.make_input(i)
            for fn_name, fn in benchmark.benches:
                name = f"{benchmark.name}/{fn_name}/{i}"
                if not self.should_run(name):
                    self.logger.trace(f"Skipping {name}")
                    continue

                measurement = self.measure(name, fn, input, benchmark)
                self.logger.debug(
                    f"{name}: {measurement.runs} runs, {measurement.total_ns} ns"
                )
                self.reporter.report(measurement)
                results.append(measurement)
        return results


_default_runner: BenchmarkRunner | None = None


def get_runner() -> BenchmarkRunner:
    """Return the process-wide runner, built from the active config.

    The runner is rebuilt whenever the active config has been replaced.
    """
    global _default_runner
    config = get_config()
    if _default_runner is None or _default_runner.config is not config:
        reset_runner()
        _default_runner = BenchmarkRunner(config)
    return _default_runner


def reset_runner() -> None:
    """Drop the process-wide runner, closing its output file."""
    global _default_runner
    if _default_runner is not None:
        _default_runner.reporter.close()
    _default_runner = None
