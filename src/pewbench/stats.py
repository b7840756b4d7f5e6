"""Accumulation of repetition timings.

A configuration is summarised by a single mean, computed with integer
division over the accumulated nanoseconds.
"""

from __future__ import annotations

from dataclasses import dataclass

from msgspec import Struct


class Measurement(Struct, frozen=True):
    """Result of one configuration.

    Args:
        name: Composed name, ``set/function/size``.
        total_ns: Measured nanoseconds summed over all repetitions.
        runs: Number of repetitions.
    """

    name: str
    total_ns: int
    runs: int

    @property
    def mean_ns(self) -> int:
        """Average nanoseconds per repetition, truncated."""
        return self.total_ns // self.runs if self.runs else 0

    def to_row(self) -> tuple[str, int]:
        """Return the ``(name, mean_ns)`` CSV row."""
        return (self.name, self.mean_ns)


@dataclass(frozen=True)
class StabilityThreshold:
    """Minimum repetitions and measured time before a mean is reported.

    Both bounds are lower bounds; a slow repetition can overshoot the
    duration by any amount.
    """

    min_runs: int
    min_duration_ns: int

    def is_satisfied(self, runs: int, total_ns: int) -> bool:
        return runs >= self.min_runs and total_ns >= self.min_duration_ns


@dataclass
class RunAccumulator:
    """Running totals for the configuration currently being measured."""

    name: str
    total_ns: int = 0
    runs: int = 0

    def add(self, elapsed_ns: int) -> None:
        self.total_ns += elapsed_ns
        self.runs += 1

    def to_measurement(self) -> Measurement:
        return Measurement(name=self.name, total_ns=self.total_ns, runs=self.runs)
