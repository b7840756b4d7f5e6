"""Runner configuration and the process-wide active config."""

from __future__ import annotations

from typing import Self

from msgspec import Struct

from pewbench.errors import ConfigurationError

NS_PER_S = 1_000_000_000

DEFAULT_MIN_RUNS = 8
DEFAULT_MIN_DURATION_NS = 1 * NS_PER_S


class RunnerConfig(Struct, frozen=True):
    """Resolved settings for a benchmark run.

    A configuration keeps repeating until it has run at least ``min_runs``
    times and accumulated at least ``min_duration_ns`` of measured time.
    """

    filter: str = ""
    min_runs: int = DEFAULT_MIN_RUNS
    min_duration_ns: int = DEFAULT_MIN_DURATION_NS
    output: str | None = None

    def __post_init__(self):
        """Validate the stability threshold."""
        if self.min_runs < 2:
            raise ConfigurationError(
                f"Invalid min_runs; expected >=2 but got {self.min_runs}"
            )
        if self.min_duration_ns < 0:
            raise ConfigurationError(
                f"Invalid min_duration_ns; expected >=0 but got {self.min_duration_ns}"
            )

    @classmethod
    def default(cls) -> Self:
        """Return config with 8 minimum runs, 1s minimum duration and no filter."""
        return cls()

    @property
    def min_duration_s(self) -> float:
        """Minimum duration in seconds."""
        return self.min_duration_ns / NS_PER_S


_active_config: RunnerConfig | None = None


def get_config() -> RunnerConfig:
    """Return the process-wide config, installing the default on first use."""
    global _active_config
    if _active_config is None:
        _active_config = RunnerConfig.default()
    return _active_config


def set_config(config: RunnerConfig) -> RunnerConfig:
    """Install ``config`` as the process-wide config, returning the previous one."""
    global _active_config
    previous = get_config()
    _active_config = config
    return previous
