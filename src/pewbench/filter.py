"""Name-based selection of benchmark configurations."""

from __future__ import annotations

import re

from pewbench.errors import PatternError
from pewbench.logging import Logger, get_logger

_MATCH_ALL = re.compile("")


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a filter pattern.

    Raises:
        PatternError: If ``pattern`` is not a valid regular expression.
    """
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternError(f"Invalid filter pattern {pattern!r}: {exc}") from exc


class BenchmarkFilter:
    """Decides whether a configuration runs, by its composed name.

    The pattern is searched for anywhere in ``set/function/size``, so a
    plain string acts as a substring match. An empty pattern matches
    everything. A pattern that fails to compile is logged and replaced by
    one that matches everything.

    Args:
        pattern: Regular expression searched for in the benchmark name.
        logger: Logger for the invalid-pattern warning.
    """

    def __init__(self, pattern: str = "", logger: Logger | None = None) -> None:
        self.pattern = pattern
        try:
            self._regex = compile_pattern(pattern)
        except PatternError as exc:
            (logger or get_logger()).warning(f"{exc}; running all benchmarks")
            self._regex = _MATCH_ALL

    @property
    def matches_all(self) -> bool:
        """Whether every name passes the filter."""
        return self._regex.pattern == ""

    def is_match(self, name: str) -> bool:
        """Return True if the benchmark called ``name`` should run."""
        return self._regex.search(name) is not None

    def __call__(self, name: str) -> bool:
        return self.is_match(name)

    def __repr__(self) -> str:
        return f"BenchmarkFilter({self.pattern!r})"
