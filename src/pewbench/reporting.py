"""CSV output of benchmark results.

Rows have the form ``set/function/size,average_ns``. The ``Name,Time (ns)``
header is written once per process, before the first row, no matter how
many runners or benchmark sets produce output.
"""

from __future__ import annotations

import csv
import sys
from typing import TYPE_CHECKING, TextIO

from pewbench.logging import Logger, get_logger

if TYPE_CHECKING:
    from .stats import Measurement

HEADER = ("Name", "Time (ns)")


class HeaderLatch:
    """One-shot flag guarding the process-wide CSV header."""

    def __init__(self) -> None:
        self._claimed = False

    @property
    def claimed(self) -> bool:
        return self._claimed

    def claim(self) -> bool:
        """Return True the first time it is called, False afterwards."""
        if self._claimed:
            return False
        self._claimed = True
        return True

    def reset(self) -> None:
        self._claimed = False


HEADER_LATCH = HeaderLatch()


class CsvReporter:
    """Writes benchmark measurements as CSV rows.

    Rows go to ``output`` when a path is given, otherwise to stdout. If the
    file cannot be opened, a warning is logged and rows go to stdout.

    Args:
        output: Optional file path for results.
        stream: Stream used when no file is in use. Defaults to the current
            ``sys.stdout``.
        logger: Logger for the file fallback diagnostic.
        latch: Header flag. Defaults to the process-wide latch.
    """

    def __init__(
        self,
        output: str | None = None,
        stream: TextIO | None = None,
        logger: Logger | None = None,
        latch: HeaderLatch = HEADER_LATCH,
    ) -> None:
        self.output = output
        self._stream = stream
        self._logger = logger or get_logger()
        self._latch = latch
        self._file: TextIO | None = None
        self._writer = None

    @property
    def stream(self) -> TextIO:
        """The stream rows are currently written to."""
        if self._file is not None:
            return self._file
        return self._stream if self._stream is not None else sys.stdout

    def _open(self) -> None:
        if self.output is None or self._file is not None:
            return
        try:
            self._file = open(self.output, "w", newline="")
        except OSError as exc:
            self._logger.warning(
                f"Could not open {self.output}: {exc}; writing results to stdout"
            )
            self.output = None

    def _get_writer(self):
        if self._writer is None:
            self._open()
            self._writer = csv.writer(self.stream, lineterminator="\n")
        return self._writer

    def write_row(self, name: str, time_ns: int) -> None:
        """Write one result row, preceded by the header if not yet written."""
        writer = self._get_writer()
        if self._latch.claim():
            writer.writerow(HEADER)
        writer.writerow((name, time_ns))
        self.stream.flush()

    def report(self, measurement: Measurement) -> None:
        """Write the row for ``measurement``."""
        self.write_row(*measurement.to_row())

    def close(self) -> None:
        """Close the output file, if one was opened."""
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None

    def __enter__(self) -> CsvReporter:
        return self

    def __exit__(self, *_) -> None:
        self.close()


class ComparativeReporter:
    """Reshapes ``set/function/size,time`` rows into one column per benchmark.

    Produces a ``Size,<set/function>,...`` header with benchmark names in
    first-seen order, then one row per size in ascending order.
    """

    def __init__(self, size_label: str = "Size") -> None:
        self.size_label = size_label
        self.names: list[str] = []
        self.results: dict[int, list[str]] = {}

    @staticmethod
    def parse_line(line: str) -> tuple[str, int, str] | None:
        """Split a result row into ``(set/function, size, time)``.

        Returns None for lines that are not result rows, including the header.
        """
        fields = line.strip().split(",")
        if len(fields) != 2:
            return None
        name, time = fields

        parts = name.split("/")
        if len(parts) != 3:
            return None
        set_name, bench_name, size = parts
        try:
            return (f"{set_name}/{bench_name}", int(size), time)
        except ValueError:
            return None

    def add_line(self, line: str) -> bool:
        """Record a result row. Returns False if the line was ignored."""
        parsed = self.parse_line(line)
        if parsed is None:
            return False

        name, size, time = parsed
        if name not in self.names:
            self.names.append(name)
        self.results.setdefault(size, []).append(time)
        return True

    def rows(self) -> list[list[str]]:
        """Return the header followed by one row per size."""
        table = [[self.size_label, *self.names]]
        for size in sorted(self.results):
            table.append([str(size), *self.results[size]])
        return table

    def write(self, stream: TextIO) -> None:
        for row in self.rows():
            stream.write(",".join(row) + "\n")
