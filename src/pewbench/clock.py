"""Pausable CPU-time clock."""

from __future__ import annotations

from typing import Callable

from pewbench.errors import InvalidStateError
from pewbench.time import cpu_time_ns


class Clock:
    """Accumulates process CPU time across pause/resume cycles.

    The clock starts running on construction. Time only accrues while it is
    running; each pause folds the current segment into the elapsed total.
    ``stop()`` is terminal and returns the total elapsed nanoseconds.

    Args:
        now: Nanosecond time source. Defaults to process CPU time.
    """

    __slots__ = ("_now", "_is_paused", "_is_stopped", "_start_time", "_elapsed")

    def __init__(self, now: Callable[[], int] = cpu_time_ns) -> None:
        self._now = now
        self._is_paused = False
        self._is_stopped = False
        self._elapsed = 0
        self._start_time = now()

    @property
    def is_paused(self) -> bool:
        """Whether the clock is currently paused."""
        return self._is_paused

    @property
    def is_stopped(self) -> bool:
        """Whether ``stop()`` has been called."""
        return self._is_stopped

    @property
    def elapsed(self) -> int:
        """Nanoseconds accumulated by completed segments."""
        return self._elapsed

    def _check_not_stopped(self, action: str) -> None:
        if self._is_stopped:
            raise InvalidStateError(f"Cannot {action} a stopped clock")

    def pause(self) -> None:
        """Pause the clock, folding the running segment into the total.

        Raises:
            InvalidStateError: If the clock is already paused or stopped.
        """
        now = self._now()
        self._check_not_stopped("pause")
        if self._is_paused:
            raise InvalidStateError("Cannot pause an already paused clock")

        self._elapsed += now - self._start_time
        self._is_paused = True

    def resume(self) -> None:
        """Resume a paused clock.

        Raises:
            InvalidStateError: If the clock is running or stopped.
        """
        self._check_not_stopped("resume")
        if not self._is_paused:
            raise InvalidStateError("Cannot resume an already running clock")

        self._is_paused = False
        self._start_time = self._now()

    def stop(self) -> int:
        """Stop the clock and return the total elapsed nanoseconds.

        Raises:
            InvalidStateError: If the clock is paused or already stopped.
        """
        now = self._now()
        self._check_not_stopped("stop")
        if self._is_paused:
            raise InvalidStateError("Cannot stop a paused clock")

        self._is_stopped = True
        self._elapsed += now - self._start_time
        return self._elapsed
