"""Per-repetition benchmark state."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from pewbench.clock import Clock
from pewbench.errors import InvalidStateError
from pewbench.time import cpu_time_ns

T = TypeVar("T")


def default_for(value: Any) -> Any:
    """Return the empty value of ``value``'s type, or None if it has none.

    ``int`` yields ``0``, ``list`` yields ``[]`` and so on. Types whose
    constructor requires arguments (e.g. ``numpy.ndarray``) yield None.
    """
    try:
        return type(value)()
    except TypeError:
        return None


class State(Generic[T]):
    """The state handed to a benchmark function for one repetition.

    Lets the benchmark pause and resume the timer around setup work and
    retrieve its input. The timer is running when the benchmark is called.

    ``T`` is ``int`` (the range value) when the benchmark has no generator,
    otherwise the return type of the last registered generator.

    Args:
        input: The input for this repetition. Owned by the state.
        default_factory: Produces the placeholder left behind by
            ``get_input``. Defaults to the input type's empty value.
        now: Nanosecond time source for the underlying clock.
    """

    __slots__ = ("_clock", "_input", "_default_factory")

    def __init__(
        self,
        input: T,
        default_factory: Callable[[], T] | None = None,
        now: Callable[[], int] = cpu_time_ns,
    ) -> None:
        self._input = input
        self._default_factory = default_factory
        self._clock = Clock(now)

    @property
    def is_paused(self) -> bool:
        """Whether the timer is currently paused."""
        return self._clock.is_paused

    def pause(self) -> None:
        """Pause the timer, e.g. to exclude setup work from the measurement.

        Example::

            def bm_simple(state):
                state.pause()
                values = list(range(1024))
                state.resume()
                pewbench.do_not_optimize(values.pop())

        Raises:
            InvalidStateError: If the timer is already paused.
        """
        self._clock.pause()

    def resume(self) -> None:
        """Resume the timer after ``pause()``.

        Raises:
            InvalidStateError: If the timer is running.
        """
        self._clock.resume()

    def get_input(self) -> T:
        """Move the input out of the state and return it.

        The timer is paused for the duration of the extraction so retrieving
        the input never counts toward the measurement. The state keeps the
        default placeholder afterwards, so a second call returns that
        placeholder rather than the original input.

        Raises:
            InvalidStateError: If the timer is paused.
        """
        if self._clock.is_paused:
            raise InvalidStateError("Cannot get the input of a paused state")

        self._clock.pause()
        value = self._input
        if self._default_factory is not None:
            self._input = self._default_factory()
        else:
            self._input = default_for(value)
        self._clock.resume()
        return value

    def finish(self) -> int:
        """Stop the timer and return the elapsed nanoseconds.

        Raises:
            InvalidStateError: If the timer is paused or already finished.
        """
        if self._clock.is_paused:
            raise InvalidStateError("Cannot finish a paused state")
        return self._clock.stop()
