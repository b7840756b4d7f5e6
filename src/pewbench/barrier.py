"""Optimization barriers for benchmark bodies.

``do_not_optimize`` keeps the last value it was given referenced from a
module-level sink until the next call; ``clobber`` empties the sink.
"""

from typing import Any

_sink: list[Any] = [None]


def do_not_optimize(value: Any) -> None:
    """Consume ``value`` so the work producing it is observable.

    Example::

        def bm_simple(state):
            pewbench.do_not_optimize(5 + 10)
    """
    _sink[0] = value


def clobber() -> None:
    """Release whatever ``do_not_optimize`` is holding."""
    _sink[0] = None
