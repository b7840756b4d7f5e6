"""Composition of input generators."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def _identity(i: int) -> int:
    return i


class GeneratorChain(Generic[T]):
    """A pure function from a range value to a benchmark input.

    Starts as the identity and grows by wrapping: after registering
    ``g1`` then ``g2``, calling the chain with ``i`` returns ``g2(g1(i))``.
    Chains are immutable; ``then`` returns a new chain.
    """

    __slots__ = ("_fn", "_steps")

    def __init__(self, fn: Callable[[int], T], steps: tuple[Callable, ...] = ()) -> None:
        self._fn = fn
        self._steps = steps

    @classmethod
    def identity(cls) -> GeneratorChain[int]:
        """Return the empty chain, which yields the range value itself."""
        return cls(_identity)

    def then(self, fn: Callable[[T], U]) -> GeneratorChain[U]:
        """Return a new chain that applies ``fn`` to this chain's output."""
        return compose(self, fn)

    @property
    def steps(self) -> tuple[Callable, ...]:
        """The registered generators, in application order."""
        return self._steps

    def __call__(self, i: int) -> T:
        return self._fn(i)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        names = [getattr(step, "__name__", repr(step)) for step in self._steps]
        return f"GeneratorChain({' -> '.join(['range', *names])})"


def compose(existing: GeneratorChain[T], next_fn: Callable[[T], Any]) -> GeneratorChain:
    """Wrap ``existing`` so its output is passed through ``next_fn``.

    Args:
        existing: The chain built so far.
        next_fn: A generator taking the chain's current output type.

    Returns:
        A chain computing ``next_fn(existing(i))``.
    """
    inner = existing._fn

    def composed(i: int):
        return next_fn(inner(i))

    return GeneratorChain(composed, existing.steps + (next_fn,))
