"""Benchmark set builder.

A benchmark set has a name, one or more benchmark functions, a range of
sizes and an optional chain of generators::

    def get_list(n):
        return list(range(n))

    def bm_list_pop(state):
        values = state.get_input()
        for _ in range(len(values)):
            pewbench.do_not_optimize(values.pop())

    (
        Benchmark.with_name("list_bench")
        .with_range(1 << 10, 1 << 20, 4)
        .with_generator(get_list)
        .with_bench(bm_list_pop)
        .run()
    )

Every ``with_*`` call returns a new ``Benchmark``; the receiver is never
modified. For each size ``i`` (``lower_bound``, then repeatedly multiplied
by ``mul`` while ``<= upper_bound``) the generator chain runs once, and
each repetition of each benchmark gets its own clone of the result.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, TypeVar

from pewbench.errors import ConfigurationError
from pewbench.generator import GeneratorChain

if TYPE_CHECKING:
    from .runner import BenchmarkRunner
    from .state import State
    from .stats import Measurement

T = TypeVar("T")
U = TypeVar("U")

BenchFn = Callable[["State[T]"], None]

DEFAULT_RANGE = (1, 1 << 20, 2)


def iter_range(lower_bound: int, upper_bound: int, mul: int) -> Iterator[int]:
    """Iterate ``lower_bound, lower_bound * mul, ...`` up to ``upper_bound`` inclusive.

    Raises:
        ConfigurationError: If the sequence would never pass ``upper_bound``.
    """
    if lower_bound <= upper_bound and (mul <= 1 or lower_bound <= 0):
        raise ConfigurationError(
            f"Range ({lower_bound}, {upper_bound}, {mul}) never terminates; "
            "expected lower_bound > 0 and mul > 1"
        )
    return _iter_range(lower_bound, upper_bound, mul)


def _iter_range(lower_bound: int, upper_bound: int, mul: int) -> Iterator[int]:
    i = lower_bound
    while i <= upper_bound:
        yield i
        i *= mul


@dataclass(frozen=True)
class Benchmark(Generic[T]):
    """An immutable benchmark set.

    Args:
        name: Prefix of every result row.
        benches: ``(name, function)`` pairs, all taking ``State[T]``.
        range: ``(lower_bound, upper_bound, mul)``.
        generator: Produces the input for each size.
        clone: Copies the generated input for each repetition.
        default: Factory for the placeholder ``State.get_input`` leaves behind.
    """

    name: str
    benches: tuple[tuple[str, BenchFn], ...] = ()
    range: tuple[int, int, int] = DEFAULT_RANGE
    generator: GeneratorChain[T] = field(default_factory=GeneratorChain.identity)
    clone: Callable[[T], T] = copy.deepcopy
    default: Callable[[], T] | None = None

    @classmethod
    def with_name(cls, name: str) -> Benchmark[int]:
        """Start a benchmark set called ``name`` with the default range."""
        return cls(name=name)

    def with_lower_bound(self, lower_bound: int) -> Benchmark[T]:
        _, ub, mul = self.range
        return replace(self, range=(lower_bound, ub, mul))

    def with_upper_bound(self, upper_bound: int) -> Benchmark[T]:
        lb, _, mul = self.range
        return replace(self, range=(lb, upper_bound, mul))

    def with_mul(self, mul: int) -> Benchmark[T]:
        lb, ub, _ = self.range
        return replace(self, range=(lb, ub, mul))

    def with_range(self, lower_bound: int, upper_bound: int, mul: int) -> Benchmark[T]:
        """Set the whole ``(lower_bound, upper_bound, mul)`` range."""
        return replace(self, range=(lower_bound, upper_bound, mul))

    def with_generator(
        self,
        generator: Callable[[T], U],
        default: Callable[[], U] | None = None,
    ) -> Benchmark[U]:
        """Add a generator, applied to the output of the previous ones.

        The input type of the benchmark functions changes, so all previously
        added benchmark functions are dropped and the clone function is reset.
        Call this before ``with_clone`` and ``with_bench``.

        Args:
            generator: Function of the previous input (the size, initially).
            default: Factory for the value ``State.get_input`` leaves behind.
                Defaults to the input type's empty value.
        """
        return replace(
            self,
            benches=(),
            generator=self.generator.then(generator),
            clone=copy.deepcopy,
            default=default,
        )

    def with_clone(self, clone: Callable[[T], T]) -> Benchmark[T]:
        """Set how the generated input is copied for each repetition.

        Registering a generator resets this to ``copy.deepcopy``, so call it
        after the last ``with_generator``.
        """
        return replace(self, clone=clone)

    def with_bench(
        self,
        bench: BenchFn | tuple[str, BenchFn],
        name: str | None = None,
    ) -> Benchmark[T]:
        """Add a benchmark function.

        Accepts either the function, named by ``name`` or its ``__name__``,
        or a ``(name, function)`` pair.
        """
        if isinstance(bench, tuple):
            bench_name, fn = bench
        else:
            fn = bench
            bench_name = name if name is not None else getattr(fn, "__name__", None)

        if not callable(fn):
            raise ConfigurationError(f"Benchmark {bench_name!r} is not callable")
        if not bench_name:
            raise ConfigurationError(f"Benchmark {fn!r} needs a name")
        return replace(self, benches=self.benches + ((bench_name, fn),))

    def sizes(self) -> Iterator[int]:
        """Iterate over the range values."""
        return iter_range(*self.range)

    def make_input(self, i: int) -> Any:
        """Run the generator chain for size ``i``."""
        return self.generator(i)

    def run(self, runner: BenchmarkRunner | None = None) -> list[Measurement]:
        """Run every benchmark across the range and report each result.

        Uses the process-wide runner unless one is given.

        Raises:
            ConfigurationError: If no benchmark functions were added.
        """
        from .runner import get_runner

        return (runner or get_runner()).run(self)


def pew_bench(fn: BenchFn) -> tuple[str, BenchFn]:
    """Return ``(fn.__name__, fn)`` for ``Benchmark.with_bench``."""
    return (fn.__name__, fn)
