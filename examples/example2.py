"""Iterates over and drains random numpy vectors.

Usage:
    python examples/example2.py | pew-transpose
"""

import numpy as np

import pewbench
from pewbench import Benchmark

rng = np.random.default_rng(42)


def get_vec(n: int) -> np.ndarray:
    return rng.integers(0, np.iinfo(np.uint64).max, size=n, dtype=np.uint64)


def empty_vec() -> np.ndarray:
    return np.empty(0, dtype=np.uint64)


def bm_vector_iterate(state: pewbench.State[np.ndarray]) -> None:
    vec = state.get_input()
    for value in vec:
        pewbench.do_not_optimize(value)


def bm_vector_delete(state: pewbench.State[np.ndarray]) -> None:
    vec = state.get_input()
    state.pause()
    values = vec.tolist()
    state.resume()
    while values:
        pewbench.do_not_optimize(values.pop())


example2 = (
    Benchmark.with_name("example2")
    .with_range(1 << 10, 1 << 20, 4)
    .with_generator(get_vec, default=empty_vec)
    .with_clone(np.copy)
    .with_bench(bm_vector_iterate)
    .with_bench(bm_vector_delete)
)


if __name__ == "__main__":
    raise SystemExit(pewbench.main(example2))
