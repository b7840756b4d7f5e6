"""Pops every element of a list, timing list construction two ways.

Usage:
    python examples/example1.py [--filter PATTERN] [--min-duration SECONDS]

``range_bench`` receives the size and builds its list while paused;
``gen_bench`` has the list built by a generator, outside the timer.
"""

import pewbench
from pewbench import Benchmark, pew_bench


def get_list(n: int) -> list[int]:
    return list(range(n))


def bm_list_range(state: pewbench.State[int]) -> None:
    n = state.get_input()
    state.pause()
    values = get_list(n)
    state.resume()
    for _ in range(n):
        pewbench.do_not_optimize(values.pop())


def bm_list_gen(state: pewbench.State[list[int]]) -> None:
    values = state.get_input()
    for _ in range(len(values)):
        pewbench.do_not_optimize(values.pop())


range_bench = (
    Benchmark.with_name("range_bench")
    .with_range(1 << 10, 1 << 20, 4)
    .with_bench(pew_bench(bm_list_range))
)

gen_bench = (
    Benchmark.with_name("gen_bench")
    .with_range(1 << 10, 1 << 20, 4)
    .with_generator(get_list)
    .with_bench(pew_bench(bm_list_gen))
)


if __name__ == "__main__":
    raise SystemExit(pewbench.main(range_bench, gen_bench))
