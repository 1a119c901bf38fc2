import timeit
from typing import Callable

import numpy
import pandas

import ndnest

REPEATS = 7

# (label, extents) at roughly one million elements per rank
SHAPES: list[tuple[str, tuple[int, ...]]] = [
    ("one_dim", (1_000_000,)),
    ("two_dim", (1_000, 1_000)),
    ("three_dim", (100, 100, 100)),
    ("four_dim", (32, 32, 32, 32)),
]

BUILDERS: dict[str, Callable[..., list]] = {
    "one_dim": ndnest.one_dim,
    "two_dim": ndnest.two_dim,
    "three_dim": ndnest.three_dim,
    "four_dim": ndnest.four_dim,
}


def best_of(run: Callable[[], object]) -> float:
    return min(timeit.repeat(run, number=1, repeat=REPEATS))


def measure(name: str, shape: tuple[int, ...]) -> dict[str, object]:
    build = BUILDERS[name]
    ours = best_of(lambda: build(*shape))
    baseline = best_of(lambda: numpy.zeros(shape).tolist())
    return {
        "builder": name,
        "shape": shape,
        "ndnest [s]": ours,
        "numpy.tolist [s]": baseline,
        "ratio": ours / baseline,
    }


def main():
    table = pandas.DataFrame.from_records(
        [measure(name, shape) for name, shape in SHAPES]
    )
    print(table.to_string(index=False, float_format="{:.4f}".format))


if __name__ == "__main__":
    main()
