import copy
import logging
import math
from typing import Any

import numpy

from .builders import check_extent, check_shape, fill
from .element import DEFAULT_KIND, KindLike, one_factory, zero_factory
from .shaped import shape_of

logger = logging.getLogger(__name__)


def zeros(shape: Any, kind: KindLike = DEFAULT_KIND) -> list[Any]:
    shape = check_shape(shape)
    elem = zero_factory(kind)
    logger.debug("zeros of shape %s", shape)
    return fill(shape, elem)


def ones(shape: Any, kind: KindLike = DEFAULT_KIND) -> list[Any]:
    shape = check_shape(shape)
    elem = one_factory(kind)
    logger.debug("ones of shape %s", shape)
    return fill(shape, elem)


def full(shape: Any, fill_value: Any) -> list[Any]:
    """Return a nested list of `shape` where every position holds `fill_value`.

    Each position receives its own shallow copy, so a mutable fill value is not
    aliased between positions. Immutable values such as numbers are shared as-is.
    """
    shape = check_shape(shape)
    logger.debug("full of shape %s with %r", shape, fill_value)
    return fill(shape, lambda: copy.copy(fill_value))


def _leaf_kind(data: list[Any], rank: int) -> type:
    target: Any = data
    for _ in range(rank):
        if not target:
            return DEFAULT_KIND
        target = target[0]
    return type(target)


def _like(data: list[Any], kind: KindLike | None) -> tuple[tuple[int, ...], KindLike]:
    shape = check_shape(shape_of(data))
    return shape, kind if kind is not None else _leaf_kind(data, len(shape))


def zeros_like(data: list[Any], kind: KindLike | None = None) -> list[Any]:
    shape, kind_ = _like(data, kind)
    return zeros(shape, kind_)


def ones_like(data: list[Any], kind: KindLike | None = None) -> list[Any]:
    shape, kind_ = _like(data, kind)
    return ones(shape, kind_)


def full_like(data: list[Any], fill_value: Any) -> list[Any]:
    return full(shape_of(data), fill_value)


def arange(start: Any, stop: Any = None, step: Any = 1) -> list[Any]:
    if stop is None:
        start, stop = 0, start
    if step == 0:
        raise ValueError("Step of arange must be non-zero")
    if all(isinstance(x, int) for x in (start, stop, step)):
        return list(range(start, stop, step))
    # Computed by multiplication rather than accumulation to avoid drift
    n = max(0, math.ceil((stop - start) / step))
    return [start + i * step for i in range(n)]


def linspace(start: Any, stop: Any, num: int) -> list[Any]:
    """Return `num` evenly spaced values over the closed interval [start, stop].

    >>> linspace(1.0, 10.0, 5)
    [1.0, 3.25, 5.5, 7.75, 10.0]
    """
    num = check_extent(num)
    if num == 0:
        return []
    if num == 1:
        return [start]
    step = (stop - start) / (num - 1)
    return [start + i * step for i in range(num - 1)] + [stop]


def uniform(
    shape: Any,
    low: float = 0.0,
    high: float = 1.0,
    rng: numpy.random.Generator | int | None = None,
) -> list[Any]:
    """Return a nested list of `shape` sampled uniformly from [low, high).

    `rng` is anything `numpy.random.default_rng` accepts: a generator, a seed,
    or None for fresh entropy.
    """
    shape = check_shape(shape)
    if not low < high:
        raise ValueError(f"Invalid uniform interval low={low} high={high}")
    gen = numpy.random.default_rng(rng)
    logger.debug("uniform of shape %s over [%r, %r)", shape, low, high)
    return fill(shape, lambda: float(gen.uniform(low, high)))


def normal(
    shape: Any,
    mean: float = 0.0,
    std: float = 1.0,
    rng: numpy.random.Generator | int | None = None,
) -> list[Any]:
    shape = check_shape(shape)
    if std < 0:
        raise ValueError(f"Standard deviation must be non-negative, got {std}")
    gen = numpy.random.default_rng(rng)
    logger.debug("normal of shape %s with mean %r and std %r", shape, mean, std)
    return fill(shape, lambda: float(gen.normal(mean, std)))
