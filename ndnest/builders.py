import logging
import operator
from typing import Any, Callable, TypeAlias

import numpy

from .element import DEFAULT_KIND, KindLike, element_kind, zero_factory
from .errors import InvalidExtentError, InvalidRankError

logger = logging.getLogger(__name__)

MAX_RANK: int = 4

Nested1: TypeAlias = list[Any]
Nested2: TypeAlias = list[Nested1]
Nested3: TypeAlias = list[Nested2]
Nested4: TypeAlias = list[Nested3]


def check_extent(extent: Any) -> int:
    if isinstance(extent, (bool, numpy.bool_)):
        raise InvalidExtentError(f"Extent must be an integer, got a boolean: {extent}")
    try:
        n = operator.index(extent)
    except TypeError as e:
        raise InvalidExtentError(
            f"Extent must be an integer, got {type(extent).__name__}: {extent!r}"
        ) from e
    if n < 0:
        raise InvalidExtentError(f"Extent must be non-negative, got {n}")
    return n


def check_extents(*extents: Any) -> tuple[int, ...]:
    return tuple(check_extent(extent) for extent in extents)


# Each level allocates a fresh list per call of the level below,
# so no two sub-lists are ever the same object.


def fill_one_dim(n: int, elem: Callable[[], Any]) -> Nested1:
    return [elem() for _ in range(n)]


def fill_two_dim(a: int, b: int, elem: Callable[[], Any]) -> Nested2:
    return [fill_one_dim(b, elem) for _ in range(a)]


def fill_three_dim(a: int, b: int, c: int, elem: Callable[[], Any]) -> Nested3:
    return [fill_two_dim(b, c, elem) for _ in range(a)]


def fill_four_dim(
    a: int, b: int, c: int, d: int, elem: Callable[[], Any]
) -> Nested4:
    return [fill_three_dim(b, c, d, elem) for _ in range(a)]


def check_shape(shape: Any) -> tuple[int, ...]:
    if isinstance(shape, (list, tuple)):
        extents = check_extents(*shape)
    else:
        extents = check_extents(shape)
    if not 1 <= len(extents) <= MAX_RANK:
        raise InvalidRankError(
            f"Only ranks 1 through {MAX_RANK} are supported, got shape {extents}"
        )
    return extents


def fill(shape: tuple[int, ...], elem: Callable[[], Any]) -> list[Any]:
    match shape:
        case (n,):
            return fill_one_dim(n, elem)
        case (a, b):
            return fill_two_dim(a, b, elem)
        case (a, b, c):
            return fill_three_dim(a, b, c, elem)
        case (a, b, c, d):
            return fill_four_dim(a, b, c, d, elem)
    assert False, f"Unchecked shape: {shape}"


def _log_build(shape: tuple[int, ...], kind: KindLike) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "Building rank-%d container of shape %s with %s zeros",
        len(shape),
        shape,
        element_kind(kind).__name__,
    )


def one_dim(n: int, kind: KindLike = DEFAULT_KIND) -> Nested1:
    """Return a list of length `n` with every element the zero of `kind`.

    >>> one_dim(3, int)
    [0, 0, 0]
    """
    shape = check_extents(n)
    zero = zero_factory(kind)
    _log_build(shape, kind)
    return fill_one_dim(*shape, zero)


def two_dim(a: int, b: int, kind: KindLike = DEFAULT_KIND) -> Nested2:
    """Return `a` distinct rows, each a list of `b` zeros of `kind`.

    >>> two_dim(3, 2, int)
    [[0, 0], [0, 0], [0, 0]]
    """
    shape = check_extents(a, b)
    zero = zero_factory(kind)
    _log_build(shape, kind)
    return fill_two_dim(*shape, zero)


def three_dim(a: int, b: int, c: int, kind: KindLike = DEFAULT_KIND) -> Nested3:
    shape = check_extents(a, b, c)
    zero = zero_factory(kind)
    _log_build(shape, kind)
    return fill_three_dim(*shape, zero)


def four_dim(
    a: int, b: int, c: int, d: int, kind: KindLike = DEFAULT_KIND
) -> Nested4:
    """Return an `a` x `b` x `c` x `d` nested list of zeros of `kind`.

    >>> four_dim(1, 1, 1, 1, int)
    [[[[0]]]]
    """
    shape = check_extents(a, b, c, d)
    zero = zero_factory(kind)
    _log_build(shape, kind)
    return fill_four_dim(*shape, zero)
