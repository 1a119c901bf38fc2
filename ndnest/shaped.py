import math
from dataclasses import dataclass
from typing import Any, Self

import numpy

from .builders import MAX_RANK, check_shape, fill
from .element import DEFAULT_KIND, KindLike, zero_factory
from .errors import RaggedShapeError


def _shape(data: Any, rank: int | None) -> tuple[int, ...]:
    if rank == 0 or not isinstance(data, list):
        if rank:
            raise RaggedShapeError(
                f"Expected a nested list of {rank} more level(s), "
                f"got {type(data).__name__}: {data!r}"
            )
        return ()
    if not data:
        return (0,) * (rank if rank is not None else 1)
    sub_rank = rank - 1 if rank is not None else None
    subs = {_shape(sub, sub_rank) for sub in data}
    if len(subs) != 1:
        raise RaggedShapeError(f"Nested list is ragged, rows have shapes {subs}")
    (sub,) = subs
    return (len(data), *sub)


def shape_of(data: list[Any], rank: int | None = None) -> tuple[int, ...]:
    """Infer the extents of a rectangular nested list.

    Without `rank`, nesting is followed until a non-list or an empty axis is met,
    so the shape of `[]` is `(0,)`. With `rank`, exactly that many levels are
    read, and an empty axis reports its remaining extents as zero.
    """
    if rank is not None and rank < 1:
        raise ValueError(f"Rank must be positive, got {rank}")
    if not isinstance(data, list):
        raise RaggedShapeError(f"Expected a nested list, got {type(data).__name__}")
    return _shape(data, rank)


def _conforms(data: Any, shape: tuple[int, ...]) -> bool:
    # Axes after an empty one cannot be observed and always conform
    if not shape:
        return True
    if not isinstance(data, list) or len(data) != shape[0]:
        return False
    return all(_conforms(sub, shape[1:]) for sub in data)


@dataclass(frozen=True)
class Shaped:
    data: list[Any]
    shape: tuple[int, ...]

    # Wraps a mutable list, so equality is structural and hashing is refused
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self):
        shape = check_shape(self.shape)
        object.__setattr__(self, "shape", shape)
        if not _conforms(self.data, shape):
            raise RaggedShapeError(f"Data does not match declared shape {shape}")

    @classmethod
    def of(cls, data: list[Any], rank: int | None = None) -> Self:
        return cls(data, shape_of(data, rank))

    @classmethod
    def zeros(cls, shape: Any, kind: KindLike = DEFAULT_KIND) -> Self:
        shape = check_shape(shape)
        return cls(fill(shape, zero_factory(kind)), shape)

    @property
    def rank(self) -> int:
        assert 1 <= len(self.shape) <= MAX_RANK
        return len(self.shape)

    @property
    def size(self) -> int:
        return math.prod(self.shape)

    def __len__(self) -> int:
        return self.shape[0]

    def __getitem__(self, item: int | tuple[int, ...]) -> Any:
        if not isinstance(item, tuple):
            return self.data[item]
        if len(item) > self.rank:
            raise IndexError(f"Too many indices for rank {self.rank}: {item}")
        target: Any = self.data
        for index in item:
            target = target[index]
        return target

    def numpy(self, dtype: Any = None) -> numpy.ndarray:
        return numpy.array(self.data, dtype=dtype).reshape(self.shape)
