import functools
import logging
import numbers
from typing import (
    Any,
    Callable,
    Protocol,
    TypeAlias,
    TypeVar,
    runtime_checkable,
)

import numpy

from .errors import UndefinedZeroError

logger = logging.getLogger(__name__)

T_co = TypeVar("T_co", covariant=True)
Factory: TypeAlias = Callable[[], Any]
KindLike: TypeAlias = type | numpy.dtype | str

DEFAULT_KIND: type = float

_ZEROS: dict[type, Factory] = {}
_ONES: dict[type, Factory] = {}


@runtime_checkable
class HasZero(Protocol[T_co]):
    @classmethod
    def zero(cls) -> T_co:
        ...


@runtime_checkable
class HasOne(Protocol[T_co]):
    @classmethod
    def one(cls) -> T_co:
        ...


def element_kind(kind: KindLike) -> type:
    if isinstance(kind, type):
        return kind
    if isinstance(kind, (str, numpy.dtype)):
        try:
            return numpy.dtype(kind).type
        except TypeError as e:
            raise UndefinedZeroError(f"Unknown element kind name: {kind!r}") from e
    raise UndefinedZeroError(
        f"Element kind must be a type, dtype or dtype name, got {type(kind).__name__}"
    )


def _is_numeric(kind: type) -> bool:
    # numpy.bool_ is not registered as a numbers.Number
    return issubclass(kind, (numbers.Number, numpy.number, numpy.bool_))


def _registered(registry: dict[type, Factory], kind: type) -> Factory | None:
    for base in kind.__mro__:
        if base in registry:
            return registry[base]
    return None


def _resolve(
    kind: KindLike,
    registry: dict[type, Factory],
    protocol: type,
    method: str,
    unit: int,
) -> Factory:
    kind_ = element_kind(kind)
    # A plain attribute named like the method (e.g. an Enum member) does not count
    if isinstance(kind_, protocol) and callable(getattr(kind_, method)):
        return getattr(kind_, method)
    if (factory := _registered(registry, kind_)) is not None:
        return factory
    if _is_numeric(kind_):
        return functools.partial(kind_, unit)
    raise UndefinedZeroError(
        f"Element kind {kind_.__name__} has no {method} value - "
        f"implement {protocol.__name__} or register one with register_{method}."
    )


def zero_factory(kind: KindLike = DEFAULT_KIND) -> Factory:
    """Resolve the zero-value capability of `kind` to a factory of no arguments.

    Protocol implementations (a `zero` classmethod) take precedence over explicit
    registrations, which in turn take precedence over the built-in numeric rule
    of calling `kind(0)`. The factory is called once per element, so mutable
    zeros are never shared between positions of a container.
    """
    return _resolve(kind, _ZEROS, HasZero, "zero", 0)


def one_factory(kind: KindLike = DEFAULT_KIND) -> Factory:
    return _resolve(kind, _ONES, HasOne, "one", 1)


def zero_of(kind: KindLike = DEFAULT_KIND) -> Any:
    return zero_factory(kind)()


def one_of(kind: KindLike = DEFAULT_KIND) -> Any:
    return one_factory(kind)()


def register_zero(kind: KindLike, factory: Callable[[], Any]) -> None:
    kind_ = element_kind(kind)
    logger.info("Registered zero value for %s", kind_.__name__)
    _ZEROS[kind_] = factory


def register_one(kind: KindLike, factory: Callable[[], Any]) -> None:
    kind_ = element_kind(kind)
    logger.info("Registered one value for %s", kind_.__name__)
    _ONES[kind_] = factory
