from dataclasses import dataclass, field
from enum import Enum
from decimal import Decimal
from fractions import Fraction

import numpy
import pytest

from ndnest import (
    HasOne,
    HasZero,
    UndefinedZeroError,
    element_kind,
    one_dim,
    one_of,
    register_one,
    register_zero,
    two_dim,
    zero_of,
)
from ndnest import element
from ndnest.element import zero_factory


@pytest.fixture(autouse=True)
def fresh_registries(monkeypatch):
    monkeypatch.setattr(element, "_ZEROS", dict(element._ZEROS))
    monkeypatch.setattr(element, "_ONES", dict(element._ONES))


@dataclass
class Money:
    cents: int

    @classmethod
    def zero(cls) -> "Money":
        return Money(0)

    @classmethod
    def one(cls) -> "Money":
        return Money(100)


@dataclass
class Bag:
    items: list = field(default_factory=list)


class Tropical:
    def __init__(self, value: float):
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Tropical) and self.value == other.value


class MinPlus(Tropical):
    pass


@pytest.mark.parametrize(
    "kind, expected",
    [
        (int, 0),
        (float, 0.0),
        (complex, 0j),
        (bool, False),
        (Fraction, Fraction(0)),
        (Decimal, Decimal(0)),
        (numpy.float32, numpy.float32(0)),
        (numpy.int8, numpy.int8(0)),
        (numpy.bool_, numpy.False_),
    ],
    ids=str,
)
def test_builtin_zeros(kind, expected):
    zero = zero_of(kind)
    assert zero == expected
    assert type(zero) is kind


@pytest.mark.parametrize(
    "kind, expected", [(int, 1), (float, 1.0), (bool, True), (numpy.uint16, 1)]
)
def test_builtin_ones(kind, expected):
    assert one_of(kind) == expected
    assert type(one_of(kind)) is kind


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("float32", numpy.float32),
        ("int64", numpy.int64),
        (numpy.dtype("uint8"), numpy.uint8),
        (numpy.dtype(bool), numpy.bool_),
        (float, float),
    ],
)
def test_element_kind(kind, expected):
    assert element_kind(kind) is expected


def test_dtype_names_build_numpy_scalars():
    xs = one_dim(3, "float16")
    assert all(type(x) is numpy.float16 for x in xs)
    numpy.testing.assert_allclose(numpy.array(xs), numpy.zeros(3))


@pytest.mark.parametrize("kind", ["not-a-dtype", 3, None])
def test_bad_kinds(kind):
    with pytest.raises(UndefinedZeroError):
        element_kind(kind)


@pytest.mark.parametrize("kind", [str, object, numpy.str_])
def test_kinds_without_zero(kind):
    with pytest.raises(UndefinedZeroError):
        zero_of(kind)


def test_protocol_capability():
    assert isinstance(Money, HasZero)
    assert isinstance(Money, HasOne)
    assert not isinstance(int, HasZero)
    assert two_dim(1, 2, Money) == [[Money(0), Money(0)]]
    assert one_of(Money) == Money(100)


def test_protocol_zeros_are_not_shared():
    m = two_dim(2, 2, Money)
    m[0][0].cents = 5
    assert m[0][1] == Money(0)
    assert m[1][0] == Money(0)


def test_registered_capability():
    register_zero(Bag, Bag)
    bags = one_dim(3, Bag)
    bags[0].items.append("x")
    assert bags == [Bag(["x"]), Bag(), Bag()]


def test_registration_follows_mro():
    register_zero(Tropical, lambda: Tropical(float("inf")))
    register_one(Tropical, lambda: Tropical(0.0))
    assert zero_of(MinPlus) == Tropical(float("inf"))
    assert one_of(MinPlus) == Tropical(0.0)


def test_registration_overrides_builtin_rule():
    class Celsius(float):
        pass

    register_zero(Celsius, lambda: Celsius(-273.15))
    assert zero_of(Celsius) == -273.15
    assert zero_of(float) == 0.0


def test_zero_is_called_per_element():
    calls = []

    class Counted:
        @classmethod
        def zero(cls):
            calls.append(None)
            return cls()

    factory = zero_factory(Counted)
    assert calls == []
    _ = two_dim(2, 3, Counted)
    assert len(calls) == 6
    assert callable(factory)


def test_registrations_do_not_leak_between_tests():
    assert Bag not in element._ZEROS
    assert Tropical not in element._ONES


def test_register_by_dtype():
    register_zero(numpy.dtype("int16"), lambda: numpy.int16(-1))
    register_one("float32", lambda: numpy.float32(2))
    assert zero_of(numpy.int16) == -1
    assert zero_of("int16") == -1
    assert one_dim(2, "int16") == [-1, -1]
    assert one_of(numpy.float32) == 2.0


@pytest.mark.parametrize("kind", ["not-a-dtype", 3])
def test_register_bad_kind(kind):
    with pytest.raises(UndefinedZeroError):
        register_zero(kind, lambda: 0)
    with pytest.raises(UndefinedZeroError):
        register_one(kind, lambda: 1)


class Sign(Enum):
    zero = 0
    one = 1


def test_non_callable_zero_attribute_is_not_a_capability():
    with pytest.raises(UndefinedZeroError):
        one_dim(2, Sign)
    with pytest.raises(UndefinedZeroError):
        one_dim(0, Sign)
    with pytest.raises(UndefinedZeroError):
        one_of(Sign)


def test_non_callable_zero_attribute_falls_through_to_registry():
    register_zero(Sign, lambda: Sign.zero)
    assert one_dim(2, Sign) == [Sign.zero, Sign.zero]
