import numpy
import pytest

from ndnest import four_dim, one_dim, three_dim, two_dim

with_kind = pytest.mark.parametrize(
    "kind",
    [int, float, complex, bool, numpy.float32, numpy.int64],
    ids=["int", "float", "complex", "bool", "float32", "int64"],
)

with_builder = pytest.mark.parametrize(
    "build, rank",
    [(one_dim, 1), (two_dim, 2), (three_dim, 3), (four_dim, 4)],
    ids=["one_dim", "two_dim", "three_dim", "four_dim"],
)
