import logging

from .builders import MAX_RANK, four_dim, one_dim, three_dim, two_dim
from .creation import (
    arange,
    full,
    full_like,
    linspace,
    normal,
    ones,
    ones_like,
    uniform,
    zeros,
    zeros_like,
)
from .element import (
    DEFAULT_KIND,
    HasOne,
    HasZero,
    element_kind,
    one_of,
    register_one,
    register_zero,
    zero_of,
)
from .errors import (
    InvalidExtentError,
    InvalidRankError,
    NdnestError,
    RaggedShapeError,
    UndefinedZeroError,
)
from .shaped import Shaped, shape_of

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "one_dim",
    "two_dim",
    "three_dim",
    "four_dim",
    "zeros",
    "ones",
    "full",
    "zeros_like",
    "ones_like",
    "full_like",
    "arange",
    "linspace",
    "uniform",
    "normal",
    "Shaped",
    "shape_of",
    "HasZero",
    "HasOne",
    "element_kind",
    "zero_of",
    "one_of",
    "register_zero",
    "register_one",
    "DEFAULT_KIND",
    "MAX_RANK",
    "NdnestError",
    "InvalidExtentError",
    "InvalidRankError",
    "UndefinedZeroError",
    "RaggedShapeError",
]
