"""src/hwforecast/__init__.py"""

from hwforecast.common.errors import (
    AlreadyFittedError,
    HoltWintersError,
    InsufficientDataError,
    InvalidArgumentError,
    InvalidParameterError,
    NotFittedError,
)
from hwforecast.modeling.holt_winters import FittedHoltWinters, HoltWinters
from hwforecast.modeling.params import HoltWintersParams

__version__ = "0.1.0"

__all__ = [
    "HoltWinters",
    "FittedHoltWinters",
    "HoltWintersParams",
    "HoltWintersError",
    "AlreadyFittedError",
    "NotFittedError",
    "InsufficientDataError",
    "InvalidParameterError",
    "InvalidArgumentError",
]
