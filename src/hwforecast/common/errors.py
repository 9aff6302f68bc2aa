"""src/hwforecast/common/errors.py"""

from __future__ import annotations


class HoltWintersError(Exception):
    """Base class for every failure raised by the forecasting engine."""


class AlreadyFittedError(HoltWintersError, RuntimeError):
    """fit() called on a model that already holds fitted state."""


class NotFittedError(HoltWintersError, RuntimeError):
    """forecast() or state inspection called on an unfit model."""


class InsufficientDataError(HoltWintersError, ValueError):
    """Series too short for the initial regression or for one full season."""


class InvalidParameterError(HoltWintersError, ValueError):
    """Bad smoothing weight, season length, horizon, option or input series."""


InvalidArgumentError = InvalidParameterError
