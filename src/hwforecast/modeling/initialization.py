"""src/hwforecast/modeling/initialization.py

Warm start for the recursive updater.

A single-harmonic regression

    y[t] ~ L + B*t + A*cos(2*pi*t/m) + C*sin(2*pi*t/m)

is fitted by ordinary least squares over the whole series. L and B become the
initial level and trend; the seasonal profile for phase i is
A*cos(2*pi*i/m) + C*sin(2*pi*i/m), re-centered to zero mean so the seasonal
component does not bias the level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from hwforecast.common.errors import InsufficientDataError, InvalidParameterError
from hwforecast.features.build_features import harmonic_design_matrix, harmonic_profile

logger = logging.getLogger(__name__)

# intercept, slope, cos, sin
N_REGRESSION_PARAMS = 4


@dataclass(frozen=True, eq=False)
class InitialState:
    level: float
    trend: float
    season: np.ndarray  # length m, zero mean


def solve_least_squares(design: np.ndarray, target: np.ndarray) -> np.ndarray:
    """
    Least-squares coefficients for design @ coef ~ target.

    SVD based (numpy.linalg.lstsq), so a rank-deficient design (e.g. the sine
    column vanishes when m == 2) yields the minimum-norm solution instead of
    failing.
    """
    X = np.asarray(design, dtype=float)
    y = np.asarray(target, dtype=float)
    if X.ndim != 2 or y.ndim != 1 or X.shape[0] != y.shape[0]:
        raise ValueError(f"Incompatible shapes: design {X.shape}, target {y.shape}")
    coef, _, rank, _ = np.linalg.lstsq(X, y, rcond=None)
    if rank < X.shape[1]:
        logger.debug("Design matrix rank %d < %d columns; using minimum-norm solution.", rank, X.shape[1])
    return coef


def center_season(profile: np.ndarray) -> np.ndarray:
    """Subtract the mean. Idempotent up to floating point."""
    p = np.asarray(profile, dtype=float)
    if p.size == 0:
        return p.copy()
    return p - p.mean()


def initialize_components(y: np.ndarray, season_length: int) -> InitialState:
    """
    Initial level, trend and one cycle of seasonal offsets for series y.

    Raises
    ------
    InsufficientDataError
        Fewer than 4 observations (the harmonic regression is under-determined).
    InvalidParameterError
        season_length < 1.
    """
    y = np.asarray(y, dtype=float)
    m = int(season_length)
    if m < 1:
        raise InvalidParameterError(f"season_length must be >= 1, got {m}")
    if y.size < N_REGRESSION_PARAMS:
        raise InsufficientDataError(
            f"Need at least {N_REGRESSION_PARAMS} observations for the initial regression, got {y.size}"
        )

    coef = solve_least_squares(harmonic_design_matrix(y.size, m), y)
    level, trend = float(coef[0]), float(coef[1])

    if m == 1:
        # non-seasonal: the season is identically zero
        season = np.zeros(1, dtype=float)
    else:
        season = center_season(harmonic_profile(coef[2], coef[3], m))
    season.flags.writeable = False

    logger.debug("Initial state: level=%.6g trend=%.6g season_amplitude=%.6g", level, trend, float(np.max(np.abs(season))))
    return InitialState(level=level, trend=trend, season=season)
