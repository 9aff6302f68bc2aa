"""src/hwforecast/modeling/recursion.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from hwforecast.modeling.initialization import InitialState
from hwforecast.modeling.params import HoltWintersParams

logger = logging.getLogger(__name__)


def read_only(values: np.ndarray) -> np.ndarray:
    """Float array with the writeable flag cleared."""
    arr = np.asarray(values, dtype=float)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class ComponentHistory:
    """Level, trend and season for every time step, aligned with the series."""
    level: np.ndarray
    trend: np.ndarray
    season: np.ndarray

    def __post_init__(self) -> None:
        for name in ("level", "trend", "season"):
            object.__setattr__(self, name, read_only(getattr(self, name)))

    def __setstate__(self, state: dict) -> None:
        # unpickled arrays come back writeable
        self.__dict__.update(state)
        self.__post_init__()

    def __len__(self) -> int:
        return int(self.level.size)


def seasonal_lag(t: int, season_length: int) -> int:
    """
    Index of the same seasonal phase one cycle earlier: t - m.

    Only valid once a full cycle has been stored (t >= m); there is no
    wraparound to the end of the array.
    """
    m = int(season_length)
    if t < m:
        raise IndexError(f"No seasonal value one cycle before t={t} (m={m})")
    return t - m


def last_cycle_index(n: int, season_length: int, step: int) -> int:
    """
    Index into the final stored cycle [n - m, n - 1] for forecast step h >= 1.

    Steps 1..m walk that cycle once in order; later steps wrap modulo m, so
    step h reads the phase of time n - 1 + h.
    """
    m = int(season_length)
    if step < 1:
        raise IndexError(f"forecast step must be >= 1, got {step}")
    if n < m:
        raise IndexError(f"Need a full stored cycle (n={n} < m={m})")
    return n - m + (step - 1) % m


def bootstrap_length(season_length: int) -> int:
    """
    First step handled by the full recursion.

    Normally m. The trend update reads level(t-2), so the recursion never
    starts before t = 2.
    """
    return max(int(season_length), 2)


def run_recursion(y: np.ndarray, params: HoltWintersParams, init: InitialState) -> ComponentHistory:
    """
    One left-to-right pass producing the full component history.

    t = 0          level/trend from init, season[0:m] = init profile
    0 < t < m      level pinned to y[t], trend carried, season left at init
    t >= m         convex blends:
        level[t]  = a*(y[t] - s[t-m]) + (1-a)*(level[t-1] + trend[t-1])
        trend[t]  = b*(level[t] - level[t-2]) + (1-b)*trend[t-1]
        season[t] = g*(y[t] - level[t-1] - trend[t-1]) + (1-g)*s[t-m]

    NOTE: the trend blend differences level over two steps (t-2), not the
    textbook one step. In steady state that difference is about twice the
    per-step slope.
    """
    y = np.asarray(y, dtype=float)
    n = y.size
    m = params.season_length
    a, b, g = params.alpha, params.beta, params.gamma
    seasonal = params.seasonal

    level = np.empty(n, dtype=float)
    trend = np.empty(n, dtype=float)
    season = np.zeros(n, dtype=float)

    if seasonal:
        k = min(m, n)
        season[:k] = init.season[:k]

    level[0] = init.level
    trend[0] = init.trend

    start = min(bootstrap_length(m), n)
    for t in range(1, start):
        level[t] = y[t]
        trend[t] = trend[t - 1]

    for t in range(start, n):
        prev_season = season[seasonal_lag(t, m)] if seasonal else 0.0
        base = level[t - 1] + trend[t - 1]

        level[t] = a * (y[t] - prev_season) + (1.0 - a) * base
        trend[t] = b * (level[t] - level[t - 2]) + (1.0 - b) * trend[t - 1]
        if seasonal:
            season[t] = g * (y[t] - base) + (1.0 - g) * prev_season

    logger.debug("Recursion done: n=%d m=%d final level=%.6g trend=%.6g", n, m, level[-1], trend[-1])
    return ComponentHistory(level=level, trend=trend, season=season)
