"""src/hwforecast/modeling/holt_winters.py

Additive Holt-Winters (triple exponential smoothing), batch fit then forecast.

Two value shapes:

    HoltWinters        unfit, holds only the parameters
    FittedHoltWinters  parameters + observations + component history

HoltWinters.fit(series) returns a new FittedHoltWinters and leaves the unfit
value untouched. Both are frozen; fitted arrays are read-only, so a fitted
model can be shared between threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import numpy as np
import pandas as pd

from hwforecast.common.errors import (
    AlreadyFittedError,
    InsufficientDataError,
    InvalidParameterError,
    NotFittedError,
)
from hwforecast.modeling.initialization import N_REGRESSION_PARAMS, initialize_components
from hwforecast.modeling.params import HoltWintersParams
from hwforecast.modeling.recursion import ComponentHistory, last_cycle_index, read_only, run_recursion
from hwforecast.validation.checks import check_series

logger = logging.getLogger(__name__)


def _as_observations(series: Iterable[float] | np.ndarray | pd.Series) -> np.ndarray:
    if isinstance(series, pd.Series):
        series = series.to_numpy()
    elif not isinstance(series, (np.ndarray, list, tuple)):
        # generators and other one-shot iterables
        try:
            series = list(series)
        except TypeError:
            raise InvalidParameterError(f"series must be iterable, got {type(series).__name__}") from None
    res = check_series(series, min_length=0)
    if not res.ok:
        raise InvalidParameterError("; ".join(res.errors))
    return read_only(np.array(series, dtype=float))


def _check_horizon(horizon: Any) -> int:
    if isinstance(horizon, bool) or not isinstance(horizon, (int, np.integer)):
        raise InvalidParameterError(f"horizon must be a positive integer, got {horizon!r}")
    if int(horizon) <= 0:
        raise InvalidParameterError(f"horizon must be > 0, got {horizon}")
    return int(horizon)


@dataclass(frozen=True)
class HoltWinters:
    """Unfit additive Holt-Winters model."""
    params: HoltWintersParams

    @classmethod
    def from_options(
        cls,
        *,
        alpha: float,
        beta: float,
        gamma: float,
        season_length: int,
    ) -> "HoltWinters":
        return cls(HoltWintersParams(alpha=alpha, beta=beta, gamma=gamma, season_length=season_length))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "HoltWinters":
        return cls(HoltWintersParams.from_mapping(options))

    @property
    def is_fitted(self) -> bool:
        return False

    def fit(self, series: Iterable[float] | np.ndarray | pd.Series) -> "FittedHoltWinters":
        """
        Fit the model to a fully materialized series.

        The series needs at least 4 points (initial regression) and at least one
        full season; two or more seasons give a meaningful seasonal update.
        Nothing is stored on failure.
        """
        y = _as_observations(series)
        m = self.params.season_length
        min_len = max(N_REGRESSION_PARAMS, m)
        if y.size < min_len:
            raise InsufficientDataError(
                f"Series of length {y.size} is too short; need >= {min_len} (season_length={m})"
            )
        if y.size < 2 * m:
            logger.warning("Series length %d covers fewer than two seasons (m=%d); each seasonal phase is updated at most once.", y.size, m)

        init = initialize_components(y, m)
        history = run_recursion(y, self.params, init)
        logger.info("Fitted Holt-Winters on %d observations (%s)", y.size, self.params.as_dict())
        return FittedHoltWinters(params=self.params, observations=y, history=history, initial_season=init.season)

    def forecast(self, horizon: int) -> np.ndarray:
        raise NotFittedError("Model is not fitted; call fit() first.")

    def _not_fitted(self) -> NotFittedError:
        return NotFittedError("Model is not fitted; no state to inspect.")

    @property
    def level(self) -> np.ndarray:
        raise self._not_fitted()

    @property
    def trend(self) -> np.ndarray:
        raise self._not_fitted()

    @property
    def season(self) -> np.ndarray:
        raise self._not_fitted()

    @property
    def n_obs(self) -> int:
        raise self._not_fitted()


@dataclass(frozen=True, eq=False)
class FittedHoltWinters:
    """Fitted additive Holt-Winters model (terminal state)."""
    params: HoltWintersParams
    observations: np.ndarray
    history: ComponentHistory
    initial_season: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "observations", read_only(self.observations))
        object.__setattr__(self, "initial_season", read_only(self.initial_season))

    def __setstate__(self, state: dict) -> None:
        # joblib/pickle restore: arrays come back writeable
        self.__dict__.update(state)
        self.__post_init__()

    @property
    def is_fitted(self) -> bool:
        return True

    @property
    def n_obs(self) -> int:
        return int(self.observations.size)

    @property
    def level(self) -> np.ndarray:
        return self.history.level

    @property
    def trend(self) -> np.ndarray:
        return self.history.trend

    @property
    def season(self) -> np.ndarray:
        return self.history.season

    def fit(self, series: Any) -> "FittedHoltWinters":
        raise AlreadyFittedError("Model is already fitted; create a new HoltWinters to refit.")

    def unfit(self) -> HoltWinters:
        """Fresh unfit model with the same parameters."""
        return HoltWinters(self.params)

    def forecast(self, horizon: int) -> np.ndarray:
        """
        Point forecasts for steps 1..horizon past the last observation.

            yhat[h] = level[N-1] + h*trend[N-1] + season[N - m + (h-1) mod m]

        Level and trend extrapolate linearly; the season repeats the last
        stored cycle.
        """
        f = _check_horizon(horizon)
        n, m = self.n_obs, self.params.season_length
        steps = np.arange(1, f + 1)
        idx = np.array([last_cycle_index(n, m, int(h)) for h in steps], dtype=int)
        out = self.level[-1] + steps * self.trend[-1] + self.season[idx]
        return out.astype(float)

    def fitted_values(self) -> np.ndarray:
        """
        One-step-ahead in-sample predictions level[t-1] + trend[t-1] + season[t-m].

        NaN where no full prior cycle exists (t < m, or t < 1 when m == 1).
        """
        n, m = self.n_obs, self.params.season_length
        out = np.full(n, np.nan, dtype=float)
        if n <= m:
            return out
        t = np.arange(m, n)
        out[m:] = self.level[t - 1] + self.trend[t - 1] + self.season[t - m]
        return out

    def residuals(self) -> np.ndarray:
        return self.observations - self.fitted_values()

    def components_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "Index": np.arange(self.n_obs, dtype=int),
                "y": self.observations,
                "level": self.level,
                "trend": self.trend,
                "season": self.season,
                "fitted": self.fitted_values(),
            }
        )

    def predict(self, steps: int) -> np.ndarray:
        """Alias of forecast() matching the baseline model interface."""
        return self.forecast(steps)
