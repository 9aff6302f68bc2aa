"""src/hwforecast/modeling/ts_models.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np
from statsmodels.tsa.holtwinters import ExponentialSmoothing

from hwforecast.modeling.params import HoltWintersParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatsmodelsHWModel:
    """
    Wrapper around a statsmodels Holt-Winters fitted result.
    Used as an independent reference in backtests.
    """
    fitted: Any

    def predict(self, steps: int) -> np.ndarray:
        steps = int(steps)
        if steps < 0:
            raise ValueError("steps must be >= 0")
        if not hasattr(self.fitted, "forecast"):
            raise TypeError("statsmodels fitted object missing .forecast()")
        return np.asarray(self.fitted.forecast(steps), dtype=float)


def fit_statsmodels_hw(y_train: np.ndarray, params: HoltWintersParams) -> StatsmodelsHWModel:
    """
    Additive Holt-Winters from statsmodels with the same fixed smoothing weights.

    No parameter optimization; statsmodels starts from its legacy heuristic initial
    state, which is the point of comparison with the harmonic warm start.
    """
    y = np.asarray(y_train, dtype=float)
    if y.size == 0:
        raise ValueError("Cannot fit statsmodels Holt-Winters on empty series.")

    m = params.season_length
    seasonal = "add" if m > 1 and y.size >= 2 * m else None
    if seasonal is None and m > 1:
        logger.warning("Fewer than two seasons (%d < %d); statsmodels reference runs without seasonality.", y.size, 2 * m)

    if seasonal:
        model = ExponentialSmoothing(
            y,
            trend="add",
            seasonal="add",
            seasonal_periods=m,
            initialization_method="legacy-heuristic",
        )
    else:
        if y.size < 2:
            raise ValueError("Need at least 2 points for the trend-only statsmodels reference.")
        model = ExponentialSmoothing(
            y,
            trend="add",
            seasonal=None,
            initialization_method="known",
            initial_level=float(y[0]),
            initial_trend=float(y[1] - y[0]),
        )
    fit_kwargs: dict[str, Any] = {
        "smoothing_level": params.alpha,
        "smoothing_trend": params.beta,
        "optimized": False,
    }
    if seasonal:
        fit_kwargs["smoothing_seasonal"] = params.gamma
    fitted = model.fit(**fit_kwargs)
    return StatsmodelsHWModel(fitted=fitted)
