"""src/hwforecast/modeling/__init__.py"""

from .baselines import (
    DriftModel,
    NaiveLastModel,
    SeasonalNaiveModel,
    fit_drift,
    fit_naive_last,
    fit_seasonal_naive,
)
from .evaluation import MetricPack, compute_metrics
from .holt_winters import FittedHoltWinters, HoltWinters
from .initialization import InitialState, center_season, initialize_components, solve_least_squares
from .params import HoltWintersParams
from .recursion import ComponentHistory, last_cycle_index, run_recursion, seasonal_lag
from .selection import SelectionResult, pick_best_model
from .ts_models import StatsmodelsHWModel, fit_statsmodels_hw

__all__ = [
    "HoltWintersParams",
    "HoltWinters",
    "FittedHoltWinters",
    "InitialState",
    "initialize_components",
    "solve_least_squares",
    "center_season",
    "ComponentHistory",
    "run_recursion",
    "seasonal_lag",
    "last_cycle_index",
    "NaiveLastModel",
    "DriftModel",
    "SeasonalNaiveModel",
    "fit_naive_last",
    "fit_drift",
    "fit_seasonal_naive",
    "StatsmodelsHWModel",
    "fit_statsmodels_hw",
    "MetricPack",
    "compute_metrics",
    "SelectionResult",
    "pick_best_model",
]
