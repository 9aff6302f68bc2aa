"""src/hwforecast/pipelines/run_backtest.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import numpy as np
import pandas as pd

from hwforecast.common.config import AppConfig
from hwforecast.io.writers import write_csv
from hwforecast.modeling.baselines import ForecastModel, fit_drift, fit_naive_last, fit_seasonal_naive
from hwforecast.modeling.evaluation import compute_metrics
from hwforecast.modeling.holt_winters import HoltWinters
from hwforecast.modeling.initialization import N_REGRESSION_PARAMS
from hwforecast.modeling.params import HoltWintersParams
from hwforecast.modeling.selection import pick_best_model
from hwforecast.modeling.ts_models import fit_statsmodels_hw
from hwforecast.pipelines._common import load_input_series, output_dir, safe_int
from hwforecast.validation.checks import validate_frame
from hwforecast.validation.schemas import MODEL_COMPARISON

logger = logging.getLogger(__name__)

Fitter = Callable[[np.ndarray, HoltWintersParams], ForecastModel]

FITTERS: dict[str, Fitter] = {
    "holt_winters": lambda y, p: HoltWinters(p).fit(y),
    "seasonal_naive": lambda y, p: fit_seasonal_naive(y, p.season_length),
    "naive_last": lambda y, p: fit_naive_last(y),
    "drift": lambda y, p: fit_drift(y),
    "statsmodels_hw": fit_statsmodels_hw,
}

DEFAULT_CANDIDATES = list(FITTERS)


@dataclass(frozen=True)
class BacktestResult:
    best_model: str
    comparison: pd.DataFrame
    comparison_csv: Path


def holdout_split(y: np.ndarray, holdout: int) -> tuple[np.ndarray, np.ndarray]:
    """Last `holdout` points are the test window."""
    if holdout <= 0 or holdout >= y.size:
        raise ValueError(f"holdout must be in [1, {y.size - 1}], got {holdout}")
    return y[:-holdout], y[-holdout:]


def run_backtest(cfg: AppConfig) -> BacktestResult:
    """
    Single holdout backtest:
    every candidate is fit on the head of the series and scored on the last
    `backtest.holdout` points (default one season).
    """
    params = cfg.model_params()
    m = params.season_length

    y = load_input_series(cfg).to_numpy(dtype=float)
    holdout = safe_int(cfg.backtest.get("holdout"), m)
    y_train, y_test = holdout_split(y, holdout)
    if y_train.size < max(N_REGRESSION_PARAMS, m):
        raise ValueError(
            f"Training window of {y_train.size} points is too short for m={m}; reduce backtest.holdout."
        )

    candidates = cfg.backtest.get("candidates") or DEFAULT_CANDIDATES
    primary = str(cfg.backtest.get("metric_primary", "rmse")).lower()

    rows: list[dict[str, Any]] = []
    for name in candidates:
        fitter = FITTERS.get(str(name))
        if fitter is None:
            logger.warning("Unknown backtest candidate %r; skipping.", name)
            continue
        try:
            model = fitter(y_train, params)
            y_pred = np.asarray(model.predict(y_test.size), dtype=float)
        except Exception as e:
            logger.exception("Model %s failed: %s", name, e)
            y_pred = np.full_like(y_test, np.nan, dtype=float)

        mpack = compute_metrics(y_test, y_pred, y_train=y_train, season_length=m)
        if not np.isfinite(mpack.rmse):
            logger.warning("No valid holdout points for model=%s", name)
            continue

        rows.append(
            {
                "Model": str(name),
                "Train_Points": int(y_train.size),
                "Holdout_Points": int(np.isfinite(y_pred).sum()),
                **mpack.as_dict(),
            }
        )

    sel = pick_best_model(rows, primary=primary)

    comparison = pd.DataFrame(rows).sort_values("RMSE").reset_index(drop=True)
    validate_frame(comparison, schema=MODEL_COMPARISON).raise_if_failed()
    metrics_dir = output_dir(cfg, "metrics_dir")
    comparison_csv = write_csv(comparison, metrics_dir / "model_comparison.csv")

    logger.info("Backtest complete. Best model by %s: %s", primary, sel.best_model)
    logger.info("Saved model comparison: %s", comparison_csv)
    return BacktestResult(best_model=sel.best_model, comparison=comparison, comparison_csv=comparison_csv)
