"""src/hwforecast/modeling/evaluation.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np


def _paired_finite(y_true: Iterable[float], y_pred: Iterable[float]) -> tuple[np.ndarray, np.ndarray]:
    yt = np.asarray(list(y_true), dtype=float)
    yp = np.asarray(list(y_pred), dtype=float)
    if yt.shape != yp.shape:
        raise ValueError(f"y_true and y_pred differ in shape: {yt.shape} vs {yp.shape}")
    keep = np.isfinite(yt) & np.isfinite(yp)
    return yt[keep], yp[keep]


def rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    if y_true.size == 0:
        return float("nan")
    return float(np.sqrt(np.mean((y_true - y_pred) ** 2)))


def mae(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    if y_true.size == 0:
        return float("nan")
    return float(np.mean(np.abs(y_true - y_pred)))


def smape(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    if y_true.size == 0:
        return float("nan")
    denom = (np.abs(y_true) + np.abs(y_pred)) / 2.0
    denom = np.where(denom == 0, 1.0, denom)
    return float(np.mean(np.abs(y_true - y_pred) / denom) * 100.0)


def seasonal_naive_scale(y_train: Iterable[float], season_length: int) -> float:
    """Mean absolute m-step difference of the training series (MASE denominator)."""
    y = np.asarray(list(y_train), dtype=float)
    m = max(int(season_length), 1)
    if y.size <= m:
        return float("nan")
    d = np.abs(y[m:] - y[:-m])
    d = d[np.isfinite(d)]
    if d.size == 0:
        return float("nan")
    return float(np.mean(d))


def mase(y_true: np.ndarray, y_pred: np.ndarray, scale: float) -> float:
    if y_true.size == 0 or not np.isfinite(scale) or scale == 0:
        return float("nan")
    return float(np.mean(np.abs(y_true - y_pred)) / scale)


@dataclass(frozen=True)
class MetricPack:
    rmse: float
    mae: float
    smape: float
    mase: float = float("nan")

    def as_dict(self) -> dict[str, float]:
        # column names used in the comparison CSV
        return {
            "RMSE": float(self.rmse),
            "MAE": float(self.mae),
            "SMAPE": float(self.smape),
            "MASE": float(self.mase),
        }


def compute_metrics(
    y_true: Iterable[float],
    y_pred: Iterable[float],
    *,
    y_train: Iterable[float] | None = None,
    season_length: int = 1,
) -> MetricPack:
    """
    Accuracy over the finite (y_true, y_pred) pairs.

    MASE is only computed when the training series is given; it scales MAE by
    the in-sample seasonal-naive error.
    """
    yt, yp = _paired_finite(y_true, y_pred)
    scale = seasonal_naive_scale(y_train, season_length) if y_train is not None else float("nan")
    return MetricPack(
        rmse=rmse(yt, yp),
        mae=mae(yt, yp),
        smape=smape(yt, yp),
        mase=mase(yt, yp, scale),
    )
