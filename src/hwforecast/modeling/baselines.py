"""src/hwforecast/modeling/baselines.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np


class ForecastModel(Protocol):
    """Minimal interface shared by the engine and the benchmark models."""
    def predict(self, steps: int) -> np.ndarray: ...


def _check_steps(steps: int) -> int:
    steps = int(steps)
    if steps < 0:
        raise ValueError("steps must be >= 0")
    return steps


@dataclass(frozen=True)
class NaiveLastModel:
    """Forecast = last observed value repeated."""
    last_value: float

    def predict(self, steps: int) -> np.ndarray:
        steps = _check_steps(steps)
        return np.full(shape=(steps,), fill_value=float(self.last_value), dtype=float)


@dataclass(frozen=True)
class DriftModel:
    """
    Straight line through the first and last observation:
      drift = (y_last - y_first) / (n-1)
      yhat[h] = y_last + drift*h
    """
    last_value: float
    drift_per_step: float

    def predict(self, steps: int) -> np.ndarray:
        steps = _check_steps(steps)
        horizon = np.arange(1, steps + 1, dtype=float)
        return (self.last_value + self.drift_per_step * horizon).astype(float)


@dataclass(frozen=True, eq=False)
class SeasonalNaiveModel:
    """Repeat the last observed season: yhat[h] = y[n - m + (h-1) mod m]."""
    last_cycle: np.ndarray

    def predict(self, steps: int) -> np.ndarray:
        steps = _check_steps(steps)
        m = self.last_cycle.size
        idx = np.arange(steps) % m
        return self.last_cycle[idx].astype(float)


def fit_naive_last(y_train: np.ndarray) -> NaiveLastModel:
    y = np.asarray(y_train, dtype=float)
    if y.size == 0:
        raise ValueError("Cannot fit NaiveLastModel on empty series.")
    return NaiveLastModel(last_value=float(y[-1]))


def fit_drift(y_train: np.ndarray) -> DriftModel:
    y = np.asarray(y_train, dtype=float)
    if y.size == 0:
        raise ValueError("Cannot fit DriftModel on empty series.")
    if y.size < 2:
        return DriftModel(last_value=float(y[-1]), drift_per_step=0.0)
    drift = float((y[-1] - y[0]) / (y.size - 1))
    return DriftModel(last_value=float(y[-1]), drift_per_step=drift)


def fit_seasonal_naive(y_train: np.ndarray, season_length: int) -> SeasonalNaiveModel:
    y = np.asarray(y_train, dtype=float)
    m = max(int(season_length), 1)
    if y.size < m:
        raise ValueError(f"Need at least one season ({m} points) for SeasonalNaiveModel, got {y.size}.")
    return SeasonalNaiveModel(last_cycle=y[-m:].copy())
