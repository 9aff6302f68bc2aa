"""src/hwforecast/features/build_features.py"""

from __future__ import annotations

import numpy as np
import pandas as pd


def time_index(n: int) -> np.ndarray:
    return np.arange(int(n), dtype=float)


def harmonic_design_matrix(n: int, season_length: int) -> np.ndarray:
    """
    Design matrix for the linear-plus-first-harmonic regression.

    Columns
    -------
    intercept, t, cos(2*pi*t/m), sin(2*pi*t/m)

    For season_length <= 1 there is no periodic component and only the
    intercept and time columns are returned.
    """
    t = time_index(n)
    cols = [np.ones_like(t), t]
    m = int(season_length)
    if m > 1:
        angle = 2.0 * np.pi * t / m
        cols.extend([np.cos(angle), np.sin(angle)])
    return np.column_stack(cols)


def harmonic_profile(cos_coef: float, sin_coef: float, season_length: int) -> np.ndarray:
    """Evaluate A*cos(2*pi*i/m) + C*sin(2*pi*i/m) for phases i = 0..m-1."""
    m = int(season_length)
    angle = 2.0 * np.pi * np.arange(m, dtype=float) / m
    return cos_coef * np.cos(angle) + sin_coef * np.sin(angle)


def make_seasonal_series(
    n: int,
    season_length: int,
    *,
    slope: float = 1.0,
    amplitude: float = 1.0,
    intercept: float = 0.0,
    noise: float = 0.0,
    seed: int | None = None,
) -> pd.Series:
    """
    Synthetic test signal:
        y[t] = intercept + slope*t + amplitude*sin(2*pi*t/m) + N(0, noise^2)

    Returned as a float Series indexed 0..n-1 and named "value".
    """
    t = time_index(n)
    m = max(int(season_length), 1)
    y = intercept + slope * t + amplitude * np.sin(2.0 * np.pi * t / m)
    if noise > 0:
        rng = np.random.default_rng(seed)
        y = y + rng.normal(0.0, float(noise), size=y.shape)
    return pd.Series(y.astype(float), name="value")
