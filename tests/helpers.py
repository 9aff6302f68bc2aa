"""tests/helpers.py"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
import yaml

from hwforecast.features.build_features import make_seasonal_series

SEASON_LENGTH = 12
N_OBS = 96


def sine_trend(n: int, m: int, *, slope: float = 2.0, amplitude: float = 3.0, intercept: float = 0.0) -> np.ndarray:
    t = np.arange(n, dtype=float)
    return intercept + slope * t + amplitude * np.sin(2.0 * np.pi * t / m)


def make_config_dict(**overrides: Any) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "paths": {
            "input_csv": "data/raw/series.csv",
            "forecasts_dir": "artifacts/forecasts",
            "metrics_dir": "artifacts/metrics",
            "figures_dir": "artifacts/figures",
            "models_dir": "artifacts/models",
        },
        "logging": {"level": "DEBUG"},
        "data": {"value_col": "value", "time_col": "t"},
        "model": {"alpha": 0.3, "beta": 0.1, "gamma": 0.1, "season_length": SEASON_LENGTH},
        "forecast": {"horizon": 2 * SEASON_LENGTH, "plot": False},
        "backtest": {"holdout": SEASON_LENGTH, "metric_primary": "rmse"},
    }
    for section, values in overrides.items():
        if isinstance(values, dict):
            raw.setdefault(section, {}).update(values)
        else:
            raw[section] = values
    return raw


def write_config(project_root: Path, raw: dict[str, Any]) -> Path:
    path = project_root / "configs" / "config.yaml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(raw), encoding="utf-8")
    return path


def write_series_csv(path: Path, n: int = N_OBS, m: int = SEASON_LENGTH) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    y = make_seasonal_series(n, m, slope=0.5, amplitude=3.0, intercept=10.0, noise=0.2, seed=3)
    y.to_frame().rename_axis("t").reset_index().to_csv(path, index=False)
    return path
