"""src/hwforecast/pipelines/_common.py"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from hwforecast.common.config import AppConfig
from hwforecast.io.readers import read_series

DEFAULT_DIRS = {
    "forecasts_dir": "artifacts/forecasts",
    "metrics_dir": "artifacts/metrics",
    "figures_dir": "artifacts/figures",
    "models_dir": "artifacts/models",
}


def safe_int(x: Any, default: int) -> int:
    try:
        return int(x)
    except (TypeError, ValueError):
        return default


def output_dir(cfg: AppConfig, key: str) -> Path:
    p = cfg.paths.get(key) or cfg.resolve(DEFAULT_DIRS[key])
    p.mkdir(parents=True, exist_ok=True)
    return p


def load_input_series(cfg: AppConfig) -> pd.Series:
    input_csv = cfg.paths.get("input_csv")
    if input_csv is None:
        raise ValueError("Missing paths.input_csv in config")
    return read_series(
        input_csv,
        value_col=str(cfg.data.get("value_col", "value")),
        time_col=cfg.data.get("time_col"),
    )
