"""src/hwforecast/validation/schemas.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pandas as pd


@dataclass(frozen=True)
class SchemaSpec:
    """Minimal schema specification for a DataFrame."""
    name: str
    required_cols: tuple[str, ...]
    dtype_hints: dict[str, str] | None = None


def _missing_cols(df: pd.DataFrame, required: Iterable[str]) -> list[str]:
    return [c for c in required if c not in df.columns]


COMPONENTS_OUTPUT = SchemaSpec(
    name="components",
    required_cols=("Index", "y", "level", "trend", "season", "fitted"),
    dtype_hints={"Index": "int", "y": "float", "level": "float", "trend": "float", "season": "float", "fitted": "float"},
)

FORECAST_OUTPUT = SchemaSpec(
    name="forecast",
    required_cols=("Step", "Index", "Forecast"),
    dtype_hints={"Step": "int", "Index": "int", "Forecast": "float"},
)

MODEL_COMPARISON = SchemaSpec(
    name="model_comparison",
    required_cols=("Model", "Holdout_Points", "RMSE", "MAE", "SMAPE", "MASE"),
)


def series_input(value_col: str) -> SchemaSpec:
    return SchemaSpec(name="series_input", required_cols=(value_col,), dtype_hints={value_col: "float"})


def assert_schema(df: pd.DataFrame, spec: SchemaSpec) -> None:
    """Raise a KeyError if required columns are missing."""
    missing = _missing_cols(df, spec.required_cols)
    if missing:
        raise KeyError(
            f"{spec.name}: missing columns {missing}. Found: {list(df.columns)}"
        )
