"""src/hwforecast/modeling/selection.py"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Literal


PrimaryMetric = Literal["rmse", "mae", "smape", "mase"]

_METRIC_COLUMNS = {"rmse": "RMSE", "mae": "MAE", "smape": "SMAPE", "mase": "MASE"}


@dataclass(frozen=True)
class SelectionResult:
    best_model: str
    best_row: dict

    def to_dict(self) -> dict:
        return {"Best_Model": self.best_model, **self.best_row}


def _as_float(v: Any) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        return float("nan")


def pick_best_model(rows: list[dict], *, primary: PrimaryMetric | str = "rmse") -> SelectionResult:
    """
    Lowest primary metric wins; rows with a non-finite value are skipped.

    rows: dicts with a "Model" key and uppercase metric columns.
    primary: case-insensitive metric name.
    """
    if not rows:
        raise ValueError("No model rows to select from.")

    key = str(primary).strip().lower()
    if key not in _METRIC_COLUMNS:
        raise ValueError(f"Unknown metric {primary!r}; expected one of {sorted(_METRIC_COLUMNS)}")
    metric_col = _METRIC_COLUMNS[key]

    scored = [(r, _as_float(r.get(metric_col))) for r in rows]
    scored = [(r, v) for r, v in scored if math.isfinite(v)]
    if not scored:
        raise ValueError(f"All {metric_col} values are NaN; cannot select a best model.")

    best_row, _ = min(scored, key=lambda rv: rv[1])
    best_model = str(best_row.get("Model", "unknown")).strip()
    return SelectionResult(best_model=best_model, best_row=dict(best_row))
