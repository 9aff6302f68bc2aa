"""src/hwforecast/io/writers.py"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import joblib
import pandas as pd


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def write_csv(df: pd.DataFrame, path: Path, *, index: bool = False) -> Path:
    """Write DataFrame to CSV (ensures parent folder exists)."""
    ensure_parent_dir(path)
    df.to_csv(path, index=index)
    return path


def save_model(model: Any, path: Path, *, model_name: str, **metadata: Any) -> Path:
    """
    Persist a fitted model as a joblib payload:
        {"model_name": ..., "model": ..., **metadata}
    """
    ensure_parent_dir(path)
    payload: dict[str, Any] = {"model_name": str(model_name), "model": model, **metadata}
    joblib.dump(payload, path)
    return path


def load_model(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Missing model artifact:\n{path}")
    payload = joblib.load(path)
    if not isinstance(payload, dict) or "model" not in payload:
        raise ValueError(f"Not a model payload: {path}")
    return payload
