"""src/hwforecast/io/readers.py"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pandas as pd

from hwforecast.validation.schemas import assert_schema, series_input

logger = logging.getLogger(__name__)

VALUE_COL_ALIASES = ("value", "Value", "y", "temperature", "Number", "observation")


def read_csv(path: Path, *, dtype: dict[str, Any] | None = None) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Missing file:\n{path}")
    return pd.read_csv(path, dtype=dtype)


def _find_value_col(df: pd.DataFrame, value_col: str) -> str:
    if value_col in df.columns:
        return value_col
    for candidate in VALUE_COL_ALIASES:
        if candidate in df.columns:
            logger.info("Column %r not found; using %r as the value column.", value_col, candidate)
            return candidate
    return value_col


def read_series(path: Path, *, value_col: str = "value", time_col: str | None = None) -> pd.Series:
    """
    Read one regularly sampled series from CSV.

    - value_col (or a common alias) becomes the float values
    - rows are sorted by time_col when given
    - rows whose value does not parse are dropped with a warning

    Returns a float Series indexed 0..N-1, named after the value column.
    """
    df = read_csv(Path(path))
    df.columns = [str(c).strip() for c in df.columns]

    col = _find_value_col(df, value_col)
    assert_schema(df, series_input(col))

    if time_col:
        if time_col not in df.columns:
            raise KeyError(f"Time column {time_col!r} not in {list(df.columns)}")
        df = df.sort_values(time_col, kind="mergesort")

    values = pd.to_numeric(df[col], errors="coerce")
    n_bad = int(values.isna().sum())
    if n_bad:
        logger.warning("Dropping %d rows with missing/non-numeric %r in %s", n_bad, col, path)
        values = values.dropna()

    return values.astype(float).reset_index(drop=True).rename(col)
