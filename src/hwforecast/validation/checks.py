"""src/hwforecast/validation/checks.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np
import pandas as pd

from hwforecast.validation.schemas import SchemaSpec, assert_schema


@dataclass(frozen=True)
class CheckResult:
    ok: bool
    errors: tuple[str, ...]

    def raise_if_failed(self) -> None:
        if not self.ok:
            msg = "\n".join(self.errors) if self.errors else "Validation failed."
            raise ValueError(msg)


def check_series(values: Iterable[float] | np.ndarray, *, min_length: int = 1) -> CheckResult:
    """
    Shape and content checks for an observation series:
    - one-dimensional
    - every value finite
    - at least min_length points
    """
    errors: list[str] = []
    try:
        y = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as e:
        return CheckResult(ok=False, errors=(f"series is not numeric: {e}",))

    if y.ndim != 1:
        return CheckResult(ok=False, errors=(f"series must be 1-D, got shape {y.shape}",))

    bad = ~np.isfinite(y)
    n_bad = int(bad.sum())
    if n_bad:
        sample = np.flatnonzero(bad)[:10].tolist()
        errors.append(f"series: {n_bad} non-finite values; positions={sample}")

    if y.size < int(min_length):
        errors.append(f"series: length {y.size} below minimum {int(min_length)}")

    return CheckResult(ok=(len(errors) == 0), errors=tuple(errors))


def validate_frame(df: pd.DataFrame, *, schema: SchemaSpec, value_col: str | None = None) -> CheckResult:
    """Schema check plus a finiteness check on value_col (if given)."""
    try:
        assert_schema(df, schema)
    except KeyError as e:
        return CheckResult(ok=False, errors=(str(e),))

    errors: list[str] = []
    if value_col and value_col in df.columns:
        x = pd.to_numeric(df[value_col], errors="coerce")
        n_bad = int((~np.isfinite(x.to_numpy(dtype=float))).sum())
        if n_bad:
            errors.append(f"{value_col}: {n_bad} missing or non-numeric values")

    return CheckResult(ok=(len(errors) == 0), errors=tuple(errors))
