"""tests/unit/test_validation.py"""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from hwforecast.validation.checks import check_series, validate_frame
from hwforecast.validation.schemas import FORECAST_OUTPUT, assert_schema, series_input


def test_check_series_passes_clean_input() -> None:
    res = check_series([1.0, 2.0, 3.0], min_length=3)
    assert res.ok
    res.raise_if_failed()  # should not raise


def test_check_series_reports_non_finite_positions() -> None:
    res = check_series([1.0, np.nan, 3.0, np.inf])
    assert not res.ok
    assert "positions=[1, 3]" in res.errors[0]
    with pytest.raises(ValueError):
        res.raise_if_failed()


def test_check_series_rejects_2d_and_short() -> None:
    assert not check_series(np.ones((3, 3))).ok
    assert not check_series([1.0], min_length=2).ok
    assert not check_series(["a", "b"]).ok


def test_validate_frame_missing_column() -> None:
    df = pd.DataFrame({"Step": [1], "Forecast": [1.0]})
    res = validate_frame(df, schema=FORECAST_OUTPUT)
    assert not res.ok
    assert "Index" in res.errors[0]


def test_validate_frame_flags_non_numeric_values() -> None:
    df = pd.DataFrame({"value": [1.0, "x", None]})
    res = validate_frame(df, schema=series_input("value"), value_col="value")
    assert not res.ok
    assert "2 missing" in res.errors[0]


def test_assert_schema_raises_key_error() -> None:
    with pytest.raises(KeyError):
        assert_schema(pd.DataFrame({"a": [1]}), series_input("value"))
