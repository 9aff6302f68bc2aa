"""tests/unit/test_io.py"""

from __future__ import annotations

from pathlib import Path

import joblib
import numpy as np
import pandas as pd
import pytest

from hwforecast import HoltWinters
from hwforecast.io import load_model, read_series, save_model, write_csv


def test_read_series_sorts_by_time(tmp_path: Path) -> None:
    path = write_csv(pd.DataFrame({"t": [2, 0, 1], "value": [30.0, 10.0, 20.0]}), tmp_path / "s.csv")
    s = read_series(path, value_col="value", time_col="t")
    assert s.tolist() == [10.0, 20.0, 30.0]
    assert list(s.index) == [0, 1, 2]
    assert s.name == "value"


def test_read_series_uses_alias_column(tmp_path: Path) -> None:
    path = write_csv(pd.DataFrame({"temperature": [1.5, 2.5]}), tmp_path / "s.csv")
    s = read_series(path, value_col="value")
    assert s.name == "temperature"
    assert s.tolist() == [1.5, 2.5]


def test_read_series_drops_unparseable_rows(tmp_path: Path) -> None:
    path = tmp_path / "s.csv"
    path.write_text("value\n1.0\nabc\n\n3.0\n", encoding="utf-8")
    s = read_series(path)
    assert s.tolist() == [1.0, 3.0]


def test_read_series_missing_inputs(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_series(tmp_path / "missing.csv")
    path = write_csv(pd.DataFrame({"other": [1.0]}), tmp_path / "s.csv")
    with pytest.raises(KeyError):
        read_series(path, value_col="value")
    path = write_csv(pd.DataFrame({"value": [1.0]}), tmp_path / "s2.csv")
    with pytest.raises(KeyError):
        read_series(path, time_col="date")


def test_save_and_load_fitted_model(tmp_path: Path) -> None:
    t = np.arange(24, dtype=float)
    fitted = HoltWinters.from_options(alpha=0.4, beta=0.1, gamma=0.2, season_length=6).fit(
        t + np.sin(2 * np.pi * t / 6)
    )
    path = save_model(fitted, tmp_path / "models" / "hw.joblib", model_name="holt_winters", n_obs=24)

    payload = load_model(path)
    assert payload["model_name"] == "holt_winters"
    assert payload["n_obs"] == 24
    np.testing.assert_allclose(payload["model"].forecast(6), fitted.forecast(6))


def test_load_model_rejects_missing_and_foreign_files(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_model(tmp_path / "nope.joblib")
    path = tmp_path / "foreign.joblib"
    joblib.dump([1, 2, 3], path)
    with pytest.raises(ValueError):
        load_model(path)


def test_loaded_model_state_stays_read_only(tmp_path: Path) -> None:
    t = np.arange(20, dtype=float)
    fitted = HoltWinters.from_options(alpha=0.3, beta=0.1, gamma=0.1, season_length=4).fit(
        2 * t + 3 * np.sin(np.pi * t / 2)
    )
    path = save_model(fitted, tmp_path / "hw.joblib", model_name="holt_winters")

    loaded = load_model(path)["model"]
    for arr in (loaded.level, loaded.trend, loaded.season, loaded.observations, loaded.initial_season):
        assert not arr.flags.writeable
    with pytest.raises(ValueError):
        loaded.level[0] = 1.0
    with pytest.raises(ValueError):
        loaded.level[-1] += 100.0
    np.testing.assert_array_equal(loaded.forecast(2), fitted.forecast(2))
