"""tests/unit/test_evaluation.py"""

from __future__ import annotations

import math

import numpy as np
import pytest

from hwforecast.modeling.evaluation import compute_metrics, mae, mase, rmse, seasonal_naive_scale, smape


def test_rmse_basic() -> None:
    y_true = np.array([1.0, 2.0, 3.0])
    y_pred = np.array([1.0, 2.0, 4.0])  # error: [0,0,1]
    expected = math.sqrt(1.0 / 3.0)
    assert abs(rmse(y_true, y_pred) - expected) < 1e-12


def test_mae_basic() -> None:
    y_true = np.array([1.0, 2.0, 3.0])
    y_pred = np.array([2.0, 2.0, 1.0])  # abs err: [1,0,2]
    assert abs(mae(y_true, y_pred) - 1.0) < 1e-12


def test_smape_basic() -> None:
    y_true = np.array([100.0, 200.0])
    y_pred = np.array([110.0, 190.0])
    expected = ((10.0 / 105.0) + (10.0 / 195.0)) / 2.0 * 100.0
    assert abs(smape(y_true, y_pred) - expected) < 1e-12


def test_smape_zero_zero_safe() -> None:
    assert smape(np.array([0.0]), np.array([0.0])) == 0.0


def test_seasonal_naive_scale() -> None:
    y = np.array([1.0, 5.0, 2.0, 6.0, 4.0])
    # m=2 differences: |2-1|, |6-5|, |4-2| -> mean 4/3
    assert seasonal_naive_scale(y, 2) == pytest.approx(4.0 / 3.0)
    assert math.isnan(seasonal_naive_scale(y[:2], 2))


def test_mase_zero_scale_is_nan() -> None:
    assert math.isnan(mase(np.array([1.0]), np.array([2.0]), 0.0))


def test_metrics_filter_nans_and_infs() -> None:
    y_true = [1.0, float("nan"), 3.0, float("inf")]
    y_pred = [1.0, 2.0, float("nan"), 4.0]

    pack = compute_metrics(y_true, y_pred)

    # Only valid pair is (1.0, 1.0)
    assert pack.rmse == 0.0
    assert pack.mae == 0.0
    assert pack.smape == 0.0
    assert math.isnan(pack.mase)


def test_compute_metrics_with_training_series() -> None:
    y_train = [0.0, 2.0, 4.0, 6.0]  # lag-1 scale = 2
    pack = compute_metrics([8.0, 10.0], [9.0, 9.0], y_train=y_train, season_length=1)
    assert pack.mae == pytest.approx(1.0)
    assert pack.mase == pytest.approx(0.5)
    assert set(pack.as_dict()) == {"RMSE", "MAE", "SMAPE", "MASE"}


def test_compute_metrics_empty_after_filtering_returns_nan() -> None:
    pack = compute_metrics([float("nan")], [1.0])
    assert math.isnan(pack.rmse)
    assert math.isnan(pack.mae)
    assert math.isnan(pack.smape)


def test_shape_mismatch_raises() -> None:
    with pytest.raises(ValueError):
        compute_metrics([1.0, 2.0], [1.0])
