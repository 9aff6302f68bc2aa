"""tests/unit/test_params.py"""

from __future__ import annotations

import numpy as np
import pytest

from hwforecast.common.errors import InvalidParameterError
from hwforecast.modeling.params import HoltWintersParams


def test_valid_params_are_normalized() -> None:
    p = HoltWintersParams(alpha=1, beta=0, gamma=0.5, season_length=np.int64(12))
    assert p.alpha == 1.0 and isinstance(p.alpha, float)
    assert p.season_length == 12 and isinstance(p.season_length, int)
    assert p.seasonal


def test_season_length_one_is_non_seasonal() -> None:
    assert not HoltWintersParams(alpha=0.2, beta=0.2, gamma=0.2, season_length=1).seasonal


@pytest.mark.parametrize("name", ["alpha", "beta", "gamma"])
@pytest.mark.parametrize("value", [-0.01, 1.01, float("nan"), float("inf"), "abc", "0.1", None, True, False])
def test_bad_weight_raises(name: str, value) -> None:
    kwargs = {"alpha": 0.1, "beta": 0.1, "gamma": 0.1, "season_length": 4, name: value}
    with pytest.raises(InvalidParameterError):
        HoltWintersParams(**kwargs)


@pytest.mark.parametrize("m", [0, -4, 2.5, True, "12"])
def test_bad_season_length_raises(m) -> None:
    with pytest.raises(InvalidParameterError):
        HoltWintersParams(alpha=0.1, beta=0.1, gamma=0.1, season_length=m)


def test_from_mapping_round_trip() -> None:
    opts = {"alpha": 0.3, "beta": 0.1, "gamma": 0.2, "season_length": 7}
    p = HoltWintersParams.from_mapping(opts)
    assert p.as_dict() == opts


def test_from_mapping_unknown_and_missing_keys() -> None:
    with pytest.raises(InvalidParameterError, match="Unrecognized"):
        HoltWintersParams.from_mapping({"alpha": 0.3, "beta": 0.1, "gamma": 0.2, "season_length": 7, "damped": True})
    with pytest.raises(InvalidParameterError, match="Missing"):
        HoltWintersParams.from_mapping({"alpha": 0.3, "beta": 0.1})
