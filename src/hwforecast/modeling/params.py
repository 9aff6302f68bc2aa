"""src/hwforecast/modeling/params.py"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, fields
from typing import Any, Mapping

from hwforecast.common.errors import InvalidParameterError


def _check_weight(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"{name} must be a real number, got {value!r}")
    w = float(value)
    if not math.isfinite(w) or not 0.0 <= w <= 1.0:
        raise InvalidParameterError(f"{name} must lie in [0, 1], got {value!r}")
    return w


def _check_season_length(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not float(value).is_integer():
        raise InvalidParameterError(f"season_length must be a positive integer, got {value!r}")
    m = int(value)
    if m < 1:
        raise InvalidParameterError(f"season_length must be >= 1, got {m}")
    return m


@dataclass(frozen=True)
class HoltWintersParams:
    """
    Smoothing weights and season length of an additive Holt-Winters model.

    alpha: level weight
    beta: trend weight
    gamma: season weight
    season_length: observations per season (m). m == 1 means non-seasonal.

    A weight of 1 trusts only the newest observation; 0 ignores it.
    """
    alpha: float
    beta: float
    gamma: float
    season_length: int

    def __post_init__(self) -> None:
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "alpha", _check_weight("alpha", self.alpha))
        object.__setattr__(self, "beta", _check_weight("beta", self.beta))
        object.__setattr__(self, "gamma", _check_weight("gamma", self.gamma))
        object.__setattr__(self, "season_length", _check_season_length(self.season_length))

    @property
    def seasonal(self) -> bool:
        return self.season_length > 1

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "HoltWintersParams":
        """Build from a config mapping; only the four known keys are accepted."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise InvalidParameterError(f"Unrecognized model options: {unknown}. Allowed: {sorted(known)}")
        missing = sorted(known - set(options))
        if missing:
            raise InvalidParameterError(f"Missing model options: {missing}")
        return cls(**{k: options[k] for k in known})

    def as_dict(self) -> dict[str, float | int]:
        return {
            "alpha": self.alpha,
            "beta": self.beta,
            "gamma": self.gamma,
            "season_length": self.season_length,
        }
