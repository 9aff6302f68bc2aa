"""src/hwforecast/validation/__init__.py"""

from __future__ import annotations

from .checks import CheckResult, check_series, validate_frame
from .schemas import (
    COMPONENTS_OUTPUT,
    FORECAST_OUTPUT,
    MODEL_COMPARISON,
    SchemaSpec,
    assert_schema,
    series_input,
)

__all__ = [
    # checks
    "CheckResult",
    "check_series",
    "validate_frame",
    # schemas
    "SchemaSpec",
    "assert_schema",
    "series_input",
    "COMPONENTS_OUTPUT",
    "FORECAST_OUTPUT",
    "MODEL_COMPARISON",
]
