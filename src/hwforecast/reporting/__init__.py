"""src/hwforecast/reporting/__init__.py"""

from __future__ import annotations

from .plots import plot_components, plot_forecast
from .tables import forecast_frame, make_fit_summary_table

__all__ = [
    "plot_components",
    "plot_forecast",
    "forecast_frame",
    "make_fit_summary_table",
]
