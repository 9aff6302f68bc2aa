"""src/hwforecast/pipelines/__init__.py"""

from .run_backtest import BacktestResult, run_backtest
from .run_forecast import ForecastArtifacts, run_forecast

__all__ = [
    "BacktestResult",
    "ForecastArtifacts",
    "run_backtest",
    "run_forecast",
]
