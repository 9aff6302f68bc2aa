"""src/hwforecast/pipelines/run_forecast.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from hwforecast.common.config import AppConfig
from hwforecast.io.writers import save_model, write_csv
from hwforecast.modeling.holt_winters import FittedHoltWinters, HoltWinters
from hwforecast.pipelines._common import load_input_series, output_dir, safe_int
from hwforecast.reporting.plots import plot_components, plot_forecast
from hwforecast.reporting.tables import forecast_frame, make_fit_summary_table
from hwforecast.validation.checks import validate_frame
from hwforecast.validation.schemas import COMPONENTS_OUTPUT, FORECAST_OUTPUT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastArtifacts:
    fitted: FittedHoltWinters
    forecast_csv: Path
    components_csv: Path
    summary_csv: Path
    model_path: Path
    figures: tuple[Path, ...] = ()


def run_forecast(cfg: AppConfig, *, horizon: int | None = None) -> ForecastArtifacts:
    """
    Full forecast run:
      1) read the input series
      2) fit Holt-Winters with the configured weights
      3) forecast `horizon` steps (config forecast.horizon, default two seasons)
      4) write components/forecast/summary CSVs, the joblib model, optional plots
    """
    params = cfg.model_params()
    m = params.season_length
    if horizon is None:
        horizon = safe_int(cfg.forecast.get("horizon"), 2 * m)

    y = load_input_series(cfg)
    logger.info("Loaded %d observations (%s)", len(y), y.name)

    fitted = HoltWinters(params).fit(y)
    yhat = fitted.forecast(horizon)

    forecasts_dir = output_dir(cfg, "forecasts_dir")
    metrics_dir = output_dir(cfg, "metrics_dir")
    models_dir = output_dir(cfg, "models_dir")

    components = fitted.components_frame()
    fc = forecast_frame(fitted, yhat)
    validate_frame(components, schema=COMPONENTS_OUTPUT, value_col="level").raise_if_failed()
    validate_frame(fc, schema=FORECAST_OUTPUT, value_col="Forecast").raise_if_failed()

    components_csv = write_csv(components, forecasts_dir / "components.csv")
    forecast_csv = write_csv(fc, forecasts_dir / f"forecast_h{horizon}.csv")
    summary_csv = write_csv(make_fit_summary_table(fitted), metrics_dir / "fit_summary.csv")
    model_path = save_model(
        fitted,
        models_dir / "holt_winters.joblib",
        model_name="holt_winters",
        n_obs=fitted.n_obs,
        params=params.as_dict(),
    )

    figures: list[Path] = []
    if bool(cfg.forecast.get("plot", False)):
        figures_dir = output_dir(cfg, "figures_dir")
        try:
            figures.append(plot_components(fitted, out_path=figures_dir / "components.png"))
            figures.append(plot_forecast(fitted, yhat, out_path=figures_dir / "forecast.png"))
        except Exception:
            logger.exception("Plotting failed")

    logger.info("Forecast complete.")
    logger.info("Saved forecast: %s", forecast_csv)
    logger.info("Saved components: %s", components_csv)
    logger.info("Saved model: %s", model_path)

    return ForecastArtifacts(
        fitted=fitted,
        forecast_csv=forecast_csv,
        components_csv=components_csv,
        summary_csv=summary_csv,
        model_path=model_path,
        figures=tuple(figures),
    )
