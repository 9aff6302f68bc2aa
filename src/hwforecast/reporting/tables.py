"""src/hwforecast/reporting/tables.py"""

from __future__ import annotations

import numpy as np
import pandas as pd

from hwforecast.modeling.holt_winters import FittedHoltWinters


def forecast_frame(fitted: FittedHoltWinters, values: np.ndarray) -> pd.DataFrame:
    """
    Tabular forecast:
        Step (1..f), Index (N-1+Step, continuing the series index), Forecast
    """
    v = np.asarray(values, dtype=float)
    steps = np.arange(1, v.size + 1, dtype=int)
    return pd.DataFrame(
        {
            "Step": steps,
            "Index": fitted.n_obs - 1 + steps,
            "Forecast": v,
        }
    )


def make_fit_summary_table(fitted: FittedHoltWinters) -> pd.DataFrame:
    """One-row summary of the fitted state and in-sample one-step errors."""
    resid = fitted.residuals()
    resid = resid[np.isfinite(resid)]
    row = {
        **fitted.params.as_dict(),
        "N": fitted.n_obs,
        "Final_Level": float(fitted.level[-1]),
        "Final_Trend": float(fitted.trend[-1]),
        "Season_Min": float(np.min(fitted.season[-fitted.params.season_length:])),
        "Season_Max": float(np.max(fitted.season[-fitted.params.season_length:])),
        "Residual_Points": int(resid.size),
        "Residual_RMSE": float(np.sqrt(np.mean(resid**2))) if resid.size else float("nan"),
    }
    return pd.DataFrame([row])
