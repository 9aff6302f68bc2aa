"""src/hwforecast/reporting/plots.py"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from hwforecast.modeling.holt_winters import FittedHoltWinters


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def plot_components(fitted: FittedHoltWinters, *, out_path: Path, title: str = "") -> Path:
    """
    Four stacked panels sharing the time axis:
        observed, level, trend, season
    """
    _ensure_dir(out_path.parent)
    t = np.arange(fitted.n_obs)

    fig, axes = plt.subplots(4, 1, sharex=True, figsize=(9, 8))
    panels = [
        ("Observed", fitted.observations),
        ("Level", fitted.level),
        ("Trend", fitted.trend),
        ("Season", fitted.season),
    ]
    for ax, (label, values) in zip(axes, panels):
        ax.plot(t, values, label=label)
        ax.set_ylabel(label)
        ax.legend(loc="upper left")
    axes[-1].set_xlabel("Step")
    if title:
        axes[0].set_title(title)

    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out_path


def plot_forecast(fitted: FittedHoltWinters, forecast: np.ndarray, *, out_path: Path, title: str = "") -> Path:
    """Observed series, in-sample one-step fit and the forecast continuation."""
    _ensure_dir(out_path.parent)
    n = fitted.n_obs
    t = np.arange(n)
    ft = np.arange(n, n + len(forecast))

    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(t, fitted.observations, label="Observed")
    ax.plot(t, fitted.fitted_values(), linestyle=":", label="One-step fit")
    ax.axvline(n - 1, color="k", linestyle="--", label="Last observation")
    ax.plot(ft, np.asarray(forecast, dtype=float), linestyle="--", label="Forecast")
    ax.set_xlabel("Step")
    ax.set_ylabel("Value")
    ax.legend(loc="upper left")
    m = fitted.params.season_length
    ax.set_title(title or f"Holt-Winters forecast (m={m})")

    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out_path
