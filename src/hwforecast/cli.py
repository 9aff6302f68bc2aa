"""src/hwforecast/cli.py"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich import print

from hwforecast.common.config import load_config
from hwforecast.common.logging import setup_logging
from hwforecast.features.build_features import make_seasonal_series
from hwforecast.io.writers import write_csv
from hwforecast.pipelines.run_backtest import run_backtest
from hwforecast.pipelines.run_forecast import run_forecast

app = typer.Typer(help="Additive Holt-Winters forecasting CLI")

DEFAULT_CONFIG = "configs/config.yaml"


@app.command()
def init(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Create expected directories from config (data/, artifacts/, etc.)."""
    cfg = load_config(config_path)
    setup_logging(cfg)

    created = cfg.ensure_directories()
    print("[bold green]Init complete.[/bold green]")
    if created:
        print("Created directories:")
        for p in created:
            print(f"  - {p}")
    else:
        print("No directories needed (already exist).")


@app.command()
def forecast(
    config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
    horizon: Optional[int] = typer.Option(None, help="Steps to forecast (overrides forecast.horizon)"),
) -> None:
    """Fit Holt-Winters on the input series and write the forecast."""
    cfg = load_config(config_path)
    setup_logging(cfg)
    cfg.ensure_directories()
    out = run_forecast(cfg, horizon=horizon)
    print(f"[bold green]Forecast complete.[/bold green] {out.forecast_csv}")


@app.command()
def backtest(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Score Holt-Winters against baselines on a holdout window."""
    cfg = load_config(config_path)
    setup_logging(cfg)
    cfg.ensure_directories()
    res = run_backtest(cfg)
    print(f"[bold green]Backtest complete.[/bold green] Best model: [bold]{res.best_model}[/bold]")


@app.command("run-all")
def run_all(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Convenience command: init → backtest → forecast"""
    cfg = load_config(config_path)
    setup_logging(cfg)
    cfg.ensure_directories()
    run_backtest(cfg)
    run_forecast(cfg)
    print("[bold green]All steps complete.[/bold green]")


@app.command()
def synth(
    out: Path = typer.Option(Path("data/raw/synthetic.csv"), help="Output CSV path"),
    n: int = typer.Option(120, help="Number of observations"),
    season_length: int = typer.Option(12, help="Observations per season"),
    slope: float = typer.Option(0.5, help="Per-step trend"),
    amplitude: float = typer.Option(3.0, help="Seasonal amplitude"),
    noise: float = typer.Option(0.0, help="Gaussian noise std"),
    seed: int = typer.Option(0, help="Random seed"),
) -> None:
    """Write a synthetic linear-plus-sinusoid series to CSV."""
    y = make_seasonal_series(n, season_length, slope=slope, amplitude=amplitude, noise=noise, seed=seed)
    write_csv(y.to_frame().rename_axis("t").reset_index(), out)
    print(f"[bold green]Wrote {n} points to[/bold green] {out}")


if __name__ == "__main__":
    app()
