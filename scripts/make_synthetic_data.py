"""
scripts/make_synthetic_data.py

Data bootstrap for a fresh checkout:
- Creates the expected folder structure
- Writes a synthetic seasonal series to data/raw/synthetic.csv if it is missing
- Prints a short status report

Use real data by pointing paths.input_csv in configs/config.yaml at your own CSV.
"""

from __future__ import annotations

from pathlib import Path

from hwforecast.features.build_features import make_seasonal_series


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SYNTHETIC_CSV = PROJECT_ROOT / "data" / "raw" / "synthetic.csv"


def ensure_dirs() -> None:
    """Create expected directories if missing."""
    for rel in [
        "data/raw",
        "artifacts/forecasts",
        "artifacts/metrics",
        "artifacts/figures",
        "artifacts/models",
        "artifacts/logs",
    ]:
        (PROJECT_ROOT / rel).mkdir(parents=True, exist_ok=True)


def write_synthetic(path: Path, *, n: int = 120, season_length: int = 12) -> bool:
    """Write the demo series; returns False if the file already exists."""
    if path.exists():
        return False
    y = make_seasonal_series(n, season_length, slope=0.5, amplitude=3.0, intercept=10.0, noise=0.25, seed=7)
    y.to_frame().rename_axis("t").reset_index().to_csv(path, index=False)
    return True


def main() -> int:
    ensure_dirs()
    created = write_synthetic(SYNTHETIC_CSV)

    print("\nhwforecast • Data bootstrap report\n" + "-" * 40)
    print(f"Project root: {PROJECT_ROOT}")
    if created:
        print(f"Wrote synthetic series: {SYNTHETIC_CSV.relative_to(PROJECT_ROOT)}")
    else:
        print(f"Kept existing series: {SYNTHETIC_CSV.relative_to(PROJECT_ROOT)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
