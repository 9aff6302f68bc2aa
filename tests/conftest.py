"""tests/conftest.py"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from hwforecast.common.config import AppConfig, load_config  # noqa: E402
from tests.helpers import make_config_dict, write_config, write_series_csv  # noqa: E402


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    # Emulate repository root in temp dir
    write_series_csv(tmp_path / "data" / "raw" / "series.csv")
    return tmp_path


@pytest.fixture
def config_path(project_root: Path) -> Path:
    return write_config(project_root, make_config_dict())


@pytest.fixture
def cfg(config_path: Path) -> AppConfig:
    return load_config(config_path)
