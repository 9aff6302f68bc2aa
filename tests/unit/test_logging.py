"""tests/unit/test_logging.py"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from hwforecast.common.config import load_config
from hwforecast.common.logging import DEFAULT_QUIET, setup_logging

from tests.helpers import make_config_dict, write_config


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in saved_handlers:
            h.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_quiet_list_comes_from_config(project_root: Path) -> None:
    name = "hwforecast.tests.noisy"
    logging.getLogger(name).setLevel(logging.NOTSET)
    path = write_config(project_root, make_config_dict(logging={"level": "DEBUG", "quiet": [name]}))

    setup_logging(load_config(path))

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger(name).level == logging.WARNING


def test_default_quiet_list_and_log_file(project_root: Path) -> None:
    for name in DEFAULT_QUIET:
        logging.getLogger(name).setLevel(logging.NOTSET)
    path = write_config(project_root, make_config_dict(logging={"level": "info", "file": "artifacts/logs/run.log"}))

    setup_logging(load_config(path))
    logging.getLogger("hwforecast.tests").info("hello")

    for name in DEFAULT_QUIET:
        assert logging.getLogger(name).level == logging.WARNING
    log_file = project_root / "artifacts" / "logs" / "run.log"
    assert log_file.exists()
    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
