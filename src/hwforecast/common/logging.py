"""src/hwforecast/common/logging.py"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Iterable

from hwforecast.common.config import AppConfig

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# third-party loggers held at WARNING unless logging.quiet overrides the list
DEFAULT_QUIET = ("matplotlib", "statsmodels")


def _level(value: object, default: int = logging.INFO) -> int:
    return getattr(logging, str(value).upper(), default)


def quiet_loggers(names: Iterable[str], level: int = logging.WARNING) -> list[str]:
    quieted = [str(n) for n in names if str(n).strip()]
    for name in quieted:
        logging.getLogger(name).setLevel(level)
    return quieted


def setup_logging(cfg: AppConfig) -> None:
    """
    Console (and optional rotating file) logging from the `logging` config section:

        level: INFO
        file: artifacts/logs/hwforecast.log   # optional
        quiet: [matplotlib, statsmodels]      # loggers capped at WARNING
    """
    section = cfg.logging
    level = _level(section.get("level", "INFO"))

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_file = section.get("file")
    if log_file:
        lf = cfg.resolve(log_file)
        lf.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(lf, maxBytes=2_000_000, backupCount=3, encoding="utf-8"))

    for h in handlers:
        h.setLevel(level)

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)

    quiet = section.get("quiet")
    if isinstance(quiet, str):
        quiet = [quiet]
    quieted = quiet_loggers(DEFAULT_QUIET if quiet is None else quiet)
    logging.getLogger(__name__).debug("Logging at %s; quieted %s", logging.getLevelName(level), quieted)
