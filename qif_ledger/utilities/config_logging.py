# qif_ledger/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Any

LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": "logs/qif_ledger.log",
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console"],
        },
        "openpyxl": {"level": "WARNING", "propagate": True},
    },
}


def build_logging_config(
    level: str = "INFO", log_file: str | Path | None = None
) -> dict[str, Any]:
    """Return a copy of ``LOGGING`` for the given console level and optional log file.

    The rotating file handler is only wired in when ``log_file`` is given.
    """
    config = copy.deepcopy(LOGGING)
    config["handlers"]["console"]["level"] = level.upper()
    logger = config["loggers"][""]
    if log_file is None:
        del config["handlers"]["file"]
    else:
        config["handlers"]["file"]["filename"] = str(log_file)
        logger["handlers"].append("file")
    return config


def configure_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(level, log_file))
