# src/config/logging_config.py

"""Logging for QuickSell sessions.

Every launch writes to its own ``logs/run_<YYYYMMDD_HHMMSS>.log``.  Modules
log through ``quicksell.<area>`` children (``quicksell.api``,
``quicksell.feed``, ``quicksell.ui`` ...), which all propagate to the single
``quicksell`` logger configured here.

Only warnings and errors reach stderr, so the terminal UI is not drawn over
by routine backend chatter.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

PROJECT_LOGGER = "quicksell"

_FILE_FORMAT = (
    "%(asctime)s %(levelname)-8s [%(name)s] "
    "%(filename)s:%(lineno)d %(funcName)s() - %(message)s"
)
_STDERR_FORMAT = "%(levelname)s [%(name)s] %(message)s"
_TIMESTAMP = "%Y-%m-%d %H:%M:%S"


def run_log_path(started: datetime | None = None) -> Path:
    """Path of the log file for a run started at *started* (default: now)."""
    stamp = (started or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return Settings.LOGS_DIR / f"run_{stamp}.log"


def _file_handler(path: Path) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_TIMESTAMP))
    return handler


def _stderr_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter(_STDERR_FORMAT))
    return handler


def setup_logging() -> Path:
    """Attach the run-file and stderr handlers to the project logger.

    Safe to call more than once: when the logger is already configured no
    handlers are added.  Returns the log file path for this run.
    """
    log_file = run_log_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    project_logger = logging.getLogger(PROJECT_LOGGER)
    project_logger.setLevel(logging.DEBUG)
    if project_logger.handlers:
        return log_file

    for handler in (_file_handler(log_file), _stderr_handler()):
        project_logger.addHandler(handler)

    project_logger.info("Writing run log to %s", log_file)
    return log_file
