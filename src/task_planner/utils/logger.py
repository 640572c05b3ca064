"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "task_planner"
_LOG_FILE = "task-planner.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def _attach_file_handler(logger: logging.Logger, log_path: Path) -> None:
    """Make sure *logger* writes to *log_path* exactly once.

    Handlers owned by someone else (capture handlers, test tooling) are left
    alone; a rotating file handler pointing at another file is replaced.
    """
    target = os.path.abspath(log_path)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.handlers.RotatingFileHandler):
            continue
        if handler.baseFilename == target:
            return
        logger.removeHandler(handler)
        handler.close()

    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    logger.addHandler(handler)


def get_logger(level: str | int | None = None) -> logging.Logger:
    """Return the application logger, initialising it on first call.

    Module loggers (``logging.getLogger(__name__)`` under ``task_planner``)
    write through the same file handler.

    Args:
        level: Optional level applied to the logger, e.g. "DEBUG"
    """
    global _logger
    if _logger is not None:
        if level is not None:
            _logger.setLevel(level)
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(level if level is not None else logging.DEBUG)
    _attach_file_handler(logger, log_dir / _LOG_FILE)
    logger.propagate = False

    _logger = logger
    return _logger
