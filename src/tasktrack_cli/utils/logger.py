"""Application log file under platformdirs user_log_dir.

Nothing is logged to the terminal; set ``TASKTRACK_LOG_LEVEL`` (e.g. ``INFO``)
to make the file less chatty than the default DEBUG.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "tasktrack_cli"
_LOG_FILE = "tasktrack.log"
_LEVEL_ENV = "TASKTRACK_LOG_LEVEL"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2

_logger: logging.Logger | None = None


def _level_from_env() -> int:
    name = os.environ.get(_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.DEBUG
    return level if isinstance(level, int) else logging.DEBUG


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    # other handlers (e.g. pytest capture) may already be attached
    target = os.path.abspath(log_file)
    return any(
        isinstance(handler, logging.handlers.RotatingFileHandler)
        and handler.baseFilename == target
        for handler in logger.handlers
    )


def get_logger() -> logging.Logger:
    """Return the application logger, attaching the rotating file handler once."""
    global _logger
    if _logger is None:
        log_dir = Path(user_log_dir(_APP_NAME))
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / _LOG_FILE

        logger = logging.getLogger(_APP_NAME)
        logger.setLevel(_level_from_env())
        if not _has_file_handler(logger, log_file):
            handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=_MAX_BYTES,
                backupCount=_BACKUP_COUNT,
                encoding="utf-8",
            )
            handler.setFormatter(
                logging.Formatter(
                    fmt="%(asctime)s %(levelname)-8s %(message)s",
                    datefmt="%Y-%m-%dT%H:%M:%S",
                )
            )
            logger.addHandler(handler)
        logger.propagate = False
        _logger = logger
    return _logger
