"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state.
"""

from __future__ import annotations

import logging
import logging.handlers
from datetime import datetime, timezone

import pytest

FIXED_NOW = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


def _drop_file_handlers():
    app_logger = logging.getLogger("tasktrack_cli")
    for handler in list(app_logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
            app_logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point config and log directories at *tmp_path* and run inside it.

    The default task file ``tasks.json`` is relative, so chdir keeps it in
    the temporary directory as well.
    """
    import tasktrack_cli.config as config_mod
    import tasktrack_cli.utils.logger as logger_mod
    from tasktrack_cli.utils.ui import formatters

    monkeypatch.setattr(
        config_mod, "user_config_dir", lambda *a, **k: str(tmp_path / "config")
    )
    monkeypatch.setattr(
        logger_mod, "user_log_dir", lambda *a, **k: str(tmp_path / "logs")
    )
    monkeypatch.setattr(config_mod, "_config_manager", None)
    monkeypatch.setattr(logger_mod, "_logger", None)
    monkeypatch.delenv(config_mod.TASK_FILE_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    # long tmp paths must not wrap inside asserted messages
    monkeypatch.setattr(formatters.console, "width", 200)
    _drop_file_handlers()

    yield tmp_path

    _drop_file_handlers()


# ---------------------------------------------------------------------------
# Task helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def clock():
    """A clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture()
def task_file(tmp_path):
    return tmp_path / "tasks.json"


@pytest.fixture()
def legacy_document():
    """A task file as written by earlier versions of the tracker."""
    return {
        "1": {
            "ID": 1,
            "Description": "Buy milk",
            "Status": "Complete",
            "DueDate": "2024-01-01T00:00:00Z",
            "CompletedDate": "2024-01-02T18:04:05.123456789+02:00",
        },
        "4": {
            "ID": 4,
            "Description": "Write report",
            "Status": "Pending",
            "DueDate": "2024-02-01T00:00:00Z",
            "CompletedDate": "0001-01-01T00:00:00Z",
        },
    }


