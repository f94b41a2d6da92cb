"""Tests for the application logger utility."""

from __future__ import annotations

import logging


def test_get_logger_creates_log_file(tmp_path):
    """Logger creates the log file inside user_log_dir."""
    from tasktrack_cli.utils.logger import get_logger

    logger = get_logger()

    assert (tmp_path / "logs" / "tasktrack.log").exists()
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton():
    """Repeated calls return the same logger instance."""
    from tasktrack_cli.utils.logger import get_logger

    assert get_logger() is get_logger()


def test_get_logger_writes_message(tmp_path):
    """Messages written to the logger appear in the log file."""
    from tasktrack_cli.utils.logger import get_logger

    logger = get_logger()
    logger.info("hello from test")
    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / "logs" / "tasktrack.log").read_text()
    assert "hello from test" in content


def test_logger_does_not_propagate():
    """Log records stay out of the terminal."""
    from tasktrack_cli.utils.logger import get_logger

    assert get_logger().propagate is False


def test_store_operations_are_logged(tmp_path):
    from datetime import date

    from tasktrack_cli.repositories import TaskStore
    from tasktrack_cli.utils.logger import get_logger

    store = TaskStore()
    store.create("Buy milk", date(2024, 1, 1))
    store.delete(1)
    for handler in get_logger().handlers:
        handler.flush()

    content = (tmp_path / "logs" / "tasktrack.log").read_text()
    assert "task created: 1" in content
    assert "task deleted: 1" in content


def test_file_handler_added_when_other_handlers_present(tmp_path):
    """A handler attached by someone else does not stop file logging."""
    from tasktrack_cli.utils.logger import get_logger

    app_logger = logging.getLogger("tasktrack_cli")
    other = logging.NullHandler()
    app_logger.addHandler(other)
    try:
        logger = get_logger()
        logger.info("written next to another handler")
        for handler in logger.handlers:
            handler.flush()
    finally:
        app_logger.removeHandler(other)

    content = (tmp_path / "logs" / "tasktrack.log").read_text()
    assert "written next to another handler" in content


def test_file_handler_not_duplicated(monkeypatch):
    import logging.handlers

    import tasktrack_cli.utils.logger as logger_mod

    logger_mod.get_logger()
    monkeypatch.setattr(logger_mod, "_logger", None)
    logger = logger_mod.get_logger()

    file_handlers = [
        h for h in logger.handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]
    assert len(file_handlers) == 1
