"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer
from rich.markup import escape

from tasktrack_cli.exceptions import TaskTrackError
from tasktrack_cli.utils.exit_codes import (
    ERROR_GENERAL,
    exit_code_for,
    get_exit_code_description,
    get_exit_code_name,
)
from tasktrack_cli.utils.logger import get_logger
from tasktrack_cli.utils.ui.formatters import format_error


def command_wrapper(func: Callable):
    """Wrap a command with logging and TaskTrackError -> exit code mapping."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except TaskTrackError as e:
            elapsed = time.monotonic() - start
            code = exit_code_for(e)
            logger.error(
                "command failed: %s (%.3fs) - %s [%s: %s]",
                cmd,
                elapsed,
                str(e),
                get_exit_code_name(code),
                get_exit_code_description(code),
            )
            format_error(escape(str(e)))
            raise typer.Exit(code=code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            # Generic fallback for unexpected crashes
            format_error(f"An unexpected error occurred: {escape(str(e))}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
