"""
Exit codes for TaskTrack CLI.

Scripts can branch on these codes instead of parsing error text.
"""

from tasktrack_cli.exceptions import (
    MalformedInputError,
    PersistenceError,
    TaskNotFoundError,
    TaskTrackError,
)

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments, malformed id/date/description
ERROR_INVALID_ARGS = 2

# Task not found
ERROR_NOT_FOUND = 5

# Task file could not be read or written
ERROR_PERSISTENCE = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_PERSISTENCE: "ERROR_PERSISTENCE",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NOT_FOUND: "Task not found",
        ERROR_PERSISTENCE: "Task file could not be read or written",
    }
    return descriptions.get(code, "Unknown error")


def exit_code_for(error: TaskTrackError) -> int:
    """Map a TaskTrack exception to its exit code."""
    if isinstance(error, TaskNotFoundError):
        return ERROR_NOT_FOUND
    if isinstance(error, MalformedInputError):
        return ERROR_INVALID_ARGS
    if isinstance(error, PersistenceError):
        return ERROR_PERSISTENCE
    return ERROR_GENERAL
