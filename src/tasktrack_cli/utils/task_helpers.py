"""Task helper utilities."""

from datetime import date, datetime

from tasktrack_cli.exceptions import MalformedInputError

DATE_INPUT_FORMAT = "%Y-%m-%d"


def parse_task_id(raw: str) -> int:
    """
    Parse operator input into a task id.

    A trailing period is tolerated so ids copied from "1." style listings work.

    Raises:
        MalformedInputError: If the input is not a positive integer
    """
    text = raw.strip().rstrip(".")
    if not text.isdigit() or int(text) < 1:
        raise MalformedInputError(f"Invalid task ID: '{raw.strip()}'")
    return int(text)


def parse_due_date(raw: str) -> date:
    """
    Parse a YYYY-MM-DD date.

    Raises:
        MalformedInputError: If the input is not a valid calendar date
    """
    text = raw.strip()
    try:
        return datetime.strptime(text, DATE_INPUT_FORMAT).date()
    except ValueError:
        raise MalformedInputError(
            f"Invalid date: '{text}' (expected YYYY-MM-DD)"
        ) from None
