"""Interactive menu loop for managing tasks."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from prompt_toolkit import PromptSession
from rich.markup import escape

from tasktrack_cli.exceptions import MalformedInputError, TaskTrackError
from tasktrack_cli.services.task_service import TaskService
from tasktrack_cli.utils.exit_codes import ERROR_PERSISTENCE, SUCCESS
from tasktrack_cli.utils.logger import get_logger
from tasktrack_cli.utils.task_helpers import parse_due_date, parse_task_id
from tasktrack_cli.utils.ui.formatters import (
    DEFAULT_DATE_FORMAT,
    console,
    format_error,
    format_output,
    format_success,
    format_warning,
)

T = TypeVar("T")

MENU = (
    ("C", "CREATE"),
    ("U", "UPDATE"),
    ("D", "DELETE"),
    ("L", "LIST"),
    ("O", "COMPLETE"),
    ("Q", "QUIT"),
)


def _non_blank(raw: str) -> str:
    text = raw.strip()
    if not text:
        raise MalformedInputError("Task description cannot be empty")
    return text


class TaskShell:
    """Read a single-letter command, run it against the service, repeat.

    ``Q`` (or end of input) saves the task file and ends the loop.
    """

    def __init__(
        self,
        service: TaskService,
        read_line: Callable[[str], str] | None = None,
        *,
        date_format: str = DEFAULT_DATE_FORMAT,
        max_retries: int = 3,
        show_header: bool = True,
    ):
        self.service = service
        self._read_line = read_line
        self.date_format = date_format
        self.max_retries = max_retries
        self.show_header = show_header
        self._logger = get_logger()
        self._commands: dict[str, Callable[[], None]] = {
            "C": self._create,
            "U": self._update,
            "D": self._delete,
            "L": self._list,
            "O": self._complete,
            "H": self._menu,
            "?": self._menu,
        }

    def _read(self, message: str) -> str:
        if self._read_line is None:
            session: PromptSession[str] = PromptSession()
            self._read_line = session.prompt
        return self._read_line(message)

    def run(self) -> int:
        """Run until quit. Returns the process exit code."""
        if self.show_header:
            self._header()
        if self.service.load_error is not None:
            format_warning(
                f"{escape(str(self.service.load_error))} - starting with an empty "
                f"task list; the old file will be kept as "
                f"{escape(str(self.service.backup_path))}"
            )
        self._menu()

        while True:
            try:
                line = self._read("Enter your choice: ")
            except (EOFError, KeyboardInterrupt):
                console.print()
                return self._quit()

            tokens = line.strip().upper().split()
            if not tokens:
                continue
            command = tokens[0]
            if command == "Q":
                return self._quit()

            handler = self._commands.get(command)
            if handler is None:
                format_error(f"Unknown command: {escape(command)}")
                continue

            self._logger.debug("shell command: %s", command)
            try:
                handler()
            except (EOFError, KeyboardInterrupt):
                console.print()
                return self._quit()
            except TaskTrackError as e:
                self._logger.info("shell command %s failed: %s", command, e)
                format_error(escape(str(e)))

    # ---- screens ----

    def _header(self) -> None:
        now = datetime.now()
        console.rule("[bold]TaskTrack[/bold]")
        console.print(f"Today's date: {now.strftime('%Y-%m-%d')}")
        console.print(f"Current time: {now.strftime('%H:%M:%S')}")
        console.print()

    def _menu(self) -> None:
        console.print("[bold]MENU[/bold]")
        for key, label in MENU:
            console.print(f"  [cyan]{key}[/cyan] - {label}")
        console.print()

    # ---- prompts ----

    def _ask(self, message: str, parse: Callable[[str], T]) -> T:
        """Prompt until *parse* accepts the answer or retries run out."""
        for _ in range(self.max_retries):
            raw = self._read(message)
            try:
                return parse(raw)
            except MalformedInputError as e:
                format_error(escape(str(e)))
        raise MalformedInputError("Too many invalid attempts, command cancelled")

    def _ask_existing_id(self, operation: str) -> int:
        task_id = self._ask(f"Enter the task ID to {operation}: ", parse_task_id)
        # raises TaskNotFoundError before any further prompting
        self.service.get_task(task_id)
        return task_id

    # ---- commands ----

    def _create(self) -> None:
        description = self._ask("Enter the description of the task: ", _non_blank)
        due_date = self._ask("Enter the due date (YYYY-MM-DD): ", parse_due_date)
        task = self.service.add_task(description, due_date)
        format_success(f"Created task {task.id}")

    def _update(self) -> None:
        task_id = self._ask_existing_id("update")
        description = self._ask("Enter the new description of the task: ", _non_blank)
        self.service.update_task(task_id, description)
        format_success(f"Task {task_id} updated.")

    def _delete(self) -> None:
        task_id = self._ask_existing_id("delete")
        self.service.delete_task(task_id)
        format_success(f"Task {task_id} deleted.")

    def _complete(self) -> None:
        task_id = self._ask_existing_id("complete")
        if self.service.get_task(task_id).is_complete:
            format_warning(f"Task {task_id} is already complete.")
            return
        self.service.complete_task(task_id)
        format_success(f"Task {task_id} marked as complete.")

    def _list(self) -> None:
        format_output(self.service.list_tasks(), "table", self.date_format)

    def _quit(self) -> int:
        try:
            self.service.save()
        except TaskTrackError as e:
            format_error(f"{escape(str(e))} - your changes were NOT saved")
            return ERROR_PERSISTENCE
        console.print(f"Tasks saved to {escape(str(self.service.path))}. Goodbye.")
        return SUCCESS
