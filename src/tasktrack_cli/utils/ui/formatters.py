"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tasktrack_cli.models import Task, TaskStatus

NOT_COMPLETED_PLACEHOLDER = "Not completed yet"
DEFAULT_DATE_FORMAT = "%Y-%m-%d"

TASK_COLUMNS = ("Id", "Description", "Status", "Due Date", "Completed Date")

STATUS_STYLES = {
    TaskStatus.PENDING: "yellow",
    TaskStatus.COMPLETE: "green",
}

console = Console()


def task_row(task: Task, date_format: str = DEFAULT_DATE_FORMAT) -> tuple[str, ...]:
    """Render one task as the cells of a listing row.

    The completion date is shown only for complete tasks; anything else gets
    the placeholder.
    """
    if task.is_complete and task.completed_date is not None:
        completed = task.completed_date.strftime(date_format)
    else:
        completed = NOT_COMPLETED_PLACEHOLDER
    return (
        str(task.id),
        task.description,
        task.status.value,
        task.due_date.strftime(date_format),
        completed,
    )


def format_task_table(tasks: list[Task], date_format: str = DEFAULT_DATE_FORMAT) -> None:
    """Print tasks as a table, in the order given."""
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column(TASK_COLUMNS[0], justify="right", style="cyan")
    table.add_column(TASK_COLUMNS[1], overflow="fold")
    table.add_column(TASK_COLUMNS[2])
    table.add_column(TASK_COLUMNS[3], no_wrap=True)
    table.add_column(TASK_COLUMNS[4], no_wrap=True)

    for task in tasks:
        task_id, description, status, due, completed = task_row(task, date_format)
        style = STATUS_STYLES.get(task.status, "")
        table.add_row(
            task_id,
            escape(description),
            f"[{style}]{status}[/{style}]" if style else status,
            due,
            completed if task.is_complete else f"[dim]{completed}[/dim]",
        )

    console.print(table)


def tasks_to_data(tasks: list[Task]) -> list[dict[str, Any]]:
    """Convert tasks to plain JSON-compatible dictionaries."""
    return [task.model_dump(mode="json") for task in tasks]


def format_output(
    tasks: list[Task],
    output_format: str = "table",
    date_format: str = DEFAULT_DATE_FORMAT,
) -> None:
    """Format and display tasks based on format."""
    if output_format == "json":
        print(json.dumps(tasks_to_data(tasks), indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(tasks_to_data(tasks), default_flow_style=False, sort_keys=False))
    else:
        format_task_table(tasks, date_format)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")
