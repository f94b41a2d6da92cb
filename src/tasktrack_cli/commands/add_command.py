"""Command 'add' of tasktrack-cli"""

from typing import Annotated

import typer

from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.task_helpers import parse_due_date
from tasktrack_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .options import FileOption, ProfileOption, inherit_root_options

app = typer.Typer()


@app.command("add")
@command_wrapper
def add_task(
    ctx: typer.Context,
    description: Annotated[str, typer.Argument(help="Task description")],
    due: Annotated[
        str, typer.Option("--due", "-d", help="Due date (YYYY-MM-DD)")
    ],
    file: FileOption = None,
    profile: ProfileOption = "default",
) -> None:
    """Create a new task."""
    file, profile = inherit_root_options(ctx, file, profile)
    # validate before touching the task file
    due_date = parse_due_date(due)

    task_service = get_task_service(file, profile, strict=True)
    task = task_service.add_task(description, due_date)
    task_service.flush()

    format_success(f"Created task {task.id}")
