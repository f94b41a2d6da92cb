"""Command 'delete' of tasktrack-cli"""

from typing import Annotated

import typer

from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.task_helpers import parse_task_id
from tasktrack_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .options import FileOption, ProfileOption, inherit_root_options

app = typer.Typer()


@app.command("delete")
@command_wrapper
def delete_task(
    ctx: typer.Context,
    task_id: Annotated[str, typer.Argument(help="Task ID")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip confirmation")
    ] = False,
    file: FileOption = None,
    profile: ProfileOption = "default",
) -> None:
    """Delete a task."""
    file, profile = inherit_root_options(ctx, file, profile)
    resolved_id = parse_task_id(task_id)

    task_service = get_task_service(file, profile, strict=True)

    # get task first so a missing id fails before the confirmation prompt
    task = task_service.get_task(resolved_id)
    if not yes:
        confirm = typer.confirm(f"Delete task {task.id} '{task.description}'?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    task_service.delete_task(resolved_id)
    task_service.flush()

    format_success(f"Task {resolved_id} deleted.")
