"""Command 'complete' of tasktrack-cli"""

from typing import Annotated

import typer

from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.task_helpers import parse_task_id
from tasktrack_cli.utils.ui.formatters import format_success, format_warning

from .decorators import command_wrapper
from .options import FileOption, ProfileOption, inherit_root_options

app = typer.Typer()


@app.command("complete")
@command_wrapper
def complete_task(
    ctx: typer.Context,
    task_ids: Annotated[
        list[str], typer.Argument(help="Task ID(s) - can specify multiple")
    ],
    file: FileOption = None,
    profile: ProfileOption = "default",
) -> None:
    """Mark one or more tasks as completed."""
    file, profile = inherit_root_options(ctx, file, profile)
    # Resolve all IDs first so nothing is completed if one is malformed
    resolved_ids = [parse_task_id(task_id) for task_id in task_ids]

    task_service = get_task_service(file, profile, strict=True)
    for task_id in resolved_ids:
        task_service.get_task(task_id)

    for task_id in resolved_ids:
        if task_service.get_task(task_id).is_complete:
            format_warning(f"Task {task_id} is already complete.")
            continue
        task_service.complete_task(task_id)
        format_success(f"Task {task_id} marked as complete.")

    task_service.flush()
