"""Command 'update' of tasktrack-cli"""

from typing import Annotated

import typer

from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.task_helpers import parse_task_id
from tasktrack_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .options import FileOption, ProfileOption, inherit_root_options

app = typer.Typer()


@app.command("update")
@command_wrapper
def update_task(
    ctx: typer.Context,
    task_id: Annotated[str, typer.Argument(help="Task ID")],
    description: Annotated[str, typer.Argument(help="New task description")],
    file: FileOption = None,
    profile: ProfileOption = "default",
) -> None:
    """Replace the description of a task."""
    file, profile = inherit_root_options(ctx, file, profile)
    resolved_id = parse_task_id(task_id)

    task_service = get_task_service(file, profile, strict=True)
    task_service.update_task(resolved_id, description)
    task_service.flush()

    format_success(f"Task {resolved_id} updated.")
