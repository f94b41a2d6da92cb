"""Command 'list' of tasktrack-cli"""

from typing import Annotated

import typer

from tasktrack_cli.config import get_config_manager
from tasktrack_cli.exceptions import MalformedInputError
from tasktrack_cli.models import TaskStatus
from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .options import FileOption, ProfileOption, inherit_root_options

app = typer.Typer()

OUTPUT_FORMATS = ("table", "json", "yaml")
STATUS_FILTERS = {
    "all": None,
    "pending": TaskStatus.PENDING,
    "complete": TaskStatus.COMPLETE,
}


@app.command("list")
@command_wrapper
def list_tasks(
    ctx: typer.Context,
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help="Output format (table, json, yaml)"),
    ] = None,
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
    status: Annotated[
        str, typer.Option("--status", "-s", help="Filter: all, pending, complete")
    ] = "all",
    file: FileOption = None,
    profile: ProfileOption = "default",
) -> None:
    """List tasks, newest first."""
    file, profile = inherit_root_options(ctx, file, profile)
    config = get_config_manager(profile).config
    if json_opt:
        output = "json"
    output = output or config.output.format
    if output not in OUTPUT_FORMATS:
        raise MalformedInputError(
            f"Unknown output format '{output}' (choose from {', '.join(OUTPUT_FORMATS)})"
        )
    if status.lower() not in STATUS_FILTERS:
        raise MalformedInputError(
            f"Unknown status '{status}' (choose from {', '.join(STATUS_FILTERS)})"
        )

    task_service = get_task_service(file, profile, strict=True)
    tasks = task_service.list_tasks(STATUS_FILTERS[status.lower()])
    format_output(tasks, output, config.output.date_format)
