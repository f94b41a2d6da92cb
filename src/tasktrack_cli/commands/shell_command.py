"""Command 'shell' of tasktrack-cli"""

import typer

from tasktrack_cli.config import get_config_manager
from tasktrack_cli.services.task_service import get_task_service
from tasktrack_cli.ui.interactive_prompt import TaskShell

from .decorators import command_wrapper
from .options import FileOption, ProfileOption, inherit_root_options

app = typer.Typer()


@app.command("shell")
@command_wrapper
def run_shell(
    ctx: typer.Context,
    file: FileOption = None,
    profile: ProfileOption = "default",
) -> None:
    """Start the interactive task menu (default when no command is given)."""
    file, profile = inherit_root_options(ctx, file, profile)
    config = get_config_manager(profile).config
    task_service = get_task_service(file, profile)

    shell = TaskShell(
        task_service,
        date_format=config.output.date_format,
        max_retries=config.ui.max_retries,
        show_header=config.ui.show_header,
    )
    exit_code = shell.run()
    if exit_code:
        raise typer.Exit(exit_code)
