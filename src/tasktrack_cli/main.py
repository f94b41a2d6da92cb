"""Main entry point for TaskTrack CLI."""

import typer

from tasktrack_cli import __version__
from tasktrack_cli.commands import (
    add_command,
    complete_command,
    config_command,
    delete_command,
    list_command,
    shell_command,
    update_command,
)
from tasktrack_cli.commands.options import FileOption, ProfileOption
from tasktrack_cli.utils.typer_helpers import SuggestingGroup
from tasktrack_cli.utils.ui.formatters import console

app = typer.Typer(
    name="tasktrack",
    cls=SuggestingGroup,
    help="Track short-lived tasks from the terminal",
)


@app.callback(invoke_without_command=True)
def default(
    ctx: typer.Context,
    file: FileOption = None,
    profile: ProfileOption = "default",
) -> None:
    """Track short-lived tasks. Without a command, opens the interactive menu."""
    if ctx.invoked_subcommand is None:
        shell_command.run_shell(ctx, file=file, profile=profile)


app.command("add")(add_command.add_task)
app.command("update")(update_command.update_task)
app.command("delete")(delete_command.delete_task)
app.command("complete")(complete_command.complete_task)
app.command("list")(list_command.list_tasks)
app.command("shell")(shell_command.run_shell)
app.add_typer(config_command.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]TaskTrack CLI[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
