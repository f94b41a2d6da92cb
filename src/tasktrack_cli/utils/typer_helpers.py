"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from rich.markup import escape
from typer.core import TyperGroup

from tasktrack_cli.utils.exit_codes import ERROR_INVALID_ARGS
from tasktrack_cli.utils.ui.formatters import console


def suggest_commands(attempted: str, available: list[str]) -> list[str]:
    """Return up to three command names that look like *attempted*."""
    return get_close_matches(attempted.lower(), sorted(available), n=3, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Typer group that answers an unknown command with "did you mean"."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            suggestions = suggest_commands(args[0], list(self.commands))
            if not suggestions:
                raise
            attempted = escape(args[0])
            console.print(
                f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
            )
            console.print("[yellow]Did you mean:[/yellow] " + ", ".join(suggestions))
            raise typer.Exit(ERROR_INVALID_ARGS) from e
