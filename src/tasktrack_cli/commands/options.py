"""Options shared by task commands."""

from typing import Annotated

import typer

DEFAULT_PROFILE = "default"

FileOption = Annotated[
    str | None,
    typer.Option(
        "--file",
        "-f",
        help="Task file (overrides TASKTRACK_FILE and storage.path)",
    ),
]

ProfileOption = Annotated[
    str, typer.Option("--profile", help="Configuration profile name")
]


def inherit_root_options(
    ctx: typer.Context, file: str | None, profile: str
) -> tuple[str | None, str]:
    """Fall back to ``--file``/``--profile`` given before the command name.

    ``tasktrack --file work.json list`` and ``tasktrack list --file work.json``
    select the same file; an option on the command itself wins.
    """
    root_params = ctx.find_root().params
    if file is None:
        file = root_params.get("file")
    if profile == DEFAULT_PROFILE:
        profile = root_params.get("profile") or DEFAULT_PROFILE
    return file, profile
