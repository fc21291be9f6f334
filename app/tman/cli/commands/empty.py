"""Empty command for permanently deleting the trash contents.

This module provides the `tman empty` command.
"""

from typing import Annotated

import typer

from tman.cli.session import trash_session
from tman.utils.formatting import print_info, print_success


def empty(
    ctx: typer.Context,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip confirmation prompt.",
        ),
    ] = False,
) -> None:
    """Permanently delete everything in the trash.

    Examples:
        tman empty
        tman empty -y        # Skip confirmation, required in scripts
    """
    if not yes:
        confirmed = typer.confirm("Permanently delete everything in the trash?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    with trash_session() as trash:
        removed = trash.empty()

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    if quiet:
        return
    if removed:
        print_success(f"Removed {len(removed)} item(s) from the trash.")
    else:
        print_info("Trash is already empty.")
