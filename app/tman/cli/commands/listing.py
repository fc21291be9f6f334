"""List command for showing the contents of the trash.

This module provides the `tman list` command.
"""

from typing import Annotated

import typer

from tman.cli.display import print_listing
from tman.cli.session import trash_session


def list_trash(
    pattern: Annotated[
        str | None,
        typer.Option(
            "--pattern",
            "-p",
            help="Regular expression matched against file names.",
        ),
    ] = None,
    simple: Annotated[
        bool,
        typer.Option(
            "--simple",
            "-s",
            help="Print only file names, one per line.",
        ),
    ] = False,
) -> None:
    """List files in the trash with their versions, newest first.

    Examples:
        tman list
        tman list --pattern '\\.txt$'
        tman list --simple      # Names only, for scripting
    """
    with trash_session() as trash:
        entries = trash.list_entries(pattern)
        print_listing(entries, trash.settings, pattern=pattern, simple=simple)
