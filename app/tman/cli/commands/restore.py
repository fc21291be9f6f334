"""Restore command for moving files back out of the trash.

This module provides the `tman restore` command.
"""

import logging
from typing import Annotated

import typer

from tman.cli.session import trash_session

logger = logging.getLogger(__name__)


def restore(
    name: Annotated[
        str,
        typer.Argument(help="File name of the trashed file.", show_default=False),
    ],
    origin: Annotated[
        str | None,
        typer.Option(
            "--origin",
            "-o",
            help="Original location, when the name was trashed from several places.",
        ),
    ] = None,
    version: Annotated[
        str | None,
        typer.Option(
            "--version",
            "-r",
            help="Version to restore: a version id, 'newest' (default) or 'all'.",
        ),
    ] = None,
) -> None:
    """Restore a file from the trash to its original location.

    Restores the newest version by default. When several versions are
    restored at once, each is written next to the original path with its
    version id appended. Prints nothing on success; use --verbose to see
    each restored path.

    Examples:
        tman restore notes.txt
        tman restore notes.txt --origin ~/docs/notes.txt
        tman restore notes.txt --version all
    """
    with trash_session() as trash:
        for restored in trash.restore(name, origin=origin, version=version):
            logger.info("Restored %s version %s to %s", name, restored.version, restored.destination)
