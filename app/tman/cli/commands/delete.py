"""Delete command for moving files into the trash.

This module provides the `tman delete` command.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from tman.cli.session import trash_session

logger = logging.getLogger(__name__)


def delete(
    files: Annotated[
        list[Path],
        typer.Argument(help="Files to move into the trash.", show_default=False),
    ],
) -> None:
    """Move files into the trash.

    Each file becomes a new version of its trash entry. Deleting the same
    path again later adds another version instead of replacing the first.
    The first file that cannot be trashed stops the batch.

    Examples:
        tman delete notes.txt
        tman delete build.log draft.md
    """
    with trash_session() as trash:
        for deleted in trash.delete(files):
            logger.info("Trashed %s as version %s", deleted.origin, deleted.version)
