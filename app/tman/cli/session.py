"""Run-scoped access to the trash for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer

from tman.core.config import TrashConfig
from tman.core.errors import TrashError
from tman.core.trash import TrashManager, open_trash
from tman.utils.formatting import print_trash_error


@contextmanager
def trash_session() -> Iterator[TrashManager]:
    """Open the trash for one command and commit it when the command succeeds.

    Any TrashError, raised while loading, inside the command, or while
    committing, is printed as a single error line and exits with status 1.

    Yields:
        TrashManager for the configured trash.

    Raises:
        typer.Exit: With code 1 on any TrashError.
    """
    try:
        config = TrashConfig.from_environment()
        with open_trash(config) as trash:
            yield trash
    except TrashError as e:
        print_trash_error(e)
        raise typer.Exit(code=1) from None
