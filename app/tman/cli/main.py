"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from tman import __version__
from tman.cli.commands import delete, empty, listing, restore
from tman.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="tman",
    help="Safely manage your trash.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"tman version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """tman - Safely manage your trash.

    Deleted files are moved into a versioned trash and can be restored
    to where they came from.
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    configure_logging(verbose)


# Register commands
app.command("delete")(delete.delete)
app.command("rm", hidden=True)(delete.delete)
app.command("restore")(restore.restore)
app.command("list")(listing.list_trash)
app.command("ls", hidden=True)(listing.list_trash)
app.command("empty")(empty.empty)


if __name__ == "__main__":
    app()
