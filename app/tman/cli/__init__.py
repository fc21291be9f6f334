"""CLI package for tman.

This package contains the Typer application and all subcommands.
"""

from tman.cli.main import app

__all__ = ["app"]
