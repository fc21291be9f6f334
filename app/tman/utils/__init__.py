"""Utility modules for tman.

This module exports commonly used utility functions.
"""

from tman.utils.formatting import (
    configure_logging,
    console,
    err_console,
    print_info,
    print_success,
    print_trash_error,
)

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "print_info",
    "print_success",
    "print_trash_error",
]
