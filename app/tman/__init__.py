"""tman - a versioned safe-delete utility."""

__version__ = "1.0.0"
