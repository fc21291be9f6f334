"""Error hierarchy for tman.

Every failure that should reach the user is a TrashError. The CLI renders
its description as a single ``tman: error: <description>!`` line.
"""

from collections.abc import Sequence


class TrashError(Exception):
    """Base exception for all tman errors."""

    @property
    def description(self) -> str:
        """Human-readable description used in the CLI error line."""
        return str(self)


class InvalidArgumentsError(TrashError):
    """Raised when a command is called with an invalid argument combination."""

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        msg = f"invalid arguments: {detail}" if detail else "invalid arguments"
        super().__init__(msg)


class InvalidIndexError(TrashError):
    """Raised when the persisted index cannot be parsed or validated.

    Attributes:
        line: Line of a syntax error, if the file is not valid JSON.
        column: Column of a syntax error, if the file is not valid JSON.
        location: Dotted location of an invalid value (e.g. ``"2.history"``).
    """

    def __init__(
        self,
        filename: str,
        line: int | None = None,
        column: int | None = None,
        location: str | None = None,
        reason: str | None = None,
    ) -> None:
        self.filename = filename
        self.line = line
        self.column = column
        self.location = location
        self.reason = reason

        if line is not None and column is not None:
            msg = f"syntax error on line {line}, column {column}, of {filename}"
        elif location:
            msg = f"invalid entry at '{location}' in {filename}"
        else:
            msg = f"invalid content in {filename}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class SettingsError(TrashError):
    """Raised when the settings file cannot be parsed or validated."""


class InvalidPatternError(TrashError):
    """Raised when a list filter is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid regular expression '{pattern}': {reason}")


class MissingTargetError(TrashError):
    """Raised when a named file or version cannot be found."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"could not locate '{target}'")


class MissingTargetPredicateError(TrashError):
    """Raised when a key selector matches no entry in the index."""

    def __init__(self) -> None:
        super().__init__("could not locate any target satisfying given conditions")


class AmbiguousTargetError(TrashError):
    """Raised when a restore matches one name at several origins."""

    def __init__(self, name: str, origins: Sequence[str]) -> None:
        self.name = name
        self.origins = tuple(origins)
        listed = ", ".join(self.origins)
        super().__init__(f"'{name}' exists at several origins ({listed}), use --origin")


class UnknownError(TrashError):
    """Wraps an underlying filesystem error."""

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        detail = cause.strerror or str(cause)
        if cause.filename:
            detail = f"{detail}: '{cause.filename}'"
        super().__init__(f"unknown: {detail}")
