"""Index models for trashed files.

This module defines the Pydantic models stored in the index file and the
selector types used to pick entries and versions out of the index.
"""

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Key(BaseModel):
    """Identity of a trashed file.

    Two keys are equal when both the file name and the original location
    are equal. Keys are immutable and hashable.

    Attributes:
        name: File name (final path component) of the trashed file.
        origin: Canonical absolute path the file was trashed from.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[str, Field(description="File name of the trashed file")]
    origin: Annotated[str, Field(description="Canonical original location")]

    @field_validator("name", "origin")
    @classmethod
    def validate_not_empty(cls, v: str, info: Any) -> str:
        """Reject empty names and origins."""
        if not v:
            msg = f"{info.field_name} cannot be empty"
            raise ValueError(msg)
        return v


# =============================================================================
# Key selectors
# =============================================================================


@dataclass(frozen=True, slots=True)
class AnyKey:
    """Match every entry."""

    def matches(self, key: Key) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ByName:
    """Match entries with the given file name, at any origin."""

    name: str

    def matches(self, key: Key) -> bool:
        return key.name == self.name


@dataclass(frozen=True, slots=True)
class ByNameAndOrigin:
    """Match the single entry with the given name and origin."""

    name: str
    origin: str

    def matches(self, key: Key) -> bool:
        return key.name == self.name and key.origin == self.origin


KeySelector = AnyKey | ByName | ByNameAndOrigin


# =============================================================================
# Version selectors
# =============================================================================


@dataclass(frozen=True, slots=True)
class AllVersions:
    """Select the whole history."""


@dataclass(frozen=True, slots=True)
class NewestVersion:
    """Select the last appended version."""


@dataclass(frozen=True, slots=True)
class ExactVersion:
    """Select every version textually equal to ``value``."""

    value: str


VersionSelector = AllVersions | NewestVersion | ExactVersion

ALL_KEYWORD = "all"
NEWEST_KEYWORDS = ("newest", "latest")


def parse_version_selector(text: str | None) -> VersionSelector:
    """Build a version selector from a command line value.

    Args:
        text: ``None``, ``"newest"`` or ``"latest"`` for the newest version,
            ``"all"`` for every version, anything else for an exact version.

    Returns:
        The matching VersionSelector.
    """
    if text is None or text in NEWEST_KEYWORDS:
        return NewestVersion()
    if text == ALL_KEYWORD:
        return AllVersions()
    return ExactVersion(text)


# =============================================================================
# Entries
# =============================================================================


class Entry(BaseModel):
    """One logical trashed file and its version history.

    The history is ordered oldest to newest; new versions are always
    appended. Each version doubles as the file name of the stored
    artifact inside the entry's container directory.

    Attributes:
        key: Identity of the file.
        container_id: Name of the storage directory holding all versions.
        history: Version identifiers, oldest first.
    """

    model_config = ConfigDict(extra="forbid")

    key: Key
    container_id: Annotated[str, Field(min_length=1, description="Storage directory name")]
    history: Annotated[
        list[str],
        Field(default_factory=list, description="Versions, oldest first"),
    ]

    @property
    def name(self) -> str:
        """File name of the entry."""
        return self.key.name

    @property
    def origin(self) -> str:
        """Original location of the entry."""
        return self.key.origin

    @property
    def newest(self) -> str | None:
        """Most recently appended version, or None if the history is empty."""
        return self.history[-1] if self.history else None

    def push(self, version: str) -> None:
        """Append a version to the history."""
        self.history.append(version)

    def pop(self, selector: VersionSelector) -> list[str]:
        """Remove every version matched by ``selector`` from the history.

        Args:
            selector: Which versions to remove.

        Returns:
            Removed versions in chronological order.
        """
        if isinstance(selector, AllVersions):
            popped = list(self.history)
            self.history.clear()
            return popped

        if isinstance(selector, NewestVersion):
            if not self.history:
                return []
            return [self.history.pop()]

        popped = [v for v in self.history if v == selector.value]
        if popped:
            self.history[:] = [v for v in self.history if v != selector.value]
        return popped


@dataclass(frozen=True, slots=True)
class PoppedEntry:
    """Result of popping versions from one entry.

    Attributes:
        entry: Snapshot holding the key, container id and removed versions.
        emptied: True if the entry lost its last version and left the index.
    """

    entry: Entry
    emptied: bool
