"""Versioned entry index.

This module provides the VersionedIndex class that tracks every trashed
file, every version of it, and the container directory holding those
versions. The index is loaded in full from a JSON file at startup and
written back in full by ``commit``.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

from pydantic import ValidationError

from tman.core.errors import InvalidIndexError, MissingTargetPredicateError, UnknownError
from tman.core.versions import VersionScheme, new_container_id, new_version_id
from tman.models.index import Entry, Key, KeySelector, PoppedEntry, VersionSelector

logger = logging.getLogger(__name__)


class VersionedIndex:
    """In-memory index of trashed files and their versions.

    Entries are kept in insertion order and each key appears at most once.
    An entry whose history becomes empty is dropped from the index.

    Attributes:
        version_scheme: Scheme used to generate new version ids.
    """

    def __init__(
        self,
        entries: Iterable[Entry] | None = None,
        version_scheme: VersionScheme = VersionScheme.TIMESTAMP,
    ) -> None:
        """Initialize the index.

        Args:
            entries: Initial entries, assumed to have unique keys.
            version_scheme: Scheme used to generate new version ids.
        """
        self._entries: list[Entry] = list(entries) if entries is not None else []
        self.version_scheme = version_scheme

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, name: str, origin: str) -> tuple[str, str]:
        """Record a new version of a file.

        Appends a fresh version to the entry for ``(name, origin)``, creating
        the entry with a new container id if the key is unknown.

        Args:
            name: File name of the trashed file.
            origin: Canonical original location of the file.

        Returns:
            Tuple of (container_id, version).
        """
        key = Key(name=name, origin=origin)

        for entry in self._entries:
            if entry.key == key:
                version = self._unique_version(entry.history)
                entry.push(version)
                logger.debug("Appended version %s to %s", version, origin)
                return entry.container_id, version

        container_id = new_container_id()
        version = new_version_id(self.version_scheme)
        self._entries.append(Entry(key=key, container_id=container_id, history=[version]))
        logger.debug("Created entry %s for %s", container_id, origin)
        return container_id, version

    def pop(
        self,
        key_selector: KeySelector,
        version_selector: VersionSelector,
    ) -> list[PoppedEntry]:
        """Remove versions from every entry matched by ``key_selector``.

        Matched entries are collected first, then their versions are popped,
        then emptied entries are dropped from the index. A matched entry
        with no matching version yields a snapshot with an empty history.

        Args:
            key_selector: Which entries to operate on.
            version_selector: Which versions to remove within those entries.

        Returns:
            One PoppedEntry per matched entry, in index order.

        Raises:
            MissingTargetPredicateError: If no entry matches ``key_selector``.
                The index is left unchanged.
        """
        matched = [entry for entry in self._entries if key_selector.matches(entry.key)]
        if not matched:
            raise MissingTargetPredicateError()

        popped: list[PoppedEntry] = []
        for entry in matched:
            versions = entry.pop(version_selector)
            snapshot = Entry(key=entry.key, container_id=entry.container_id, history=versions)
            popped.append(PoppedEntry(entry=snapshot, emptied=not entry.history))

        self._entries = [entry for entry in self._entries if entry.history]
        return popped

    def entries(self) -> tuple[Entry, ...]:
        """Get a read-only snapshot of all entries.

        Returns:
            Copies of the entries in insertion order, histories oldest first.
        """
        return tuple(entry.model_copy(deep=True) for entry in self._entries)

    def select(self, key_selector: KeySelector) -> tuple[Entry, ...]:
        """Get a read-only snapshot of the entries matched by ``key_selector``."""
        return tuple(
            entry.model_copy(deep=True)
            for entry in self._entries
            if key_selector.matches(entry.key)
        )

    def _unique_version(self, history: list[str]) -> str:
        version = new_version_id(self.version_scheme)
        while version in history:
            version = new_version_id(self.version_scheme)
        return version

    # =========================================================================
    # Persistence
    # =========================================================================

    @classmethod
    def load(
        cls,
        path: Path,
        version_scheme: VersionScheme = VersionScheme.TIMESTAMP,
    ) -> VersionedIndex:
        """Load an index from a JSON file.

        A missing or blank file is an empty index.

        Args:
            path: Path to the index file.
            version_scheme: Scheme used to generate new version ids.

        Returns:
            Loaded VersionedIndex.

        Raises:
            InvalidIndexError: If the file is not valid JSON, or does not
                describe a list of entries with unique keys and non-empty
                histories.
            UnknownError: If the file cannot be read.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No index at %s, starting empty", path)
            return cls(version_scheme=version_scheme)
        except UnicodeDecodeError as e:
            raise InvalidIndexError(path.name, reason=f"not valid UTF-8: {e.reason}") from e
        except OSError as e:
            raise UnknownError(e) from e

        if not text.strip():
            return cls(version_scheme=version_scheme)

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidIndexError(path.name, line=e.lineno, column=e.colno, reason=e.msg) from e

        entries = _parse_entries(data, path.name)
        logger.debug("Loaded %d entries from %s", len(entries), path)
        return cls(entries, version_scheme=version_scheme)

    def commit(self, path: Path) -> None:
        """Write the complete index to a JSON file.

        The file is replaced atomically: the index is written to a temporary
        file in the same directory, then moved over ``path`` with
        os.replace(). The temporary file is cleaned up on failure.

        Args:
            path: Path to the index file.

        Raises:
            UnknownError: If the file cannot be written.
        """
        data = [entry.model_dump(mode="json") for entry in self._entries]

        tmp_path: Path | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=path.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                json.dump(data, f, indent=2)
                f.write("\n")
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise UnknownError(e) from e

        logger.debug("Committed %d entries to %s", len(self._entries), path)


def _parse_entries(data: Any, filename: str) -> list[Entry]:
    """Validate decoded JSON as a list of entries.

    Raises:
        InvalidIndexError: With the dotted location of the first bad value.
    """
    if not isinstance(data, list):
        raise InvalidIndexError(filename, location="$", reason="expected a list of entries")

    entries: list[Entry] = []
    seen: set[Key] = set()

    for position, item in enumerate(data):
        try:
            entry = Entry.model_validate(item)
        except ValidationError as e:
            error = e.errors()[0]
            location = ".".join(str(part) for part in (position, *error["loc"]))
            raise InvalidIndexError(filename, location=location, reason=error["msg"]) from e

        if not entry.history:
            raise InvalidIndexError(
                filename, location=f"{position}.history", reason="history cannot be empty"
            )
        if entry.key in seen:
            raise InvalidIndexError(
                filename, location=f"{position}.key", reason="duplicate key"
            )

        seen.add(entry.key)
        entries.append(entry)

    return entries
