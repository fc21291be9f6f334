"""Trash operations.

This module provides the TrashManager class that combines the versioned
index with physical storage to delete, restore, list and empty trashed
files, and the open_trash() context manager that loads the index at the
start of a run and commits it only when the run succeeds.
"""

import logging
import os
import re
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from tman.core.config import AmbiguityPolicy, Settings, TrashConfig
from tman.core.errors import (
    AmbiguousTargetError,
    InvalidArgumentsError,
    InvalidPatternError,
    MissingTargetError,
    UnknownError,
)
from tman.core.index import VersionedIndex
from tman.core.storage import TrashStorage
from tman.core.versions import restore_destination
from tman.models.index import (
    AllVersions,
    AnyKey,
    ByName,
    ByNameAndOrigin,
    Entry,
    ExactVersion,
    KeySelector,
    parse_version_selector,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeletedFile:
    """A file moved into the trash.

    Attributes:
        origin: Canonical location the file was moved from.
        container_id: Container directory it was stored in.
        version: Version id it was stored as.
    """

    origin: Path
    container_id: str
    version: str


@dataclass(frozen=True, slots=True)
class RestoredFile:
    """A version moved out of the trash.

    Attributes:
        name: File name of the entry.
        version: Version that was restored.
        destination: Where the version was moved to.
    """

    name: str
    version: str
    destination: Path


class TrashManager:
    """Delete, restore, list and empty trashed files.

    Index mutations happen before the matching physical moves. If a move
    fails the error propagates and the caller must not commit the index.
    """

    def __init__(
        self,
        index: VersionedIndex,
        storage: TrashStorage,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the TrashManager.

        Args:
            index: Index of trashed files.
            storage: Physical storage for trashed versions.
            settings: User settings. Defaults to Settings().
        """
        self._index = index
        self._storage = storage
        self._settings = settings if settings is not None else Settings()

    @property
    def index(self) -> VersionedIndex:
        """The index this manager operates on."""
        return self._index

    @property
    def settings(self) -> Settings:
        """Settings this manager was created with."""
        return self._settings

    def delete(self, targets: Iterable[str | Path]) -> list[DeletedFile]:
        """Move files into the trash.

        Every target is checked before anything is moved, so a missing or
        invalid target leaves the whole batch untouched. Targets are then
        moved in order.

        Args:
            targets: Paths to trash.

        Returns:
            One DeletedFile per trashed path.

        Raises:
            MissingTargetError: If a target does not exist.
            InvalidArgumentsError: If a target cannot be trashed, or two
                targets are the same path or nested in one another.
            UnknownError: If a move fails.
        """
        origins: list[Path] = []
        for target in targets:
            origin = self._check_target(Path(target))
            for other in origins:
                if origin.is_relative_to(other) or other.is_relative_to(origin):
                    raise InvalidArgumentsError(f"'{origin}' overlaps '{other}'")
            origins.append(origin)

        return [self._delete_single(origin) for origin in origins]

    def _check_target(self, target: Path) -> Path:
        origin = _canonical_path(target, strict=True)
        if not origin.name:
            raise InvalidArgumentsError(f"cannot trash '{origin}'")
        if origin.is_relative_to(self._storage.root) or self._storage.root.is_relative_to(origin):
            raise InvalidArgumentsError(f"cannot trash '{origin}', it holds trashed files")
        return origin

    def _delete_single(self, origin: Path) -> DeletedFile:
        container_id, version = self._index.push(origin.name, str(origin))
        self._storage.store(origin, container_id, version)
        return DeletedFile(origin=origin, container_id=container_id, version=version)

    def restore(
        self,
        name: str,
        origin: str | None = None,
        version: str | None = None,
    ) -> list[RestoredFile]:
        """Move versions of a trashed file back out of the trash.

        When more than one version of one entry is restored, each
        destination gets the version id appended. Container directories of
        entries that lose their last version are removed.

        Args:
            name: File name of the entry.
            origin: Optional original location narrowing the match.
            version: ``None``/``"newest"`` for the newest version, ``"all"``
                for every version, or an exact version id.

        Returns:
            One RestoredFile per restored version.

        Raises:
            InvalidArgumentsError: If ``name`` is not a bare file name.
            AmbiguousTargetError: If ``name`` exists at several origins and
                the ambiguity policy is ``fail``.
            MissingTargetPredicateError: If no entry matches.
            MissingTargetError: If an exact version is unknown, or a stored
                version is missing on disk.
            UnknownError: If a move fails.
        """
        if not name or "/" in name or name in (".", ".."):
            raise InvalidArgumentsError(f"'{name}' is not a file name")

        key_selector: KeySelector
        if origin is not None:
            key_selector = ByNameAndOrigin(name, str(_canonical_path(Path(origin), strict=False)))
        else:
            key_selector = ByName(name)
            self._check_ambiguity(name, key_selector)

        version_selector = parse_version_selector(version)
        popped = self._index.pop(key_selector, version_selector)

        if isinstance(version_selector, ExactVersion) and not any(
            item.entry.history for item in popped
        ):
            raise MissingTargetError(version_selector.value)

        restored: list[RestoredFile] = []
        for item in popped:
            entry = item.entry
            multiple = len(entry.history) > 1
            for popped_version in entry.history:
                destination = Path(restore_destination(entry.origin, popped_version, multiple))
                self._storage.retrieve(entry.container_id, popped_version, destination)
                restored.append(
                    RestoredFile(name=entry.name, version=popped_version, destination=destination)
                )

            if item.emptied:
                self._storage.remove_container(entry.container_id)

        return restored

    def _check_ambiguity(self, name: str, key_selector: KeySelector) -> None:
        if self._settings.ambiguous_restore != AmbiguityPolicy.FAIL:
            return
        origins = [entry.origin for entry in self._index.select(key_selector)]
        if len(origins) > 1:
            raise AmbiguousTargetError(name, origins)

    def list_entries(self, pattern: str | None = None) -> list[Entry]:
        """List entries whose name matches a regular expression.

        Args:
            pattern: Regular expression searched in each name. None or an
                empty string matches everything.

        Returns:
            Matching entries in insertion order.

        Raises:
            InvalidPatternError: If ``pattern`` is not a valid expression.
        """
        try:
            regex = re.compile(pattern or "")
        except re.error as e:
            raise InvalidPatternError(pattern or "", e.msg) from e

        return [entry for entry in self._index.entries() if regex.search(entry.name)]

    def empty(self) -> list[Entry]:
        """Permanently delete everything in the trash.

        Returns:
            Snapshots of the removed entries. Empty if the trash was empty.

        Raises:
            UnknownError: If a container directory cannot be removed.
        """
        if not len(self._index):
            logger.debug("Trash is already empty")
            return []

        popped = self._index.pop(AnyKey(), AllVersions())
        for item in popped:
            self._storage.remove_container(item.entry.container_id, missing_ok=True)
        return [item.entry for item in popped]


def _canonical_path(path: Path, strict: bool) -> Path:
    """Make ``path`` absolute with a canonical parent.

    The final component is kept as-is so that a symlink is trashed itself
    rather than its target.

    Raises:
        MissingTargetError: If ``strict`` and the path does not exist.
        UnknownError: If the parent cannot be resolved.
    """
    absolute = Path(os.path.abspath(path))
    if strict and not absolute.exists() and not absolute.is_symlink():
        raise MissingTargetError(str(path))

    try:
        return absolute.parent.resolve(strict=strict) / absolute.name
    except OSError as e:
        raise UnknownError(e) from e


@contextmanager
def open_trash(config: TrashConfig) -> Iterator[TrashManager]:
    """Load the index, yield a TrashManager, and commit on success.

    If the body raises, the index file is left untouched.

    Args:
        config: Locations and settings for this run.

    Yields:
        TrashManager bound to the loaded index.
    """
    index = VersionedIndex.load(config.index_path, version_scheme=config.settings.version_scheme)
    yield TrashManager(index, TrashStorage(config.storage_root), config.settings)
    index.commit(config.index_path)
