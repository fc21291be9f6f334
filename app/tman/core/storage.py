"""Physical storage of trashed files.

The storage root holds one container directory per index entry, named
after the entry's container id. Each version is stored as one file (or
directory, or symlink) named after its version id.
"""

import errno
import logging
import os
import shutil
from pathlib import Path

from tman.core.errors import MissingTargetError, UnknownError

logger = logging.getLogger(__name__)


class TrashStorage:
    """Moves artifacts in and out of the storage root.

    Attributes:
        root: Directory holding the container directories.
    """

    def __init__(self, root: Path) -> None:
        """Initialize the storage.

        Args:
            root: Storage root directory. Created on first store. Symlinks
                in the path are resolved.
        """
        self.root = root.resolve()

    def container_dir(self, container_id: str) -> Path:
        """Directory holding every version of one entry."""
        return self.root / container_id

    def version_path(self, container_id: str, version: str) -> Path:
        """Location of one stored version."""
        return self.container_dir(container_id) / version

    def store(self, source: Path, container_id: str, version: str) -> Path:
        """Move ``source`` into the storage as ``version`` of a container.

        Args:
            source: Path to move. Files, directories and symlinks are moved
                as-is.
            container_id: Container directory to store into.
            version: Name of the stored artifact.

        Returns:
            Path of the stored artifact.

        Raises:
            UnknownError: If the container cannot be created or the move fails.
        """
        target = self.version_path(container_id, version)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(source), str(target))
        except OSError as e:
            raise UnknownError(e) from e

        logger.info("Stored %s as %s", source, target)
        return target

    def retrieve(self, container_id: str, version: str, destination: Path) -> Path:
        """Move a stored version out of the storage to ``destination``.

        Missing parent directories of ``destination`` are created. An
        existing file at ``destination`` is replaced; an existing directory
        is not.

        Args:
            container_id: Container directory holding the version.
            version: Stored artifact to move.
            destination: Where to move it.

        Returns:
            The destination path.

        Raises:
            MissingTargetError: If the stored version does not exist.
            UnknownError: If the move fails.
        """
        source = self.version_path(container_id, version)
        if not source.exists() and not source.is_symlink():
            raise MissingTargetError(version)

        try:
            if destination.is_dir() and not destination.is_symlink():
                raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(destination))
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(source), str(destination))
        except OSError as e:
            raise UnknownError(e) from e

        logger.info("Restored %s to %s", source, destination)
        return destination

    def remove_container(self, container_id: str, missing_ok: bool = False) -> bool:
        """Delete a container directory and everything in it.

        Args:
            container_id: Container directory to delete.
            missing_ok: If True, a missing directory is logged and skipped.

        Returns:
            True if a directory was removed.

        Raises:
            MissingTargetError: If the directory is missing and ``missing_ok``
                is False.
            UnknownError: If the directory cannot be removed.
        """
        container = self.container_dir(container_id)
        if not container.exists():
            if missing_ok:
                logger.warning("Container %s is already gone", container)
                return False
            raise MissingTargetError(str(container))

        try:
            shutil.rmtree(container)
        except OSError as e:
            raise UnknownError(e) from e

        logger.info("Removed container %s", container)
        return True
