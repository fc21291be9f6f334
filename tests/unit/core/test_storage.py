"""Unit tests for TrashStorage.

Tests moving files, directories and symlinks in and out of containers.
"""

from pathlib import Path

import pytest
from tman.core.errors import MissingTargetError, UnknownError
from tman.core.storage import TrashStorage


class TestStore:
    """Tests for TrashStorage.store."""

    def test_store_file(self, storage: TrashStorage, work_dir: Path) -> None:
        """Storing a file moves it into its container."""
        source = work_dir / "a.txt"
        source.write_text("content")

        target = storage.store(source, "c1", "v1")

        assert target == storage.root / "c1" / "v1"
        assert target.read_text() == "content"
        assert not source.exists()

    def test_store_directory(self, storage: TrashStorage, work_dir: Path) -> None:
        """Directories are stored whole."""
        source = work_dir / "project"
        source.mkdir()
        (source / "file.txt").write_text("content")

        target = storage.store(source, "c1", "v1")

        assert (target / "file.txt").read_text() == "content"
        assert not source.exists()

    def test_store_symlink_keeps_link(self, storage: TrashStorage, work_dir: Path) -> None:
        """A symlink is stored as a link; its target stays in place."""
        real = work_dir / "real.txt"
        real.write_text("content")
        link = work_dir / "link"
        link.symlink_to(real)

        target = storage.store(link, "c1", "v1")

        assert target.is_symlink()
        assert real.exists()

    def test_store_missing_source(self, storage: TrashStorage, work_dir: Path) -> None:
        """A missing source raises UnknownError."""
        with pytest.raises(UnknownError):
            storage.store(work_dir / "missing", "c1", "v1")


class TestRetrieve:
    """Tests for TrashStorage.retrieve."""

    def test_retrieve_file(self, storage: TrashStorage, work_dir: Path) -> None:
        """Retrieving moves the version to the destination."""
        source = work_dir / "a.txt"
        source.write_text("content")
        storage.store(source, "c1", "v1")

        storage.retrieve("c1", "v1", source)

        assert source.read_text() == "content"
        assert not storage.version_path("c1", "v1").exists()

    def test_retrieve_creates_parents(self, storage: TrashStorage, work_dir: Path) -> None:
        """Missing destination parents are created."""
        source = work_dir / "a.txt"
        source.write_text("content")
        storage.store(source, "c1", "v1")
        destination = work_dir / "gone" / "a.txt"

        storage.retrieve("c1", "v1", destination)

        assert destination.read_text() == "content"

    def test_retrieve_missing_version(self, storage: TrashStorage, work_dir: Path) -> None:
        """A missing stored version raises MissingTargetError naming it."""
        with pytest.raises(MissingTargetError) as exc_info:
            storage.retrieve("c1", "v1", work_dir / "a.txt")

        assert exc_info.value.target == "v1"

    def test_retrieve_onto_directory(self, storage: TrashStorage, work_dir: Path) -> None:
        """An existing directory at the destination is not replaced."""
        source = work_dir / "a.txt"
        source.write_text("content")
        storage.store(source, "c1", "v1")
        source.mkdir()

        with pytest.raises(UnknownError):
            storage.retrieve("c1", "v1", source)

        assert storage.version_path("c1", "v1").exists()


class TestRemoveContainer:
    """Tests for TrashStorage.remove_container."""

    def test_remove_container(self, storage: TrashStorage, work_dir: Path) -> None:
        """The container and all versions are deleted."""
        for version in ("v1", "v2"):
            source = work_dir / "a.txt"
            source.write_text(version)
            storage.store(source, "c1", version)

        assert storage.remove_container("c1") is True
        assert not storage.container_dir("c1").exists()

    def test_remove_missing_container_raises(self, storage: TrashStorage) -> None:
        """A missing container raises unless missing_ok is set."""
        with pytest.raises(MissingTargetError):
            storage.remove_container("c1")

    def test_remove_missing_container_ok(self, storage: TrashStorage) -> None:
        """A missing container is skipped with missing_ok."""
        assert storage.remove_container("c1", missing_ok=True) is False
