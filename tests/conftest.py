"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from tman.core.index import VersionedIndex
from tman.core.storage import TrashStorage
from tman.core.trash import TrashManager
from tman.models.index import Entry, Key


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every XDG directory at a temporary location."""
    xdg_root = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_root / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(xdg_root / "state"))
    monkeypatch.setenv("XDG_DATA_HOME", str(xdg_root / "data"))
    return xdg_root


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Directory holding files to trash, with a canonical path."""
    work = tmp_path / "work"
    work.mkdir()
    return work.resolve()


@pytest.fixture
def storage(tmp_path: Path) -> TrashStorage:
    """Storage rooted in a temporary directory."""
    return TrashStorage(tmp_path / "trash")


@pytest.fixture
def manager(storage: TrashStorage) -> TrashManager:
    """TrashManager over an empty index."""
    return TrashManager(VersionedIndex(), storage)


@pytest.fixture
def make_entry() -> Callable[..., Entry]:
    """Factory for index entries."""

    def _make(
        name: str = "a.txt",
        origin: str = "/tmp/a.txt",
        container_id: str = "c0ffee",
        history: list[str] | None = None,
    ) -> Entry:
        return Entry(
            key=Key(name=name, origin=origin),
            container_id=container_id,
            history=history if history is not None else ["t1"],
        )

    return _make
