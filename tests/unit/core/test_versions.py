"""Unit tests for version and container ids."""

from datetime import datetime

from tman.core.versions import (
    VersionScheme,
    new_container_id,
    new_version_id,
    restore_destination,
)


class TestNewVersionId:
    """Tests for new_version_id."""

    def test_timestamp_scheme(self) -> None:
        """Timestamp ids are timezone-aware ISO timestamps."""
        version = new_version_id(VersionScheme.TIMESTAMP)

        parsed = datetime.fromisoformat(version)
        assert parsed.tzinfo is not None
        assert "/" not in version

    def test_random_scheme(self) -> None:
        """Random ids are 12 hex characters."""
        version = new_version_id(VersionScheme.RANDOM)

        assert len(version) == 12
        int(version, 16)

    def test_random_ids_differ(self) -> None:
        """Random ids do not repeat."""
        assert len({new_version_id(VersionScheme.RANDOM) for _ in range(50)}) == 50


class TestNewContainerId:
    """Tests for new_container_id."""

    def test_container_ids_are_unique(self) -> None:
        """Container ids are unique UUID strings."""
        ids = {new_container_id() for _ in range(20)}

        assert len(ids) == 20
        assert all(len(i) == 36 for i in ids)


class TestRestoreDestination:
    """Tests for restore_destination."""

    def test_single_version_goes_to_origin(self) -> None:
        """A single restored version goes back to its origin."""
        assert restore_destination("/x/a.txt", "v1", multiple=False) == "/x/a.txt"

    def test_multiple_versions_get_suffix(self) -> None:
        """Several restored versions get the version id appended."""
        assert restore_destination("/x/a.txt", "v1", multiple=True) == "/x/a.txt_v1"
