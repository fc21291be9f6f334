"""Version and container identifiers.

A version id names one stored artifact inside a container directory; a
container id names the directory that groups every version of one entry.
"""

import uuid
from datetime import UTC, datetime
from enum import Enum


class VersionScheme(str, Enum):
    """How new version ids are generated.

    Attributes:
        TIMESTAMP: UTC timestamp with microsecond precision.
        RANDOM: 12-character random hex id.
    """

    TIMESTAMP = "timestamp"
    RANDOM = "random"


def new_version_id(scheme: VersionScheme = VersionScheme.TIMESTAMP) -> str:
    """Generate a new version id.

    Args:
        scheme: Id scheme to use.

    Returns:
        Version id usable as a file name.
    """
    if scheme == VersionScheme.RANDOM:
        return uuid.uuid4().hex[:12]
    return datetime.now(UTC).isoformat(timespec="microseconds")


def new_container_id() -> str:
    """Generate a new container directory name."""
    return str(uuid.uuid4())


def restore_destination(origin: str, version: str, multiple: bool) -> str:
    """Compute where a version is restored to.

    A single restored version goes back to its origin. When several
    versions of one entry are restored together, the version id is
    appended to each destination so they do not overwrite each other.

    Args:
        origin: Original location of the entry.
        version: Version being restored.
        multiple: Whether more than one version of the entry is restored.

    Returns:
        Destination path as a string.
    """
    if multiple:
        return f"{origin}_{version}"
    return origin
