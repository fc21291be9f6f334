"""Data models for tman.

This module exports the index data structures and selectors.
"""

from tman.models.index import (
    AllVersions,
    AnyKey,
    ByName,
    ByNameAndOrigin,
    Entry,
    ExactVersion,
    Key,
    KeySelector,
    NewestVersion,
    PoppedEntry,
    VersionSelector,
    parse_version_selector,
)

__all__ = [
    "AllVersions",
    "AnyKey",
    "ByName",
    "ByNameAndOrigin",
    "Entry",
    "ExactVersion",
    "Key",
    "KeySelector",
    "NewestVersion",
    "PoppedEntry",
    "VersionSelector",
    "parse_version_selector",
]
