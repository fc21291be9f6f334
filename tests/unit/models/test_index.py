"""Unit tests for index models and selectors.

Tests for Key identity, Entry version popping, and selector parsing.
"""

from collections.abc import Callable

import pytest
from pydantic import ValidationError
from tman.models.index import (
    AllVersions,
    AnyKey,
    ByName,
    ByNameAndOrigin,
    Entry,
    ExactVersion,
    Key,
    NewestVersion,
    parse_version_selector,
)


class TestKey:
    """Tests for Key model."""

    def test_structural_equality(self) -> None:
        """Keys with equal name and origin are equal and hash alike."""
        a = Key(name="a.txt", origin="/tmp/a.txt")
        b = Key(name="a.txt", origin="/tmp/a.txt")

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_origin_distinguishes_keys(self) -> None:
        """Keys with the same name at different origins differ."""
        a = Key(name="a.txt", origin="/x/a.txt")
        b = Key(name="a.txt", origin="/y/a.txt")

        assert a != b

    def test_key_is_immutable(self) -> None:
        """Keys cannot be modified after creation."""
        key = Key(name="a.txt", origin="/tmp/a.txt")

        with pytest.raises(ValidationError):
            key.name = "b.txt"  # type: ignore[misc]

    def test_empty_name_rejected(self) -> None:
        """Empty names are rejected."""
        with pytest.raises(ValidationError, match="name cannot be empty"):
            Key(name="", origin="/tmp/a.txt")

    def test_extra_fields_rejected(self) -> None:
        """Unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Key.model_validate({"name": "a", "origin": "/a", "size": 3})


class TestEntryPop:
    """Tests for Entry.pop with each version selector."""

    def test_all_drains_history(self, make_entry: Callable[..., Entry]) -> None:
        """AllVersions removes the whole history in order."""
        entry = make_entry(history=["t1", "t2", "t3"])

        assert entry.pop(AllVersions()) == ["t1", "t2", "t3"]
        assert entry.history == []

    def test_newest_uses_append_order(self, make_entry: Callable[..., Entry]) -> None:
        """NewestVersion pops the last appended version, not the lexical maximum."""
        entry = make_entry(history=["t1", "t10", "t2"])

        assert entry.pop(NewestVersion()) == ["t2"]
        assert entry.history == ["t1", "t10"]

    def test_newest_on_empty_history(self, make_entry: Callable[..., Entry]) -> None:
        """NewestVersion on an empty history pops nothing."""
        entry = make_entry(history=[])

        assert entry.pop(NewestVersion()) == []

    def test_exact_removes_match(self, make_entry: Callable[..., Entry]) -> None:
        """ExactVersion removes the matching version only."""
        entry = make_entry(history=["t1", "t2", "t3"])

        assert entry.pop(ExactVersion("t2")) == ["t2"]
        assert entry.history == ["t1", "t3"]

    def test_exact_removes_duplicates(self, make_entry: Callable[..., Entry]) -> None:
        """ExactVersion removes every textually equal version."""
        entry = make_entry(history=["t1", "t2", "t1"])

        assert entry.pop(ExactVersion("t1")) == ["t1", "t1"]
        assert entry.history == ["t2"]

    def test_exact_without_match(self, make_entry: Callable[..., Entry]) -> None:
        """ExactVersion with an unknown version leaves the history alone."""
        entry = make_entry(history=["t1"])

        assert entry.pop(ExactVersion("nope")) == []
        assert entry.history == ["t1"]

    def test_push_appends(self, make_entry: Callable[..., Entry]) -> None:
        """push appends to the end of the history."""
        entry = make_entry(history=["t1"])
        entry.push("t0")

        assert entry.history == ["t1", "t0"]
        assert entry.newest == "t0"


class TestKeySelectors:
    """Tests for key selector matching."""

    def test_any_key(self) -> None:
        """AnyKey matches everything."""
        assert AnyKey().matches(Key(name="a", origin="/a"))

    def test_by_name(self) -> None:
        """ByName ignores the origin."""
        selector = ByName("a.txt")

        assert selector.matches(Key(name="a.txt", origin="/x/a.txt"))
        assert selector.matches(Key(name="a.txt", origin="/y/a.txt"))
        assert not selector.matches(Key(name="b.txt", origin="/x/b.txt"))

    def test_by_name_and_origin(self) -> None:
        """ByNameAndOrigin requires both fields to match."""
        selector = ByNameAndOrigin("a.txt", "/x/a.txt")

        assert selector.matches(Key(name="a.txt", origin="/x/a.txt"))
        assert not selector.matches(Key(name="a.txt", origin="/y/a.txt"))


class TestParseVersionSelector:
    """Tests for parse_version_selector."""

    @pytest.mark.parametrize("text", [None, "newest", "latest"])
    def test_newest_keywords(self, text: str | None) -> None:
        """None, 'newest' and 'latest' select the newest version."""
        assert parse_version_selector(text) == NewestVersion()

    def test_all_keyword(self) -> None:
        """'all' selects every version."""
        assert parse_version_selector("all") == AllVersions()

    def test_exact_version(self) -> None:
        """Anything else selects an exact version."""
        assert parse_version_selector("2026-01-01T00:00:00") == ExactVersion("2026-01-01T00:00:00")
