"""Tests for merging generated sidebars into persisted ones."""

from __future__ import annotations

from typing import Any

from sidebargen.merge import deep_merge


def _leaf(text: str, section: str = "guide") -> dict[str, str]:
    return {"text": text, "link": f"/{section}/{text}.md"}


class TestDeepMergeIndex:
    """Tests for deep_merge with positional list merging."""

    def test_into_empty_document(self) -> None:
        """Merging into an empty document yields a copy of the source."""
        source = {"/guide/": [{"text": "Guide", "items": [_leaf("intro")], "collapsed": False}]}
        target: dict[str, Any] = {}

        result = deep_merge(target, source)

        assert result is target
        assert result == source
        assert result["/guide/"] is not source["/guide/"]

    def test_manual_leaf_beyond_generated_positions_is_kept(self) -> None:
        """An extra persisted leaf after the generated ones survives."""
        manual = {"text": "External", "link": "https://example.com"}
        target = {"/guide/": [{"text": "Guide", "items": [_leaf("intro"), manual], "collapsed": False}]}
        source = {"/guide/": [{"text": "Guide", "items": [_leaf("intro")], "collapsed": False}]}

        deep_merge(target, source)

        assert target["/guide/"][0]["items"] == [_leaf("intro"), manual]

    def test_colliding_position_is_overwritten_field_wise(self) -> None:
        """A manual entry at a generated position takes the generated fields."""
        target = {"/guide/": [{"text": "Guide", "items": [{"text": "Manual", "link": "/m", "badge": "new"}]}]}
        source = {"/guide/": [{"text": "Guide", "items": [_leaf("intro")]}]}

        deep_merge(target, source)

        assert target["/guide/"][0]["items"] == [{"text": "intro", "link": "/guide/intro.md", "badge": "new"}]

    def test_primitives_overwrite(self) -> None:
        """Generated booleans and strings replace persisted ones."""
        target = {"/guide/": [{"text": "Old", "items": [], "collapsed": True}]}
        source = {"/guide/": [{"text": "Guide", "items": [], "collapsed": False}]}

        deep_merge(target, source)

        assert target["/guide/"][0]["text"] == "Guide"
        assert target["/guide/"][0]["collapsed"] is False

    def test_persisted_only_keys_and_fields_are_kept(self) -> None:
        """Sections and fields the generator does not produce are untouched."""
        target = {
            "/manual/": [{"text": "Manual", "items": [_leaf("x", "manual")]}],
            "/guide/": [{"text": "Guide", "items": [], "link": "/guide/"}],
        }
        source = {"/guide/": [{"text": "Guide", "items": [_leaf("intro")]}]}

        deep_merge(target, source)

        assert list(target) == ["/manual/", "/guide/"]
        assert target["/manual/"] == [{"text": "Manual", "items": [_leaf("x", "manual")]}]
        assert target["/guide/"][0]["link"] == "/guide/"

    def test_shape_mismatch_is_replaced(self) -> None:
        """A persisted value of a different shape is replaced."""
        target: dict[str, Any] = {"/guide/": {"text": "odd"}}
        source = {"/guide/": [{"text": "Guide", "items": []}]}

        deep_merge(target, source)

        assert target["/guide/"] == [{"text": "Guide", "items": []}]

    def test_merge_is_idempotent(self) -> None:
        """Merging the same source twice changes nothing the second time."""
        source = {"/guide/": [{"text": "Guide", "items": [_leaf("a"), _leaf("b")], "collapsed": False}]}
        target: dict[str, Any] = {}

        deep_merge(target, source)
        snapshot = {"/guide/": [{"text": "Guide", "items": [_leaf("a"), _leaf("b")], "collapsed": False}]}
        deep_merge(target, source)

        assert target == snapshot


class TestDeepMergeText:
    """Tests for deep_merge with text-keyed list merging."""

    def test_manual_entry_at_colliding_position_survives(self) -> None:
        """Entries are matched by text, so a manual leaf is never overwritten."""
        manual = {"text": "External", "link": "https://example.com"}
        target = {"/guide/": [{"text": "Guide", "items": [manual, _leaf("intro")]}]}
        source = {"/guide/": [{"text": "Guide", "items": [_leaf("intro"), _leaf("setup")]}]}

        deep_merge(target, source, array_merge="text")

        assert target["/guide/"][0]["items"] == [manual, _leaf("intro"), _leaf("setup")]

    def test_levels_match_levels_only(self) -> None:
        """A level never merges into a leaf with the same text."""
        target = {"/guide/": [{"text": "Guide", "items": [{"text": "Setup", "link": "/guide/Setup.md"}]}]}
        level = {"text": "Setup", "items": [_leaf("install")], "collapsed": True}
        source = {"/guide/": [{"text": "Guide", "items": [level]}]}

        deep_merge(target, source, array_merge="text")

        assert target["/guide/"][0]["items"] == [{"text": "Setup", "link": "/guide/Setup.md"}, level]

    def test_nested_levels_merge_recursively(self) -> None:
        """Matching levels merge their own items by text."""
        manual = {"text": "Notes", "link": "/guide/setup/notes"}
        target = {
            "/guide/": [
                {"text": "Guide", "items": [{"text": "Setup", "items": [manual], "collapsed": False}]}
            ]
        }
        source = {
            "/guide/": [
                {"text": "Guide", "items": [{"text": "Setup", "items": [_leaf("install")], "collapsed": True}]}
            ]
        }

        deep_merge(target, source, array_merge="text")

        setup = target["/guide/"][0]["items"][0]
        assert setup["items"] == [manual, _leaf("install")]
        assert setup["collapsed"] is True

    def test_renamed_section_stays_single(self) -> None:
        """A section renamed by hand is merged in place, not duplicated."""
        manual = {"text": "External", "link": "https://example.com"}
        target = {"/guide/": [{"text": "User Guide", "items": [manual], "collapsed": True}]}
        source = {"/guide/": [{"text": "Guide", "items": [_leaf("intro")], "collapsed": False}]}

        deep_merge(target, source, array_merge="text")

        assert len(target["/guide/"]) == 1
        section = target["/guide/"][0]
        assert section["text"] == "Guide"
        assert section["items"] == [manual, _leaf("intro")]
        assert section["collapsed"] is False
