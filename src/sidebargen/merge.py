"""Deep merge of a generated sidebar into the persisted one."""

from __future__ import annotations

import copy
from typing import Any

from sidebargen.schemas import ArrayMergeMode

_ITEMS_KEY = "items"


def deep_merge(
    target: dict[str, Any],
    source: dict[str, Any],
    *,
    array_merge: ArrayMergeMode = "index",
) -> dict[str, Any]:
    """Merge ``source`` into ``target`` recursively, mutating ``target``.

    Mappings merge key by key and lists merge element by element. Where the
    two sides do not share a shape, the ``source`` value replaces the
    ``target`` value. Keys and list elements only present in ``target`` are
    kept, which is what lets manual sidebar entries survive regeneration.

    Args:
        target: Persisted document, updated in place.
        source: Freshly generated document. Never aliased into ``target``.
        array_merge: "index" pairs list elements by position. "text" pairs
            the mappings of ``items`` lists by their ``text`` and node kind,
            appending unmatched ones. Section lists under the top-level keys
            always merge by position, so each key keeps a single section.

    Returns:
        ``target``.
    """
    for key, value in source.items():
        target[key] = _merge_value(target.get(key), value, array_merge, key=key)
    return target


def _merge_value(existing: Any, incoming: Any, array_merge: ArrayMergeMode, *, key: str | None = None) -> Any:
    if isinstance(incoming, dict) and isinstance(existing, dict):
        return deep_merge(existing, incoming, array_merge=array_merge)
    if isinstance(incoming, list) and isinstance(existing, list):
        if array_merge == "text" and key == _ITEMS_KEY:
            _merge_lists_by_text(existing, incoming)
        else:
            _merge_lists_by_index(existing, incoming, array_merge)
        return existing
    return copy.deepcopy(incoming)


def _merge_lists_by_index(target: list[Any], source: list[Any], array_merge: ArrayMergeMode) -> None:
    for index, value in enumerate(source):
        if index < len(target):
            target[index] = _merge_value(target[index], value, array_merge)
        else:
            target.append(copy.deepcopy(value))


def _merge_lists_by_text(target: list[Any], source: list[Any]) -> None:
    for index, value in enumerate(source):
        if not (isinstance(value, dict) and "text" in value):
            # Elements without a text key have nothing to match on.
            if index < len(target):
                target[index] = _merge_value(target[index], value, "text")
            else:
                target.append(copy.deepcopy(value))
            continue

        match = _find_same_node(target, value)
        if match is None:
            target.append(copy.deepcopy(value))
        else:
            deep_merge(target[match], value, array_merge="text")


def _find_same_node(items: list[Any], node: dict[str, Any]) -> int | None:
    is_group = _ITEMS_KEY in node
    for index, item in enumerate(items):
        if isinstance(item, dict) and item.get("text") == node["text"] and (_ITEMS_KEY in item) == is_group:
            return index
    return None
