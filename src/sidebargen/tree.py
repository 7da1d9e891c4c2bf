"""Build a sidebar tree from Markdown paths."""

from __future__ import annotations

from typing import Iterable, cast

from sidebargen.config import MARKDOWN_SUFFIX
from sidebargen.schemas import Leaf, Level, Node, Section, SidebarTree
from sidebargen.text import title_case


def section_key(name: str) -> str:
    """Return the sidebar key for a top-level docs directory."""
    return f"/{name}/"


def build_sidebar(
    paths: Iterable[str],
    *,
    collapsible: bool = True,
    collapsed: bool = False,
) -> SidebarTree:
    """Build a sidebar tree from paths relative to the docs root.

    Paths are expected in sorted order; sibling order in the tree follows the
    order in which entries are first seen.

    Args:
        paths: Relative Markdown paths such as ``guide/setup/install.md``.
        collapsible: Whether sections carry a ``collapsed`` state.
        collapsed: Initial section state when ``collapsible`` is set.

    Returns:
        Mapping of section key to a single-element list holding the section.
    """
    tree: SidebarTree = {}
    for path in paths:
        add_path(tree, path, collapsible=collapsible, collapsed=collapsed)
    return tree


def add_path(
    tree: SidebarTree,
    path: str,
    *,
    collapsible: bool = True,
    collapsed: bool = False,
) -> None:
    """Insert one relative Markdown path into ``tree``.

    Raises:
        ValueError: If ``path`` has no file segment below its section.
    """
    section_name, *segments = path.split("/")
    if not segments:
        raise ValueError(f"Path has no file below its section directory: {path!r}")

    key = section_key(section_name)
    if key not in tree:
        tree[key] = [
            Section(
                text=title_case(section_name),
                items=[],
                collapsed=collapsed if collapsible else None,
            )
        ]

    items = tree[key][0].items
    *directories, file_name = segments
    for directory in directories:
        items = get_or_add_level(items, title_case(directory)).items

    if not file_name.endswith(MARKDOWN_SUFFIX):
        return
    text = file_name[: -len(MARKDOWN_SUFFIX)]
    if find_node(items, Leaf, text) is None:
        items.append(Leaf(text=text, link=f"/{path}"))


def find_node(items: list[Node], kind: type[Leaf] | type[Level], text: str) -> int | None:
    """Return the index of the first ``kind`` node with ``text``, if any."""
    for index, item in enumerate(items):
        if isinstance(item, kind) and item.text == text:
            return index
    return None


def get_or_add_level(items: list[Node], text: str) -> Level:
    """Return the level named ``text`` in ``items``, appending it when missing."""
    index = find_node(items, Level, text)
    if index is not None:
        return cast(Level, items[index])
    level = Level(text=text, items=[], collapsed=True)
    items.append(level)
    return level
