"""Sidebar tree models."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field


class Leaf(BaseModel):
    """A single Markdown document in the sidebar."""

    text: str
    link: str


class Level(BaseModel):
    """A nested directory grouping beneath a section."""

    text: str
    items: list[Union[Leaf, Level]] = Field(default_factory=list)
    collapsed: bool = True


Node = Union[Leaf, Level]


class Section(BaseModel):
    """Top-level grouping for one included docs directory.

    ``collapsed`` is ``None`` when sections are not collapsible; it is then
    left out of the serialized document entirely.
    """

    text: str
    items: list[Node] = Field(default_factory=list)
    collapsed: bool | None = None


SidebarTree = dict[str, list[Section]]


def dump_sidebar(tree: SidebarTree) -> dict[str, Any]:
    """Convert a sidebar tree into a JSON-compatible document."""
    return {
        key: [section.model_dump(exclude_none=True) for section in sections]
        for key, sections in tree.items()
    }
