"""Sidebar generation options."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sidebargen.config import SIDEBARGEN_DOCS_DIR, SIDEBARGEN_SIDEBAR_FILE

ArrayMergeMode = Literal["index", "text"]


class SidebarOptions(BaseModel):
    """Options for one sidebar synthesis run.

    Field names are accepted in snake_case and in the camelCase spelling used
    by site configuration files (``docsDir``, ``includeDirs``, ...).

    Attributes:
        docs_dir: Root directory scanned for Markdown files.
        include_dirs: Top-level directories under ``docs_dir`` that get a
            section. Nothing is generated when empty.
        ignore_files: File basenames that never appear in the sidebar.
        collapsible: Whether sections carry a ``collapsed`` attribute at all.
        collapsed: Initial collapsed state of sections when collapsible.
        sidebar_file: JSON file holding the persisted sidebar.
        array_merge: How lists are reconciled with the persisted sidebar,
            by position ("index") or by node text ("text").
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    docs_dir: Path = Field(default=Path(SIDEBARGEN_DOCS_DIR))
    include_dirs: frozenset[str] = Field(default_factory=frozenset)
    ignore_files: frozenset[str] = Field(default_factory=frozenset)
    collapsible: bool = True
    collapsed: bool = False
    sidebar_file: Path = Field(default=Path(SIDEBARGEN_SIDEBAR_FILE))
    array_merge: ArrayMergeMode = "index"
