"""Sidebar synthesis: scan, build, merge and persist."""

from __future__ import annotations

import logging
from typing import Any

from sidebargen.config import MARKDOWN_SUFFIX
from sidebargen.exceptions import SidebargenError
from sidebargen.merge import deep_merge
from sidebargen.paths import scan_markdown_files, strip_docs_root
from sidebargen.schemas import SidebarOptions, dump_sidebar
from sidebargen.store import load_sidebar, save_sidebar
from sidebargen.tree import build_sidebar

logger = logging.getLogger(__name__)


def generate_sidebar(options: SidebarOptions) -> dict[str, Any]:
    """Build the sidebar document for the current docs tree, without merging."""
    files = scan_markdown_files(options.docs_dir, options.include_dirs, options.ignore_files)
    relative = [strip_docs_root(path, options.docs_dir) for path in files]
    tree = build_sidebar(relative, collapsible=options.collapsible, collapsed=options.collapsed)
    return dump_sidebar(tree)


def synthesize(options: SidebarOptions) -> dict[str, Any]:
    """Regenerate the sidebar and merge it into the persisted file.

    Errors never escape: they are logged and an empty sidebar is returned so
    the host can still build without navigation.

    Args:
        options: Sidebar generation options.

    Returns:
        The merged sidebar document, or ``{}`` if the run failed.
    """
    try:
        persisted = load_sidebar(options.sidebar_file)
        generated = generate_sidebar(options)
        merged = deep_merge(persisted, generated, array_merge=options.array_merge)
        save_sidebar(options.sidebar_file, merged)
    except (SidebargenError, OSError, ValueError) as exc:
        logger.error("Error while updating sidebar: %s", exc)
        return {}
    return merged


class SidebarSynthesizer:
    """Runs synthesis for a fixed set of options.

    Hosts call :meth:`run` once while resolving their configuration and route
    file watcher events to :meth:`on_file_event`.
    """

    def __init__(self, options: SidebarOptions) -> None:
        self.options = options

    def run(self) -> dict[str, Any]:
        return synthesize(self.options)

    def on_file_event(self, path: str) -> None:
        if not str(path).endswith(MARKDOWN_SUFFIX):
            return
        logger.debug("Markdown change at %s, regenerating sidebar", path)
        self.run()
