"""Markdown file discovery for sidebar generation."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Iterable

from sidebargen.config import MARKDOWN_SUFFIX
from sidebargen.exceptions import ScanError

logger = logging.getLogger(__name__)


def scan_markdown_files(
    docs_dir: Path | str,
    include_dirs: Iterable[str],
    ignore_files: Iterable[str] = (),
) -> list[str]:
    """Collect the Markdown files that belong in the sidebar.

    A file qualifies when its top-level directory under ``docs_dir`` is in
    ``include_dirs`` and its basename is not in ``ignore_files``. Files directly
    in ``docs_dir`` and anything under a hidden directory are skipped.

    A docs path that is missing, not a directory or unreadable yields an empty
    list, so a run can still fall back on the persisted sidebar.

    Args:
        docs_dir: Documentation root directory.
        include_dirs: Top-level directory names to include. Empty means none.
        ignore_files: File basenames to leave out.

    Returns:
        Sorted POSIX paths that keep the ``docs_dir`` prefix
        (e.g. ``docs/guide/intro.md``).
    """
    root = Path(docs_dir)
    if not root.exists():
        logger.debug("Docs directory %s does not exist, nothing to scan", root)
        return []

    included = set(include_dirs)
    if not included:
        return []
    ignored = set(ignore_files)

    try:
        candidates = _find_candidates(root)
    except ScanError as exc:
        logger.warning("%s, treating docs as empty", exc)
        return []

    files: list[str] = []
    for path in candidates:
        parts = path.relative_to(root).parts
        if len(parts) < 2 or parts[0] not in included:
            continue
        if path.name in ignored:
            continue
        if any(part.startswith(".") for part in parts):
            continue
        if not path.is_file():
            continue
        files.append(path.as_posix())

    files.sort()
    logger.debug("Found %d Markdown files under %s", len(files), root)
    return files


def strip_docs_root(path: str, docs_dir: Path | str) -> str:
    """Return ``path`` relative to the docs root, in POSIX form."""
    return PurePosixPath(path).relative_to(Path(docs_dir).as_posix()).as_posix()


def _find_candidates(root: Path) -> list[Path]:
    if not root.is_dir():
        raise ScanError(f"Docs path is not a directory: {root}")
    try:
        return list(root.rglob(f"*{MARKDOWN_SUFFIX}"))
    except OSError as exc:
        raise ScanError(f"Failed to scan {root}: {exc}") from exc
