"""Read and write the persisted sidebar JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from sidebargen.config import JSON_INDENT
from sidebargen.exceptions import ParseError, WriteError

logger = logging.getLogger(__name__)


def load_sidebar(path: Path | str) -> dict[str, Any]:
    """Load the persisted sidebar document.

    Args:
        path: Location of the sidebar JSON file.

    Returns:
        The parsed document, or an empty dict if the file does not exist.

    Raises:
        ParseError: If the file is not valid JSON, is nested too deeply to
            decode, or is not a JSON object.
    """
    sidebar_path = Path(path)
    if not sidebar_path.exists():
        return {}
    try:
        document = json.loads(sidebar_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise ParseError(f"Invalid JSON in {sidebar_path}: {exc}") from exc
    if not isinstance(document, dict):
        raise ParseError(f"Sidebar file {sidebar_path} must contain a JSON object")
    return document


def dump_document(document: dict[str, Any]) -> str:
    """Serialize a sidebar document the way it is stored on disk."""
    return json.dumps(document, indent=JSON_INDENT, ensure_ascii=False)


def save_sidebar(path: Path | str, document: dict[str, Any]) -> bool:
    """Write the sidebar document, replacing any previous content.

    The write is skipped when the file already holds the same text.

    Returns:
        True if the file was written, False if it was already up to date.

    Raises:
        WriteError: If the file cannot be written.
    """
    sidebar_path = Path(path)
    content = dump_document(document)
    try:
        if sidebar_path.is_file() and sidebar_path.read_text(encoding="utf-8") == content:
            logger.debug("Sidebar file %s is up to date", sidebar_path)
            return False
        sidebar_path.write_text(content, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WriteError(f"Failed to write {sidebar_path}: {exc}") from exc
    logger.info("Wrote sidebar file %s", sidebar_path)
    return True
