"""Local configuration for sidebargen."""

from __future__ import annotations

import os
from typing import Final

DEFAULT_DOCS_DIR = "docs"
DEFAULT_SIDEBAR_FILE = "docs/.vitepress/sidebar.json"
DEFAULT_LOG_LEVEL = "INFO"

MARKDOWN_SUFFIX: Final[str] = ".md"
JSON_INDENT: Final[int] = 2

SIDEBARGEN_DOCS_DIR = os.getenv("SIDEBARGEN_DOCS_DIR", DEFAULT_DOCS_DIR)
SIDEBARGEN_SIDEBAR_FILE = os.getenv("SIDEBARGEN_SIDEBAR_FILE", DEFAULT_SIDEBAR_FILE)
SIDEBARGEN_LOG_LEVEL = os.getenv("SIDEBARGEN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
