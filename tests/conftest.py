"""Test setup for sidebargen."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def make_docs(tmp_path: Path) -> Callable[..., Path]:
    """Create Markdown files under ``tmp_path / "docs"`` and return the docs dir."""

    def _make(*relative_paths: str) -> Path:
        docs = tmp_path / "docs"
        docs.mkdir(exist_ok=True)
        for relative in relative_paths:
            path = docs / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f"# {path.stem}\n", encoding="utf-8")
        return docs

    return _make
