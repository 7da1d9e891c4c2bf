"""Label formatting for sidebar entries."""

from __future__ import annotations

import re

# Uppercase runs (acronyms), capitalized or lowercase words, and digit runs.
# Any letter outside A-Z counts as lowercase.
_WORD_RE = re.compile(r"[A-Z]+(?![^\W\dA-Z_])|[A-Z]?[^\W\dA-Z_]+|\d+")


def split_words(value: str) -> list[str]:
    """Split a path segment into words on separator, case and digit boundaries."""
    return _WORD_RE.findall(value)


def title_case(value: str) -> str:
    """Turn a path segment into a display label.

    ``getting-started`` becomes ``Getting Started``, ``apiReference`` becomes
    ``Api Reference`` and ``HTMLParser`` becomes ``HTML Parser``.
    """
    return " ".join(word[:1].upper() + word[1:] for word in split_words(value))
