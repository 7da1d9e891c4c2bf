"""Logging setup for the sidebargen command line."""

from __future__ import annotations

import logging

from sidebargen.config import SIDEBARGEN_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging for command line runs.

    Args:
        level: Log level name or number. Falls back to ``SIDEBARGEN_LOG_LEVEL``.
    """
    resolved = level if level is not None else SIDEBARGEN_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logging.basicConfig(level=resolved, format=_LOG_FORMAT, datefmt=_DATE_FORMAT, force=True)


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``sidebargen``."""
    if name == "sidebargen" or name.startswith("sidebargen."):
        return logging.getLogger(name)
    return logging.getLogger(f"sidebargen.{name}")
