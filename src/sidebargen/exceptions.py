"""Custom exceptions for sidebargen."""


class SidebargenError(Exception):
    """Base exception for sidebargen operations."""


class ScanError(SidebargenError):
    """Docs directory could not be scanned."""


class ParseError(SidebargenError):
    """Persisted sidebar file is not valid JSON."""


class WriteError(SidebargenError):
    """Persisted sidebar file could not be written."""
