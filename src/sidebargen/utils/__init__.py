"""Shared helpers for sidebargen."""
