"""Shared schemas for sidebargen."""

from sidebargen.schemas.options import ArrayMergeMode, SidebarOptions
from sidebargen.schemas.sidebar import Leaf, Level, Node, Section, SidebarTree, dump_sidebar

__all__ = [
    "ArrayMergeMode",
    "Leaf",
    "Level",
    "Node",
    "Section",
    "SidebarOptions",
    "SidebarTree",
    "dump_sidebar",
]
