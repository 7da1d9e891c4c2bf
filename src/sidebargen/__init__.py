"""sidebargen: derive a docs navigation sidebar from Markdown files."""

from sidebargen.exceptions import ParseError, ScanError, SidebargenError, WriteError
from sidebargen.merge import deep_merge
from sidebargen.paths import scan_markdown_files
from sidebargen.schemas import Leaf, Level, Section, SidebarOptions, SidebarTree
from sidebargen.store import load_sidebar, save_sidebar
from sidebargen.synthesizer import SidebarSynthesizer, generate_sidebar, synthesize
from sidebargen.tree import build_sidebar

__version__ = "0.1.0"
__all__ = [
    "Leaf",
    "Level",
    "ParseError",
    "ScanError",
    "Section",
    "SidebarOptions",
    "SidebarSynthesizer",
    "SidebarTree",
    "SidebargenError",
    "WriteError",
    "build_sidebar",
    "deep_merge",
    "generate_sidebar",
    "load_sidebar",
    "save_sidebar",
    "scan_markdown_files",
    "synthesize",
]
