"""MkDocs plugin wiring for sidebar generation."""

from __future__ import annotations

from typing import Any

from mkdocs.config import config_options
from mkdocs.plugins import BasePlugin

from sidebargen.config import SIDEBARGEN_SIDEBAR_FILE
from sidebargen.schemas import SidebarOptions
from sidebargen.synthesizer import SidebarSynthesizer
from sidebargen.watcher import DocsWatcher


class SidebarGeneratorPlugin(BasePlugin):
    # Options read from the `plugins: - sidebargen:` block of mkdocs.yml
    config_scheme = (
        ("docs_dir", config_options.Type(str, default="")),
        ("include_dirs", config_options.Type(list, default=[])),
        ("ignore_files", config_options.Type(list, default=[])),
        ("collapsible", config_options.Type(bool, default=True)),
        ("collapsed", config_options.Type(bool, default=False)),
        ("sidebar_file", config_options.Type(str, default=SIDEBARGEN_SIDEBAR_FILE)),
        ("array_merge", config_options.Choice(("index", "text"), default="index")),
    )

    def __init__(self) -> None:
        super().__init__()
        self.synthesizer: SidebarSynthesizer | None = None
        self.watcher: DocsWatcher | None = None

    def build_options(self, config: Any) -> SidebarOptions:
        # An empty docs_dir falls back to the site's own docs_dir
        return SidebarOptions(
            docs_dir=self.config["docs_dir"] or config["docs_dir"],
            include_dirs=self.config["include_dirs"],
            ignore_files=self.config["ignore_files"],
            collapsible=self.config["collapsible"],
            collapsed=self.config["collapsed"],
            sidebar_file=self.config["sidebar_file"],
            array_merge=self.config["array_merge"],
        )

    # Regenerate the sidebar file before the site config is used, then expose it
    def on_config(self, config: Any) -> Any:
        self.synthesizer = SidebarSynthesizer(self.build_options(config))
        sidebar = self.synthesizer.run()
        if config.get("extra") is None:
            config["extra"] = {}
        config["extra"]["sidebar"] = sidebar
        return config

    # Keep the sidebar file current while `mkdocs serve` runs
    def on_serve(self, server: Any, config: Any, builder: Any) -> Any:
        if self.synthesizer is None:
            self.synthesizer = SidebarSynthesizer(self.build_options(config))
        if self.watcher is None:
            self.watcher = DocsWatcher(self.synthesizer.options.docs_dir, self.synthesizer.on_file_event)
            self.watcher.start()
        return server

    def on_shutdown(self) -> None:
        if self.watcher is not None:
            self.watcher.stop()
            self.watcher = None
