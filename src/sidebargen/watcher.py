"""File watching for the docs directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import TracebackType
from typing import Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from sidebargen.config import MARKDOWN_SUFFIX

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[str], None]


class MarkdownEventHandler(FileSystemEventHandler):
    """Forwards Markdown file additions and removals to a callback.

    A move is reported once, using the destination path when it is a Markdown
    file and the source path otherwise.
    """

    def __init__(self, callback: ChangeCallback) -> None:
        super().__init__()
        self.callback = callback

    def on_created(self, event: FileSystemEvent) -> None:
        self._dispatch_path(event, event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._dispatch_path(event, event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        dest = os.fsdecode(event.dest_path)
        path = dest if dest.endswith(MARKDOWN_SUFFIX) else event.src_path
        self._dispatch_path(event, path)

    def _dispatch_path(self, event: FileSystemEvent, path: str | bytes) -> None:
        if event.is_directory:
            return
        decoded = os.fsdecode(path)
        if decoded.endswith(MARKDOWN_SUFFIX):
            self.callback(decoded)


class DocsWatcher:
    """Owns a watchdog observer on the docs directory.

    Use as a context manager or call :meth:`start` and :meth:`stop` from the
    host's server lifecycle hooks.
    """

    def __init__(self, docs_dir: Path | str, on_change: ChangeCallback) -> None:
        self.docs_dir = Path(docs_dir)
        self.handler = MarkdownEventHandler(on_change)
        self._observer: Observer | None = None

    @property
    def running(self) -> bool:
        return self._observer is not None

    def start(self) -> None:
        if self._observer is not None:
            return
        if not self.docs_dir.is_dir():
            logger.warning("Not watching %s: directory does not exist", self.docs_dir)
            return
        observer = Observer()
        observer.schedule(self.handler, str(self.docs_dir), recursive=True)
        observer.start()
        self._observer = observer
        logger.debug("Watching %s for Markdown changes", self.docs_dir)

    def stop(self) -> None:
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join()
        self._observer = None
        logger.debug("Stopped watching %s", self.docs_dir)

    def __enter__(self) -> DocsWatcher:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()
