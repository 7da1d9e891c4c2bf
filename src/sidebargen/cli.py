"""Command line interface for sidebargen."""

from __future__ import annotations

import argparse
import time
from typing import Sequence

from pydantic import ValidationError

from sidebargen.config import SIDEBARGEN_DOCS_DIR, SIDEBARGEN_LOG_LEVEL, SIDEBARGEN_SIDEBAR_FILE
from sidebargen.schemas import SidebarOptions
from sidebargen.store import dump_document
from sidebargen.synthesizer import SidebarSynthesizer
from sidebargen.utils.logging_config import configure_logging, get_logger
from sidebargen.watcher import DocsWatcher

logger = get_logger(__name__)

_WATCH_POLL_S = 1.0
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sidebargen",
        description="Generate a docs sidebar JSON file from a directory of Markdown files.",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--docs-dir", default=SIDEBARGEN_DOCS_DIR, help="Docs root directory")
    common.add_argument(
        "--include",
        action="extend",
        nargs="+",
        default=[],
        metavar="DIR",
        help="Top-level docs directory to include (repeatable)",
    )
    common.add_argument(
        "--ignore",
        action="extend",
        nargs="+",
        default=[],
        metavar="FILE",
        help="File basename to leave out (repeatable)",
    )
    common.add_argument(
        "--no-collapsible",
        dest="collapsible",
        action="store_false",
        help="Do not emit a collapsed state on sections",
    )
    common.add_argument("--collapsed", action="store_true", help="Start sections collapsed")
    common.add_argument("--sidebar-file", default=SIDEBARGEN_SIDEBAR_FILE, help="Persisted sidebar JSON file")
    common.add_argument(
        "--array-merge",
        choices=("index", "text"),
        default="index",
        help="Reconcile lists with the persisted sidebar by position or by entry text",
    )
    common.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=SIDEBARGEN_LOG_LEVEL,
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    build = subparsers.add_parser("build", parents=[common], help="Regenerate the sidebar once")
    build.add_argument("--print", dest="print_json", action="store_true", help="Print the merged sidebar")
    subparsers.add_parser("watch", parents=[common], help="Regenerate, then keep watching for changes")
    return parser


def options_from_args(args: argparse.Namespace) -> SidebarOptions:
    return SidebarOptions(
        docs_dir=args.docs_dir,
        include_dirs=args.include,
        ignore_files=args.ignore,
        collapsible=args.collapsible,
        collapsed=args.collapsed,
        sidebar_file=args.sidebar_file,
        array_merge=args.array_merge,
    )


def _wait_forever() -> None:
    while True:
        time.sleep(_WATCH_POLL_S)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(f"invalid log level: {exc}")

    try:
        options = options_from_args(args)
    except ValidationError as exc:
        parser.error(str(exc))

    synthesizer = SidebarSynthesizer(options)
    sidebar = synthesizer.run()

    if args.command == "build":
        if args.print_json:
            print(dump_document(sidebar))
        else:
            print(f"{len(sidebar)} sections -> {options.sidebar_file}")
        return 0

    with DocsWatcher(options.docs_dir, synthesizer.on_file_event) as watcher:
        if not watcher.running:
            return 1
        logger.info("Watching %s, press Ctrl+C to stop", options.docs_dir)
        try:
            _wait_forever()
        except KeyboardInterrupt:
            logger.info("Stopping")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
