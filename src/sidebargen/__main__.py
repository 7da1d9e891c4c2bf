"""Entry point for ``python -m sidebargen``."""

from sidebargen.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
