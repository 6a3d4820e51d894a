"""Allow python -m fort_archive to run the CLI."""
from __future__ import annotations

from fort_archive.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
