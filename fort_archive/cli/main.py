"""
Top-level CLI dispatcher: fort-archive <command> [args...].
All commands dispatch to package CLI modules.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

_COMMANDS = {
    "hash": "Print the canonical hash of a JSON artifact record",
    "verify": "Verify an artifact hash against the registry",
    "url": "Print an artifact's page URL",
    "code": "Print or download the scannable code image for a URL",
    "filter-link": "Print a link carrying a filter selection",
    "page": "Run page-load procedures on an HTML file",
    "manifest": "Write a CSV of hashes and links for every registry artifact",
}


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = argparse.ArgumentParser(
        prog="fort-archive",
        description="Artifact archive identity and verification tools",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    subparsers = parser.add_subparsers(dest="command", help="command")
    for name, help_text in _COMMANDS.items():
        subparsers.add_parser(name, help=help_text, add_help=False)

    args, rest = parser.parse_known_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not args.command:
        parser.print_help()
        return 0

    cmd = args.command

    if cmd == "hash":
        from fort_archive.cli import digest as mod

        return mod.main(rest)
    if cmd == "verify":
        from fort_archive.cli import verify as mod

        return mod.main(rest)
    if cmd == "url":
        from fort_archive.cli import links as mod

        return mod.main_url(rest)
    if cmd == "filter-link":
        from fort_archive.cli import links as mod

        return mod.main_filter_link(rest)
    if cmd == "code":
        from fort_archive.cli import qr as mod

        return mod.main(rest)
    if cmd == "page":
        from fort_archive.cli import page as mod

        return mod.main(rest)
    if cmd == "manifest":
        from fort_archive.cli import manifest as mod

        return mod.main(rest)

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
