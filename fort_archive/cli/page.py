"""
Run the page-load procedures (verification banner, filter selection, code
image) on an HTML file as if it were opened at --url, and write the result.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from fort_archive.artifacts import write_text
from fort_archive.page import load_page
from fort_archive.ui import on_page_load


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ap = argparse.ArgumentParser(prog="fort-archive page", description="Apply page-load procedures to HTML.")
    ap.add_argument("html", help="input HTML file")
    ap.add_argument("--url", default=None, help="URL the page is opened at, including query (default: file URI)")
    ap.add_argument("--registry", default=None, help="registry path or URL (default: from config)")
    ap.add_argument("--out", default=None, help="output file (default: stdout)")
    args = ap.parse_args(argv)

    try:
        page = load_page(args.html, url=args.url)
    except OSError as e:
        print(f"Cannot read page: {e}", file=sys.stderr)
        return 1

    report = on_page_load(page, source=args.registry)
    if report.verification is not None:
        print(f"verification: {report.verification.status.value}", file=sys.stderr)
    if report.filter_selection is not None:
        sel = report.filter_selection
        print(f"filter:       {sel.filter_type}={sel.value}", file=sys.stderr)
    print(f"code:         {'rendered' if report.code_rendered else 'skipped'}", file=sys.stderr)

    html = page.to_html()
    if args.out:
        write_text(html, args.out)
    else:
        sys.stdout.write(html)
    return 0
