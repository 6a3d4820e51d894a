"""
Link helpers: artifact page URLs and filter propagation links.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from fort_archive.urls import artifact_url, build_filter_link


def main_url(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ap = argparse.ArgumentParser(prog="fort-archive url", description="Print an artifact's page URL.")
    ap.add_argument("artifact_id")
    ap.add_argument("--page-url", required=True, help="URL of the page links are relative to")
    args = ap.parse_args(argv)
    print(artifact_url(args.artifact_id, args.page_url))
    return 0


def main_filter_link(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ap = argparse.ArgumentParser(
        prog="fort-archive filter-link", description="Print a link that preselects a filter."
    )
    ap.add_argument("target")
    ap.add_argument("filter_type")
    ap.add_argument("value")
    args = ap.parse_args(argv)
    print(build_filter_link(args.target, args.filter_type, args.value))
    return 0
