"""
Write a CSV manifest of every registry artifact: id, hash, url, verify_url, code_src.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from fort_archive import config
from fort_archive.core.errors import ArtifactError, RegistryError
from fort_archive.manifest import build_manifest, write_manifest
from fort_archive.registry import load_registry, resolve_registry_source
from fort_archive.symbols import create_default_renderer


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ap = argparse.ArgumentParser(prog="fort-archive manifest", description="Hash and link every artifact.")
    ap.add_argument("--page-url", required=True, help="site index URL artifact links are relative to")
    ap.add_argument("--registry", default=None, help="registry path or URL (default: from config)")
    ap.add_argument("--out", required=True, help="CSV output path")
    ap.add_argument("--no-code", action="store_true", help="leave code_src empty")
    args = ap.parse_args(argv)

    # configured locations are page-relative; an explicit --registry is used as given
    source = args.registry if args.registry is not None else resolve_registry_source(
        args.page_url, config.registry_source()
    )
    try:
        registry = load_registry(source)
    except RegistryError as e:
        print(f"Registry error: {e}", file=sys.stderr)
        return 1

    renderer = None if args.no_code else create_default_renderer()
    try:
        df = build_manifest(registry, args.page_url, renderer=renderer, verify_param=config.verify_param())
    except ArtifactError as e:
        print(f"Cannot hash artifact: {e}", file=sys.stderr)
        return 1
    write_manifest(df, args.out)
    print(f"Wrote {len(df)} artifacts to {args.out}")
    return 0
