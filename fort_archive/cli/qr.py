"""
Scannable code for a URL: print the image source, or download it with --out.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from fort_archive.artifacts import write_bytes
from fort_archive.core.errors import SymbolRenderError
from fort_archive.symbols import create_default_renderer


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ap = argparse.ArgumentParser(prog="fort-archive code", description="Scannable code image for a URL.")
    ap.add_argument("url")
    ap.add_argument("--out", default=None, help="write the image to this file instead of printing its URL")
    args = ap.parse_args(argv)

    renderer = create_default_renderer()
    try:
        if args.out:
            write_bytes(renderer.fetch(args.url), args.out)
            print(f"Wrote {args.out}")
        else:
            print(renderer.render(args.url).src)
    except SymbolRenderError as e:
        print(f"Code generation failed: {e}", file=sys.stderr)
        return 1
    return 0
