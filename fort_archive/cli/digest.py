"""
Print the canonical hash of an artifact record read from a JSON file or stdin.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from fort_archive.core.errors import ArtifactError
from fort_archive.core.hashing import canonical_json, compute_artifact_hash


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ap = argparse.ArgumentParser(prog="fort-archive hash", description="Canonical SHA-256 of a JSON record.")
    ap.add_argument("record", help="JSON file with one artifact object, or - for stdin")
    ap.add_argument("--show-canonical", action="store_true", help="also print the canonical JSON")
    args = ap.parse_args(argv)

    try:
        if args.record == "-":
            record = json.load(sys.stdin)
        else:
            with open(args.record, encoding="utf-8") as f:
                record = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Cannot read record: {e}", file=sys.stderr)
        return 1

    try:
        digest = compute_artifact_hash(record)
    except ArtifactError as e:
        print(f"Cannot hash record: {e}", file=sys.stderr)
        return 1
    if args.show_canonical:
        print(canonical_json(record))
    print(digest)
    return 0
