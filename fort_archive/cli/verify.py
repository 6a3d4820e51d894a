"""
Verify an artifact hash against the registry. Exit 0 only on MATCH.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from fort_archive.verification import VerificationStatus, verify_artifact

_EXIT_CODES = {
    VerificationStatus.MATCH: 0,
    VerificationStatus.MISMATCH: 1,
    VerificationStatus.NOT_FOUND: 2,
    VerificationStatus.UNAVAILABLE: 3,
}


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ap = argparse.ArgumentParser(prog="fort-archive verify", description="Check a hash against the registry.")
    ap.add_argument("artifact_id")
    ap.add_argument("hash")
    ap.add_argument("--registry", default=None, help="registry path or URL (default: from config)")
    args = ap.parse_args(argv)

    result = verify_artifact(args.artifact_id, args.hash, source=args.registry)
    print(f"{result.artifact_id}: {result.status.value}")
    if result.computed_hash and not result.is_verified:
        print(f"  expected: {result.computed_hash}")
    if result.error_message:
        print(f"  error:    {result.error_message}", file=sys.stderr)
    return _EXIT_CODES[result.status]
