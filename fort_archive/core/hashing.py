"""
Canonical hashing primitives: artifact record digest and file SHA256.

The canonical form is compact JSON with keys sorted at every level, written
the way the archive pages write it in the browser (JSON.stringify, then
SHA-256 over the UTF-8 bytes): numbers use JS Number formatting, non-ASCII
text is kept verbatim, and lone surrogates are escaped as \\uXXXX. For flat
records decoded from registry JSON the digest equals the browser's. Do not
change encoding semantics; published verification links embed these digests.
"""

from __future__ import annotations

import hashlib
import json
import math
import re
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping

from .errors import ArtifactError

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _js_number(x: float) -> str:
    """Format a float like JS Number.prototype.toString."""
    if math.isnan(x) or math.isinf(x):
        # JSON.stringify emits null for non-finite numbers
        return "null"
    if x == 0:
        return "0"
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    sign = "-" if x < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(x))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = exponent + len(digits)
    digits = digits.rstrip("0") or "0"
    k = len(digits)
    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * (-point) + digits
    e = point - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def _js_string(s: str) -> str:
    text = json.dumps(s, ensure_ascii=False)
    return _LONE_SURROGATE.sub(lambda m: "\\u%04x" % ord(m.group()), text)


def _utf16_order(key: str) -> bytes:
    # JS sorts keys by UTF-16 code units
    return key.encode("utf-16-be", "surrogatepass")


def _encode(o: Any) -> str:
    if o is None:
        return "null"
    if isinstance(o, bool):
        return "true" if o else "false"
    if isinstance(o, int):
        return str(o)
    if isinstance(o, float):
        return _js_number(o)
    if isinstance(o, str):
        return _js_string(o)
    if isinstance(o, Mapping):
        items = {str(k): v for k, v in o.items()}
        return "{" + ",".join(
            _js_string(k) + ":" + _encode(items[k]) for k in sorted(items, key=_utf16_order)
        ) + "}"
    if isinstance(o, (list, tuple)):
        return "[" + ",".join(_encode(x) for x in o) + "]"
    raise ArtifactError(f"Artifact record is not JSON-serializable: {type(o).__name__} value")


def canonical_json(record: Mapping[str, Any]) -> str:
    """Serialize a record to compact, key-sorted JSON (UTF-8 text, no ASCII escaping)."""
    if not isinstance(record, Mapping):
        raise ArtifactError(f"Artifact record must be a mapping, got {type(record).__name__}")
    try:
        return _encode(record)
    except RecursionError as e:
        raise ArtifactError("Artifact record is nested too deeply or circular") from e


def compute_artifact_hash(record: Mapping[str, Any]) -> str:
    """Return the lowercase SHA256 hex digest of the record's canonical JSON."""
    text = canonical_json(record)
    try:
        blob = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ArtifactError(f"Artifact record is not UTF-8 encodable: {e}") from e
    return hashlib.sha256(blob).hexdigest()


def compute_file_sha256(path: str | Path) -> str:
    """Return SHA256 hex digest of file. Returns empty string if file missing or unreadable."""
    path = Path(path)
    if not path.is_file():
        return ""
    try:
        h = hashlib.sha256()
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(65536), b""):
                h.update(chunk)
        return h.hexdigest()
    except OSError:
        return ""


__all__ = ["canonical_json", "compute_artifact_hash", "compute_file_sha256"]
