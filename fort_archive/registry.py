"""
Read-only artifact registry: the flat JSON document the archive site publishes.

Expected shape:
    {"artifacts": [{"id": "FW-ARC-001", "name": "...", ...}, ...]}

A bare top-level list of records is also accepted. The registry is never
written to; it is fetched, parsed, and queried.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple
from urllib.parse import urljoin, urlparse
from urllib.request import url2pathname

import requests

from .core.errors import RegistryError

logger = logging.getLogger(__name__)

ID_FIELD = "id"


def _is_http(location: str) -> bool:
    return urlparse(location).scheme in ("http", "https")


@dataclass(frozen=True)
class Registry:
    """Immutable collection of artifact records, in registry order."""

    records: Tuple[Dict[str, Any], ...]
    source: str = ""

    def find(self, artifact_id: str) -> Optional[Dict[str, Any]]:
        """First record whose id equals artifact_id, or None."""
        for rec in self.records:
            if rec.get(ID_FIELD) == artifact_id:
                return rec
        return None

    @property
    def ids(self) -> List[str]:
        return [rec[ID_FIELD] for rec in self.records]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self.records)

    def __contains__(self, artifact_id: object) -> bool:
        return any(rec.get(ID_FIELD) == artifact_id for rec in self.records)


def parse_registry(payload: Any, source: str = "") -> Registry:
    """
    Build a Registry from decoded JSON.

    Entries that are not objects or lack an id are skipped with a warning.
    Raises RegistryError if the payload has no artifact array.
    """
    if isinstance(payload, dict):
        items = payload.get("artifacts")
        if not isinstance(items, list):
            raise RegistryError(
                f"Registry {source or '<memory>'} has no 'artifacts' array. "
                f"Keys: {sorted(payload)}"
            )
    elif isinstance(payload, list):
        items = payload
    else:
        raise RegistryError(f"Unexpected registry type from {source or '<memory>'}: {type(payload).__name__}")

    records: List[Dict[str, Any]] = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            logger.warning("Registry entry %d is not an object; skipped", i)
            continue
        if item.get(ID_FIELD) in (None, ""):
            logger.warning("Registry entry %d has no %r; skipped", i, ID_FIELD)
            continue
        records.append(item)
    return Registry(records=tuple(records), source=source)


def _read_http(url: str, timeout_s: float) -> Any:
    try:
        resp = requests.get(url, timeout=timeout_s)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise RegistryError(f"Registry fetch failed for {url}: {e}") from e
    try:
        return resp.json()
    except ValueError as e:
        raise RegistryError(f"Registry at {url} is not valid JSON: {e}") from e


def _read_file(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise RegistryError(f"Registry file unreadable: {path}: {e}") from e
    except ValueError as e:
        raise RegistryError(f"Registry file {path} is not valid JSON: {e}") from e


def load_registry(source: Optional[str] = None, timeout_s: Optional[float] = None) -> Registry:
    """
    Load the registry from a filesystem path or an http(s) URL.

    Defaults come from config (registry.source, registry.timeout_s).
    Raises RegistryError on any fetch, decode, or shape failure.
    """
    if source is None or timeout_s is None:
        from . import config

        source = source if source is not None else config.registry_source()
        timeout_s = timeout_s if timeout_s is not None else config.http_timeout_s()

    if _is_http(source):
        payload = _read_http(source, timeout_s)
    else:
        payload = _read_file(Path(source))
    registry = parse_registry(payload, source=source)
    logger.debug("Loaded %d artifacts from %s", len(registry), source)
    return registry


def resolve_registry_source(page_url: Optional[str], source: str) -> str:
    """
    Resolve a relative registry location against the page URL, as a browser fetch would.

    http(s) pages resolve with urljoin; file:// pages resolve against the page's
    directory. Absolute URLs and paths, or a missing page URL, return source unchanged.
    """
    if _is_http(source) or not page_url:
        return source
    if _is_http(page_url):
        return urljoin(page_url, source)
    parsed = urlparse(page_url)
    if parsed.scheme == "file" and not Path(source).is_absolute():
        return str(Path(url2pathname(parsed.path)).parent / source)
    return source
