"""
URL helpers: artifact page URLs, query parameters, and filter propagation links.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import parse_qs, parse_qsl, urlencode, urlsplit, urlunsplit


@dataclass(frozen=True)
class FilterSelection:
    """A filter category and the value to select in its control."""

    filter_type: str
    value: str


def query_param(url: str, name: str) -> Optional[str]:
    """First value of a query parameter, or None if absent (URLSearchParams.get semantics)."""
    values = parse_qs(urlsplit(url).query, keep_blank_values=True).get(name)
    return values[0] if values else None


def page_base_url(page_url: str) -> str:
    """Origin plus the page path with its last segment removed."""
    parts = urlsplit(page_url)
    path = parts.path
    cut = path.rfind("/")
    if cut >= 0:
        path = path[:cut]
    return urlunsplit((parts.scheme, parts.netloc, path, "", ""))


def artifact_url(
    artifact_id: str,
    page_url: str,
    categories: Optional[Dict[str, str]] = None,
) -> str:
    """
    Full URL of an artifact's page, relative to the directory of page_url.

    IDs matching a configured prefix map to {base}/{category}/{id lowercased}.html;
    anything else falls back to the base URL.
    """
    if categories is None:
        from . import config

        categories = config.artifact_categories()
    base = page_base_url(page_url)
    for prefix, category in categories.items():
        if artifact_id.startswith(prefix):
            return f"{base}/{category}/{artifact_id.lower()}.html"
    return base


def with_query_params(url: str, params: Dict[str, str]) -> str:
    """Set params on url, replacing existing values and keeping other parameters in order."""
    parts = urlsplit(url)
    pairs = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k not in params]
    pairs.extend(params.items())
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(pairs), parts.fragment))


def _param_names(type_param: Optional[str], value_param: Optional[str]) -> tuple[str, str]:
    if type_param is None or value_param is None:
        from . import config

        default_type, default_value = config.filter_params()
        type_param = type_param or default_type
        value_param = value_param or default_value
    return type_param, value_param


def build_filter_link(
    target_url: str,
    filter_type: str,
    value: str,
    *,
    type_param: Optional[str] = None,
    value_param: Optional[str] = None,
) -> str:
    """Link to target_url that carries a filter selection in its query string."""
    tp, vp = _param_names(type_param, value_param)
    return with_query_params(target_url, {tp: filter_type, vp: value})


def parse_filter(
    url: str,
    *,
    type_param: Optional[str] = None,
    value_param: Optional[str] = None,
) -> Optional[FilterSelection]:
    """Decode a filter selection from url; None unless both parameters are non-empty."""
    tp, vp = _param_names(type_param, value_param)
    filter_type = query_param(url, tp)
    value = query_param(url, vp)
    if not filter_type or not value:
        return None
    return FilterSelection(filter_type=filter_type, value=value)


def verify_link(url: str, artifact_hash: str, param: str = "verify") -> str:
    """Artifact page link carrying the hash to check on load."""
    return with_query_params(url, {param: artifact_hash})
