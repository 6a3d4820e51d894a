"""
Load config from config.yaml with optional env overrides.
Single source of truth for registry location, code endpoint, URL mapping, and page selectors.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Tuple

import yaml

# Defaults if no YAML or env
_DEFAULTS = {
    "registry": {
        "source": "../data/registry.json",
        "timeout_s": 15.0,
    },
    "code": {
        "endpoint": "https://api.qrserver.com/v1/create-qr-code/",
        "size": 256,
        "container_id": "qr-code",
    },
    "categories": {
        "FW-ARC-": "lighters",
    },
    "filters": {
        "type_param": "filter",
        "value_param": "value",
        "controls": {
            "category": "category-filter",
            "era": "era-filter",
            "material": "material-filter",
            "condition": "condition-filter",
        },
    },
    "selectors": {
        "artifact_id": ".artifact-id",
        "header": ".header",
    },
    "verify_param": "verify",
}


def _config_yaml_path() -> Path:
    """Config.yaml lives at repo root (parent of package dir) unless FORT_ARCHIVE_CONFIG is set."""
    override = os.environ.get("FORT_ARCHIVE_CONFIG")
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / "config.yaml"


def _load_yaml() -> dict:
    config_path = _config_yaml_path()
    if not config_path.exists():
        return {}
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _env_overrides() -> dict:
    overrides: dict = {}
    source = os.environ.get("FORT_ARCHIVE_REGISTRY")
    if source:
        overrides.setdefault("registry", {})["source"] = source
    endpoint = os.environ.get("FORT_ARCHIVE_CODE_ENDPOINT")
    if endpoint:
        overrides.setdefault("code", {})["endpoint"] = endpoint
    return overrides


def get_config() -> dict:
    """Return merged config: defaults <- config.yaml <- env."""
    merged = _deep_merge(_DEFAULTS, _load_yaml())
    merged = _deep_merge(merged, _env_overrides())
    return merged


# Convenience accessors
def registry_source() -> str:
    return str(get_config()["registry"]["source"])


def http_timeout_s() -> float:
    return float(get_config()["registry"]["timeout_s"])


def code_endpoint() -> str:
    return str(get_config()["code"]["endpoint"])


def code_size() -> int:
    return int(get_config()["code"]["size"])


def code_container_id() -> str:
    return str(get_config()["code"]["container_id"])


def artifact_categories() -> Dict[str, str]:
    """ID prefix -> category directory, e.g. {'FW-ARC-': 'lighters'}."""
    return {str(k): str(v) for k, v in (get_config().get("categories") or {}).items()}


def filter_params() -> Tuple[str, str]:
    """(type_param, value_param) query parameter names."""
    f = get_config()["filters"]
    return str(f["type_param"]), str(f["value_param"])


def filter_controls() -> Dict[str, str]:
    """Filter category name -> control element id."""
    return {str(k): str(v) for k, v in (get_config()["filters"].get("controls") or {}).items()}


def selectors() -> Dict[str, str]:
    return dict(get_config()["selectors"])


def verify_param() -> str:
    return str(get_config()["verify_param"])
