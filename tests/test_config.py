"""Tests for fort_archive.config merging: defaults <- config.yaml <- env."""
from __future__ import annotations

from fort_archive import config


def _write_yaml(tmp_path, text):
    p = tmp_path / "config.yaml"
    p.write_text(text, encoding="utf-8")
    return p


def test_defaults_without_yaml(tmp_path, monkeypatch):
    monkeypatch.setenv("FORT_ARCHIVE_CONFIG", str(tmp_path / "absent.yaml"))
    monkeypatch.delenv("FORT_ARCHIVE_REGISTRY", raising=False)
    monkeypatch.delenv("FORT_ARCHIVE_CODE_ENDPOINT", raising=False)
    assert config.registry_source() == "../data/registry.json"
    assert config.code_size() == 256
    assert config.filter_params() == ("filter", "value")
    assert config.artifact_categories() == {"FW-ARC-": "lighters"}
    assert config.selectors()["header"] == ".header"
    assert config.verify_param() == "verify"


def test_yaml_merges_nested_keys(tmp_path, monkeypatch):
    p = _write_yaml(
        tmp_path,
        "code:\n  size: 300\nfilters:\n  controls:\n    maker: maker-filter\ncategories:\n  FW-PAT-: patches\n",
    )
    monkeypatch.setenv("FORT_ARCHIVE_CONFIG", str(p))
    assert config.code_size() == 300
    assert config.code_endpoint().startswith("https://api.qrserver.com/")
    controls = config.filter_controls()
    assert controls["maker"] == "maker-filter"
    assert controls["era"] == "era-filter"
    assert config.artifact_categories() == {"FW-ARC-": "lighters", "FW-PAT-": "patches"}


def test_env_overrides_yaml(tmp_path, monkeypatch):
    p = _write_yaml(tmp_path, "registry:\n  source: from-yaml.json\n")
    monkeypatch.setenv("FORT_ARCHIVE_CONFIG", str(p))
    monkeypatch.setenv("FORT_ARCHIVE_REGISTRY", "https://cdn.example/registry.json")
    assert config.registry_source() == "https://cdn.example/registry.json"


def test_non_mapping_yaml_ignored(tmp_path, monkeypatch):
    p = _write_yaml(tmp_path, "- just\n- a list\n")
    monkeypatch.setenv("FORT_ARCHIVE_CONFIG", str(p))
    assert config.http_timeout_s() == 15.0
