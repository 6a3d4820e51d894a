"""Tests for fort_archive.registry loading, parsing, and lookup."""
from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from fort_archive.core.errors import RegistryError
from fort_archive.registry import Registry, load_registry, parse_registry, resolve_registry_source
from tests.fakes import ARTIFACTS, write_registry


class TestParse:
    def test_wrapped_document(self):
        reg = parse_registry({"artifacts": ARTIFACTS}, source="mem")
        assert len(reg) == 3
        assert reg.ids == ["FW-ARC-001", "FW-ARC-002", "FW-DOC-001"]
        assert reg.source == "mem"

    def test_bare_list(self):
        reg = parse_registry(ARTIFACTS)
        assert "FW-DOC-001" in reg

    def test_missing_artifacts_key(self):
        with pytest.raises(RegistryError):
            parse_registry({"items": []})

    def test_wrong_type(self):
        with pytest.raises(RegistryError):
            parse_registry("not a registry")

    def test_bad_entries_skipped_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="fort_archive.registry"):
            reg = parse_registry({"artifacts": [ARTIFACTS[0], "junk", {"name": "no id"}, {"id": ""}]})
        assert reg.ids == ["FW-ARC-001"]
        assert len([r for r in caplog.records if "skipped" in r.getMessage()]) == 3


class TestFind:
    def test_found(self):
        reg = parse_registry(ARTIFACTS)
        assert reg.find("FW-ARC-002")["material"] == "cloth"

    def test_not_found(self):
        assert parse_registry(ARTIFACTS).find("FW-ARC-999") is None

    def test_first_duplicate_wins(self):
        reg = parse_registry([{"id": "A", "v": 1}, {"id": "A", "v": 2}])
        assert reg.find("A")["v"] == 1

    def test_empty_registry(self):
        reg = Registry(records=())
        assert len(reg) == 0
        assert reg.find("A") is None
        assert list(reg) == []


class TestLoadFile:
    def test_load_from_path(self, tmp_path):
        path = write_registry(tmp_path / "data" / "registry.json")
        reg = load_registry(str(path), timeout_s=1.0)
        assert len(reg) == 3
        assert reg.source == str(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(RegistryError, match="unreadable"):
            load_registry(str(tmp_path / "nope.json"), timeout_s=1.0)

    def test_invalid_json(self, tmp_path):
        p = tmp_path / "registry.json"
        p.write_text("{not json", encoding="utf-8")
        with pytest.raises(RegistryError, match="not valid JSON"):
            load_registry(str(p), timeout_s=1.0)

    def test_default_source_from_env(self, tmp_path, monkeypatch):
        path = write_registry(tmp_path / "registry.json")
        monkeypatch.setenv("FORT_ARCHIVE_REGISTRY", str(path))
        assert len(load_registry()) == 3


class TestLoadHttp:
    @patch("fort_archive.registry.requests.get")
    def test_http_ok(self, mock_get):
        mock_resp = MagicMock()
        mock_resp.status_code = 200
        mock_resp.json.return_value = {"artifacts": ARTIFACTS}
        mock_resp.raise_for_status = MagicMock()
        mock_get.return_value = mock_resp

        reg = load_registry("https://archive.example/data/registry.json", timeout_s=5.0)
        assert len(reg) == 3
        mock_get.assert_called_once_with("https://archive.example/data/registry.json", timeout=5.0)

    @patch("fort_archive.registry.requests.get")
    def test_http_error_status(self, mock_get):
        mock_resp = MagicMock()
        mock_resp.raise_for_status.side_effect = requests.HTTPError("404 Not Found")
        mock_get.return_value = mock_resp
        with pytest.raises(RegistryError, match="fetch failed"):
            load_registry("https://archive.example/data/registry.json", timeout_s=5.0)

    @patch("fort_archive.registry.requests.get")
    def test_network_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("unreachable")
        with pytest.raises(RegistryError):
            load_registry("http://archive.example/registry.json", timeout_s=5.0)

    @patch("fort_archive.registry.requests.get")
    def test_malformed_body(self, mock_get):
        mock_resp = MagicMock()
        mock_resp.raise_for_status = MagicMock()
        mock_resp.json.side_effect = json.JSONDecodeError("Expecting value", "", 0)
        mock_get.return_value = mock_resp
        with pytest.raises(RegistryError, match="not valid JSON"):
            load_registry("http://archive.example/registry.json", timeout_s=5.0)


class TestResolveSource:
    def test_relative_against_http_page(self):
        assert (
            resolve_registry_source("https://archive.example/site/lighters/fw-arc-001.html", "../data/registry.json")
            == "https://archive.example/site/data/registry.json"
        )

    def test_absolute_url_unchanged(self):
        src = "https://cdn.example/registry.json"
        assert resolve_registry_source("https://archive.example/a.html", src) == src

    def test_file_page(self, tmp_path):
        page = tmp_path / "lighters" / "fw-arc-001.html"
        resolved = resolve_registry_source(page.as_uri(), "../data/registry.json")
        assert resolved.endswith("registry.json")
        assert str(tmp_path / "lighters") in resolved

    def test_no_page_url(self):
        assert resolve_registry_source(None, "data/registry.json") == "data/registry.json"
