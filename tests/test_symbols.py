"""Tests for the symbol renderer protocol and the remote endpoint renderer."""
from __future__ import annotations

from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from fort_archive.core.errors import SymbolRenderError
from fort_archive.symbols import RemoteSymbolRenderer, SymbolRenderer, create_default_renderer
from tests.fakes import FakeSymbolRenderer


def test_renderers_satisfy_protocol():
    assert isinstance(RemoteSymbolRenderer(), SymbolRenderer)
    assert isinstance(FakeSymbolRenderer(), SymbolRenderer)


def test_render_builds_endpoint_url_without_network():
    r = RemoteSymbolRenderer(endpoint="https://codes.example/qr", size=200)
    target = "https://archive.example/lighters/fw-arc-001.html?verify=abc"
    with patch("fort_archive.symbols.remote.requests.get") as mock_get:
        image = r.render(target)
        mock_get.assert_not_called()
    parts = urlsplit(image.src)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://codes.example/qr"
    qs = parse_qs(parts.query)
    assert qs["data"] == [target]
    assert qs["size"] == ["200x200"]
    assert (image.width, image.height) == (200, 200)
    assert image.renderer_name == "remote"


def test_endpoint_with_existing_query():
    r = RemoteSymbolRenderer(endpoint="https://codes.example/qr?format=png")
    assert "?format=png&size=" in r.image_url("x")


def test_empty_target_rejected():
    with pytest.raises(SymbolRenderError):
        RemoteSymbolRenderer().render("")


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        RemoteSymbolRenderer(size=0)


@patch("fort_archive.symbols.remote.requests.get")
def test_fetch_returns_image_bytes(mock_get):
    mock_resp = MagicMock()
    mock_resp.status_code = 200
    mock_resp.headers = {"Content-Type": "image/png"}
    mock_resp.content = b"\x89PNG..."
    mock_resp.raise_for_status = MagicMock()
    mock_get.return_value = mock_resp

    r = RemoteSymbolRenderer(timeout_s=3.0)
    assert r.fetch("https://a.example/") == b"\x89PNG..."
    assert mock_get.call_args.kwargs["timeout"] == 3.0


@patch("fort_archive.symbols.remote.requests.get")
def test_fetch_http_error(mock_get):
    mock_get.side_effect = requests.ConnectionError("down")
    with pytest.raises(SymbolRenderError):
        RemoteSymbolRenderer().fetch("https://a.example/")


@patch("fort_archive.symbols.remote.requests.get")
def test_fetch_rejects_non_image(mock_get):
    mock_resp = MagicMock()
    mock_resp.headers = {"Content-Type": "text/html"}
    mock_resp.raise_for_status = MagicMock()
    mock_get.return_value = mock_resp
    with pytest.raises(SymbolRenderError, match="expected an image"):
        RemoteSymbolRenderer().fetch("https://a.example/")


def test_default_renderer_uses_config(monkeypatch):
    monkeypatch.setenv("FORT_ARCHIVE_CODE_ENDPOINT", "https://codes.example/gen")
    r = create_default_renderer()
    assert r.endpoint == "https://codes.example/gen"
