"""
Remote symbol renderer.

Uses a public QR image endpoint (no authentication required):
  GET https://api.qrserver.com/v1/create-qr-code/?size={W}x{H}&data={target}
"""
from __future__ import annotations

import logging
from urllib.parse import urlencode

import requests

from ..core.errors import SymbolRenderError
from .base import SymbolImage

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.qrserver.com/v1/create-qr-code/"
DEFAULT_SIZE = 256
HTTP_TIMEOUT_S = 15.0


class RemoteSymbolRenderer:
    """Build image URLs against a remote encoding endpoint; optionally download them."""

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        size: int = DEFAULT_SIZE,
        timeout_s: float = HTTP_TIMEOUT_S,
    ) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        self._endpoint = endpoint
        self._size = size
        self._timeout_s = timeout_s

    @property
    def renderer_name(self) -> str:
        return "remote"

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def image_url(self, target: str) -> str:
        if not target:
            raise SymbolRenderError("Cannot render a code for an empty target")
        qs = urlencode({"size": f"{self._size}x{self._size}", "data": target})
        sep = "&" if "?" in self._endpoint else "?"
        return f"{self._endpoint}{sep}{qs}"

    def render(self, target: str) -> SymbolImage:
        return SymbolImage(
            src=self.image_url(target),
            width=self._size,
            height=self._size,
            alt=f"QR code for {target}",
            renderer_name=self.renderer_name,
        )

    def fetch(self, target: str) -> bytes:
        """Download the encoded image. Raises SymbolRenderError on any HTTP failure."""
        url = self.image_url(target)
        try:
            resp = requests.get(url, timeout=self._timeout_s)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise SymbolRenderError(f"Code image fetch failed for {target}: {e}") from e
        content_type = resp.headers.get("Content-Type", "")
        if content_type and not content_type.startswith("image/"):
            raise SymbolRenderError(f"Endpoint returned {content_type!r}, expected an image")
        logger.debug("Fetched %d bytes of code image for %s", len(resp.content), target)
        return resp.content
