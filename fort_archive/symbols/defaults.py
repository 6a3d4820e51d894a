"""
Default symbol renderer built from config.yaml settings.
"""
from __future__ import annotations

from .remote import RemoteSymbolRenderer


def create_default_renderer() -> RemoteSymbolRenderer:
    """Remote renderer pointed at code.endpoint with code.size pixels."""
    from fort_archive import config

    return RemoteSymbolRenderer(
        endpoint=config.code_endpoint(),
        size=config.code_size(),
        timeout_s=config.http_timeout_s(),
    )
