"""
Scannable-code rendering behind a SymbolRenderer protocol.

The default renderer delegates to a remote encoding endpoint; pages only see
SymbolImage values, so a local encoder can be plugged in later.
"""

from __future__ import annotations

from .base import SymbolImage, SymbolRenderer
from .defaults import create_default_renderer
from .remote import RemoteSymbolRenderer

__all__ = [
    "SymbolImage",
    "SymbolRenderer",
    "RemoteSymbolRenderer",
    "create_default_renderer",
]
