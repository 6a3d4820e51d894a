"""Fake renderers and registry fixtures for tests (no live network)."""

from .registry import ARTIFACTS, LONE_SURROGATE_HASH, ZIPPO_HASH, write_raw_registry, write_registry
from .renderers import FakeSymbolRenderer, FakeSymbolRendererAlwaysFail

__all__ = [
    "ARTIFACTS",
    "LONE_SURROGATE_HASH",
    "ZIPPO_HASH",
    "write_raw_registry",
    "write_registry",
    "FakeSymbolRenderer",
    "FakeSymbolRendererAlwaysFail",
]
