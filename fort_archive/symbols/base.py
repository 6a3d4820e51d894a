"""
Symbol renderer interface and image contract.

Pages never encode scannable symbols themselves; they ask a SymbolRenderer for
an image to place in the code container. The built-in renderer delegates to a
remote encoding endpoint, but any object satisfying the protocol can be
substituted without touching call sites.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class SymbolImage:
    """Immutable description of an image to insert into a page."""

    src: str
    width: int
    height: int
    alt: str
    renderer_name: str


@runtime_checkable
class SymbolRenderer(Protocol):
    """Protocol for scannable-code image sources."""

    @property
    def renderer_name(self) -> str: ...

    def render(self, target: str) -> SymbolImage:
        """Return an image encoding target (usually an artifact page URL)."""
        ...
