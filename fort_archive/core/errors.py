"""
Shared exception types for fort_archive.
Stable surface; extend only.
"""

from __future__ import annotations


class ArchiveError(Exception):
    """Base exception for fort_archive; catch this for any package-raised error."""

    pass


class ArtifactError(ArchiveError):
    """Artifact record is not hashable (not a mapping, or not JSON-serializable)."""

    pass


class RegistryError(ArchiveError):
    """Registry could not be fetched, read, or parsed."""

    pass


class SymbolRenderError(ArchiveError):
    """Symbol image could not be produced or downloaded."""

    pass


__all__ = ["ArchiveError", "ArtifactError", "RegistryError", "SymbolRenderError"]
