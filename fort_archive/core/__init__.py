"""
Stable facade: hashing primitives and shared errors. No registry, page, or cli.
Do not add exports without updating __all__.
"""

from __future__ import annotations

from .errors import ArchiveError, ArtifactError, RegistryError, SymbolRenderError
from .hashing import canonical_json, compute_artifact_hash, compute_file_sha256

# Do not add exports without updating __all__.
__all__ = [
    "ArchiveError",
    "ArtifactError",
    "RegistryError",
    "SymbolRenderError",
    "canonical_json",
    "compute_artifact_hash",
    "compute_file_sha256",
]
