"""
Identity and verification tools for the Fort Wolters Archive static site.
Top-level public API surface. Does not import cli.
"""

from __future__ import annotations

from . import config, core, symbols
from ._version import __version__
from .core import ArchiveError, RegistryError, compute_artifact_hash
from .page import Page, load_page
from .registry import Registry, load_registry
from .ui import apply_filter_from_url, init_verification_ui, on_page_load, render_code
from .urls import FilterSelection, artifact_url, build_filter_link, parse_filter
from .verification import (
    VerificationResult,
    VerificationStatus,
    verify_artifact,
    verify_artifact_hash,
)

# Do not add exports without updating __all__.
__all__ = [
    "__version__",
    "config",
    "core",
    "symbols",
    "ArchiveError",
    "RegistryError",
    "compute_artifact_hash",
    "Page",
    "load_page",
    "Registry",
    "load_registry",
    "render_code",
    "init_verification_ui",
    "apply_filter_from_url",
    "on_page_load",
    "FilterSelection",
    "artifact_url",
    "build_filter_link",
    "parse_filter",
    "VerificationResult",
    "VerificationStatus",
    "verify_artifact",
    "verify_artifact_hash",
]
