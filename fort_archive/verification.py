"""
Artifact hash verification against the registry.

The outcome is a tagged result rather than a bare boolean so callers can tell
a tampered record (MISMATCH) from an unknown identifier (NOT_FOUND) or an
unreachable registry (UNAVAILABLE). verify_artifact_hash() keeps the collapsed
boolean for page code that only needs pass/fail.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from .core.errors import ArtifactError, RegistryError
from .core.hashing import compute_artifact_hash
from .registry import Registry, load_registry

logger = logging.getLogger(__name__)


class VerificationStatus(enum.Enum):
    """Outcome of comparing a supplied hash with the registry."""

    MATCH = "MATCH"
    MISMATCH = "MISMATCH"
    NOT_FOUND = "NOT_FOUND"
    UNAVAILABLE = "UNAVAILABLE"


@dataclass(frozen=True)
class VerificationResult:
    """Immutable verification outcome for one artifact."""

    artifact_id: str
    status: VerificationStatus
    supplied_hash: str
    computed_hash: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def is_verified(self) -> bool:
        return self.status == VerificationStatus.MATCH


def verify_against_registry(
    registry: Registry, artifact_id: str, supplied_hash: str
) -> VerificationResult:
    """Look up artifact_id, recompute its hash, and compare exactly with supplied_hash."""
    record = registry.find(artifact_id)
    if record is None:
        logger.error("Artifact not found in registry: %s", artifact_id)
        return VerificationResult(
            artifact_id=artifact_id,
            status=VerificationStatus.NOT_FOUND,
            supplied_hash=supplied_hash,
        )

    try:
        computed = compute_artifact_hash(record)
    except ArtifactError as e:
        logger.error("Error hashing artifact %s: %s", artifact_id, e)
        return VerificationResult(
            artifact_id=artifact_id,
            status=VerificationStatus.UNAVAILABLE,
            supplied_hash=supplied_hash,
            error_message=str(e),
        )

    status = VerificationStatus.MATCH if computed == supplied_hash else VerificationStatus.MISMATCH
    if status is VerificationStatus.MISMATCH:
        logger.warning("Hash mismatch for %s: supplied=%s computed=%s", artifact_id, supplied_hash, computed)
    return VerificationResult(
        artifact_id=artifact_id,
        status=status,
        supplied_hash=supplied_hash,
        computed_hash=computed,
    )


def verify_artifact(
    artifact_id: str,
    supplied_hash: str,
    source: Optional[str] = None,
    timeout_s: Optional[float] = None,
) -> VerificationResult:
    """
    Fetch the registry and verify one artifact.

    Registry failures (network, missing file, malformed JSON) are logged and
    reported as UNAVAILABLE; this function does not raise for them.
    """
    try:
        registry = load_registry(source, timeout_s=timeout_s)
    except RegistryError as e:
        logger.error("Error verifying hash: %s", e)
        return VerificationResult(
            artifact_id=artifact_id,
            status=VerificationStatus.UNAVAILABLE,
            supplied_hash=supplied_hash,
            error_message=str(e)[:500],
        )
    return verify_against_registry(registry, artifact_id, supplied_hash)


def verify_artifact_hash(
    artifact_id: str,
    supplied_hash: str,
    source: Optional[str] = None,
    timeout_s: Optional[float] = None,
) -> bool:
    """True only when the registry record's hash equals supplied_hash."""
    return verify_artifact(artifact_id, supplied_hash, source, timeout_s).is_verified
