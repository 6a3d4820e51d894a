"""
Registry manifest: one row per artifact with its canonical hash, page URL,
verification link, and code image source. Used to print labels whose codes
open the artifact page with ?verify=<hash>.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from .artifacts import write_df_csv
from .core.errors import ArchiveError
from .core.hashing import compute_artifact_hash
from .registry import Registry
from .symbols import SymbolRenderer
from .urls import artifact_url, verify_link

logger = logging.getLogger(__name__)

MANIFEST_COLUMNS = ["id", "hash", "url", "verify_url", "code_src"]


def build_manifest(
    registry: Registry,
    page_url: str,
    renderer: Optional[SymbolRenderer] = None,
    categories: Optional[Dict[str, str]] = None,
    verify_param: str = "verify",
) -> pd.DataFrame:
    """
    Hash every registry record and derive its links.

    code_src is empty when no renderer is given or it fails for that artifact.
    """
    rows: List[Dict[str, str]] = []
    for record in registry:
        artifact_id = str(record["id"])
        digest = compute_artifact_hash(record)
        url = artifact_url(artifact_id, page_url, categories)
        link = verify_link(url, digest, verify_param)
        code_src = ""
        if renderer is not None:
            try:
                code_src = renderer.render(link).src
            except ArchiveError as e:
                logger.warning("No code for %s: %s", artifact_id, e)
        rows.append(
            {"id": artifact_id, "hash": digest, "url": url, "verify_url": link, "code_src": code_src}
        )
    return pd.DataFrame(rows, columns=MANIFEST_COLUMNS)


def write_manifest(df: pd.DataFrame, path: str | Path) -> None:
    write_df_csv(df, path)
