"""
Output file I/O for manifests, processed pages, and downloaded code images.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd


def ensure_dir(path: str | Path) -> None:
    """Create directory and parents if they do not exist."""
    Path(path).mkdir(parents=True, exist_ok=True)


def write_df_csv(df: pd.DataFrame, path: str | Path) -> None:
    """Write DataFrame to CSV with UTF-8 encoding."""
    path = Path(path)
    ensure_dir(path.parent)
    df.to_csv(path, index=False, encoding="utf-8")


def write_text(text: str, path: str | Path) -> None:
    """Write text to file (UTF-8)."""
    path = Path(path)
    ensure_dir(path.parent)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def write_bytes(data: bytes, path: str | Path) -> None:
    path = Path(path)
    ensure_dir(path.parent)
    with open(path, "wb") as f:
        f.write(data)
