"""Filesystem utility helpers."""

from __future__ import annotations
import os
import time
from pathlib import Path


def ensure_dir(path: str | Path) -> None:
    os.makedirs(path, exist_ok=True)


def write_text_atomic(path: str | Path, content: str, encoding: str = "utf-8") -> None:
    """Write *content* next to *path* and move it into place.

    The target is either left untouched or fully replaced; readers never see a
    partially written file.
    """
    target = Path(path)
    if target.parent != Path(""):
        ensure_dir(target.parent)
    tmp = target.with_suffix(target.suffix + ".tmp")
    with open(tmp, "w", encoding=encoding) as fh:
        fh.write(content)
    os.replace(tmp, target)


def read_text(path: str | Path, encoding: str = "utf-8") -> str:
    with open(path, "r", encoding=encoding) as fh:
        return fh.read()


def files_older_than(
    directory: str | Path, max_age_s: float, now: float | None = None
) -> list[Path]:
    """Return regular files in *directory* last modified more than *max_age_s* ago."""
    base = Path(directory)
    if not base.is_dir():
        return []
    cutoff = (now if now is not None else time.time()) - max_age_s
    stale: list[Path] = []
    for entry in sorted(base.iterdir()):
        try:
            if entry.is_file() and entry.stat().st_mtime < cutoff:
                stale.append(entry)
        except FileNotFoundError:
            # Removed between listing and stat
            continue
    return stale
