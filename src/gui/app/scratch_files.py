"""Scratch folder location and cleanup, driven by app prefs."""

from __future__ import annotations

import logging
import os
import tempfile
from numbers import Real
from pathlib import Path
from typing import List, Optional

from config import settings
from core import filesystem

from .app_prefs import AppPrefName, AppPrefs

_logger = logging.getLogger(__name__)

__all__ = ["scratch_folder_path", "scratch_cleanup_age_days", "cleanup_scratch_files"]

_SECONDS_PER_DAY = 24 * 60 * 60


def scratch_folder_path(prefs: AppPrefs) -> Path:
    value = prefs.get(AppPrefName.SCRATCH_FOLDER_PATH)
    if isinstance(value, str) and value:
        return Path(value).expanduser()
    return Path(tempfile.gettempdir()) / settings.SCRATCH_DIRNAME


def scratch_cleanup_age_days(prefs: AppPrefs) -> float:
    """Return the cleanup age in days, falling back to the default for bad values."""
    value = prefs.get(AppPrefName.SCRATCH_FILE_CLEANUP_AGE)
    if value is None:
        return float(settings.DEFAULT_SCRATCH_CLEANUP_AGE_DAYS)
    if isinstance(value, bool) or not isinstance(value, Real) or value < 0:
        _logger.warning(
            "Ignoring invalid %s %r; using %s days",
            AppPrefName.SCRATCH_FILE_CLEANUP_AGE.value,
            value,
            settings.DEFAULT_SCRATCH_CLEANUP_AGE_DAYS,
        )
        return float(settings.DEFAULT_SCRATCH_CLEANUP_AGE_DAYS)
    return float(value)


def cleanup_scratch_files(prefs: AppPrefs, now: Optional[float] = None) -> List[Path]:
    """Delete scratch files older than the cleanup age. Returns removed paths."""
    folder = scratch_folder_path(prefs)
    max_age_s = scratch_cleanup_age_days(prefs) * _SECONDS_PER_DAY
    removed: List[Path] = []
    for path in filesystem.files_older_than(folder, max_age_s, now=now):
        try:
            os.remove(path)
        except OSError as e:
            _logger.warning("Couldn't delete scratch file %s: %s", path, e)
            continue
        removed.append(path)
    if removed:
        _logger.info("Removed %d scratch file(s) from %s", len(removed), folder)
    return removed
