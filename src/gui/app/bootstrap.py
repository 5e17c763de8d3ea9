"""Application bootstrap utilities for the StoryDesk shell.

Responsibilities:
 - Logging setup and the in-process log buffer used by the debug console
 - Resolving app prefs (command-line arguments over the prefs file)
 - Applying the hardware acceleration pref before QApplication creation
 - Removing stale scratch files
 - Optional headless bootstrap (for tests / environments without PyQt6)

PyQt6 is optional at import time so unit tests can run in environments
without a GUI.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence

from config import settings
from core.json_file import JsonFileStore
from gui.services.logging_service import LoggingService

from .app_prefs import AppPrefName, AppPrefs
from .hardware_acceleration import apply_hardware_acceleration_pref
from .pref_args import parse_pref_args
from .scratch_files import cleanup_scratch_files

try:  # Lazy / optional Qt import
    from PyQt6.QtWidgets import QApplication  # type: ignore

    _QT_AVAILABLE = True
except Exception:  # noqa: BLE001
    QApplication = None  # type: ignore
    _QT_AVAILABLE = False

_logger = logging.getLogger(__name__)

__all__ = ["AppContext", "configure_logging", "create_app"]


@dataclass
class AppContext:
    """Container with references created during bootstrap.

    Attributes
    ----------
    prefs: Loaded app prefs; pass this to anything that reads or writes prefs.
    logging_service: Ring buffer of recent log records for the debug console.
    qt_app: The underlying QApplication instance (None if headless or Qt missing)
    headless: Whether headless bootstrap was used
    metadata: Free-form dict for diagnostics
    """

    prefs: AppPrefs
    logging_service: LoggingService
    qt_app: Optional[Any]
    headless: bool
    metadata: dict[str, Any] = field(default_factory=dict)


_STDERR_HANDLER: logging.Handler | None = None


def configure_logging(level: str | int | None = None) -> logging.Handler:
    """Send log records at *level* and above to stderr.

    Sets the root logger level too; INFO records are dropped before reaching
    any handler while the root stays at its WARNING default. Calling again
    replaces the handler installed by the previous call.
    """
    global _STDERR_HANDLER
    level = level or settings.LOG_LEVEL
    root = logging.getLogger()
    if _STDERR_HANDLER is not None:
        root.removeHandler(_STDERR_HANDLER)
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    _STDERR_HANDLER = handler
    return handler


async def create_app(
    argv: Sequence[str] | None = None,
    *,
    prefs_dir: str | Path | None = None,
    headless: bool | None = None,
    cleanup_scratch: bool = True,
) -> AppContext:
    """Create and initialize the application context.

    Parameters
    ----------
    argv: Command-line arguments (default ``sys.argv[1:]``) scanned for pref overrides.
    prefs_dir: Directory holding ``app-prefs.json`` (default ``settings.PREFS_DIR``).
    headless: Force headless (no QApplication). If None, inferred by Qt availability.
    cleanup_scratch: Remove scratch files older than the configured age.
    """
    if headless is None:
        headless = not _QT_AVAILABLE

    logging_service = LoggingService()
    logging_service.attach()

    file_store = JsonFileStore(prefs_dir)
    args = parse_pref_args((name.value for name in AppPrefName), argv)
    prefs = AppPrefs(file_store, args)
    await prefs.load()

    if cleanup_scratch:
        try:
            cleanup_scratch_files(prefs)
        except OSError as e:
            _logger.warning("Scratch file cleanup failed: %s", e)

    qt_app = None
    if not headless and _QT_AVAILABLE:
        apply_hardware_acceleration_pref(prefs)
        qt_app = QApplication.instance() or QApplication(sys.argv[:1])  # minimal argv

    return AppContext(
        prefs=prefs,
        logging_service=logging_service,
        qt_app=qt_app,
        headless=headless,
        metadata={
            "qt_available": _QT_AVAILABLE,
            "prefs_path": str(file_store.path_for(prefs.filename)),
        },
    )
