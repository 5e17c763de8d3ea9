"""Hardware acceleration toggle backed by the ``disableHardwareAcceleration`` pref.

The setting only takes effect when the QApplication is created, so toggling it
records the new value for the next launch.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .app_prefs import AppPrefName, AppPrefs

try:  # Lazy / optional Qt import
    from PyQt6.QtCore import QCoreApplication, Qt  # type: ignore

    _QT_AVAILABLE = True
except Exception:  # noqa: BLE001
    QCoreApplication = None  # type: ignore
    Qt = None  # type: ignore
    _QT_AVAILABLE = False

_logger = logging.getLogger(__name__)

__all__ = [
    "hardware_acceleration_disabled",
    "toggle_hardware_acceleration",
    "toggle_hardware_acceleration_soon",
    "apply_hardware_acceleration_pref",
]


def hardware_acceleration_disabled(prefs: AppPrefs) -> bool:
    return bool(prefs.get(AppPrefName.DISABLE_HARDWARE_ACCELERATION))


async def toggle_hardware_acceleration(prefs: AppPrefs) -> bool:
    """Flip the pref, save it, and return the new value."""
    disabled = not hardware_acceleration_disabled(prefs)
    await prefs.set(AppPrefName.DISABLE_HARDWARE_ACCELERATION, disabled)
    _logger.info(
        "Hardware acceleration will be %s after relaunch",
        "disabled" if disabled else "enabled",
    )
    return disabled


_pending: set[asyncio.Task] = set()


def _log_toggle_result(task: asyncio.Task) -> None:
    _pending.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        _logger.error(
            "Failed to save hardware acceleration pref: %s",
            exc,
            exc_info=(type(exc), exc, exc.__traceback__),
        )


def toggle_hardware_acceleration_soon(prefs: AppPrefs) -> Optional[asyncio.Task]:
    """Run the toggle from a synchronous menu callback.

    Inside a running event loop the toggle is scheduled as a task and
    returned; failures are logged when it finishes. Without a loop the toggle
    runs to completion before returning None. Save errors are logged, not
    raised, since a menu click has no caller to report them to.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None
    if loop is not None:
        task = loop.create_task(toggle_hardware_acceleration(prefs))
        _pending.add(task)
        task.add_done_callback(_log_toggle_result)
        return task
    try:
        asyncio.run(toggle_hardware_acceleration(prefs))
    except Exception:  # noqa: BLE001
        _logger.exception("Failed to save hardware acceleration pref")
    return None


def apply_hardware_acceleration_pref(prefs: AppPrefs) -> bool:
    """Request software OpenGL if the pref asks for it.

    Must run before the QApplication is created. Returns True if software
    rendering was requested.
    """
    if not hardware_acceleration_disabled(prefs):
        return False
    if not _QT_AVAILABLE:
        _logger.debug("PyQt6 unavailable; hardware acceleration pref not applied")
        return False
    QCoreApplication.setAttribute(Qt.ApplicationAttribute.AA_UseSoftwareOpenGL, True)
    _logger.info("Hardware acceleration disabled by app pref")
    return True
