"""App-specific preference store.

App prefs hold settings tied to the desktop build rather than to stories,
e.g. where scratch files are written and how long they are kept. Values are
resolved once by :meth:`AppPrefs.load` with this precedence:

1. Values set later through :meth:`AppPrefs.set`
2. Command-line arguments (``--scratchFolderPath /tmp/x``)
3. The ``app-prefs.json`` document in the prefs directory

If no source provides a value the pref is ``None``.

Reading or writing before ``load()`` has completed raises
``AppPrefsNotLoadedError`` instead of returning a default. A missing or
corrupt prefs file only logs a warning at load time, while a failed write
raises to whoever called ``set()``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from config import settings
from core.json_file import JsonFileStore

from .pref_args import parse_pref_args

_logger = logging.getLogger(__name__)

__all__ = [
    "AppPrefName",
    "AppPrefs",
    "AppPrefsError",
    "AppPrefsNotLoadedError",
]


class AppPrefName(str, Enum):
    """Recognized app preference names. Add a member to support a new pref."""

    SCRATCH_FOLDER_PATH = "scratchFolderPath"
    SCRATCH_FILE_CLEANUP_AGE = "scratchFileCleanupAge"
    DISABLE_HARDWARE_ACCELERATION = "disableHardwareAcceleration"


PrefKey = Union[AppPrefName, str]


class AppPrefsError(RuntimeError):
    """Base class for app preference errors."""


class AppPrefsNotLoadedError(AppPrefsError):
    """Raised when prefs are read or written before load() completed."""


def _coerce_name(name: PrefKey) -> AppPrefName:
    try:
        return AppPrefName(name)
    except ValueError:
        raise ValueError(f"Unknown app pref: {name!r}") from None


class AppPrefs:
    """Resolved app preferences backed by a JSON file.

    Parameters
    ----------
    file_store: Store used to read and persist the prefs document.
    args: Parsed command-line values keyed by pref name. When None, the
        process arguments are parsed at load time.
    filename: Logical name of the prefs document inside ``file_store``.
    """

    def __init__(
        self,
        file_store: JsonFileStore,
        args: Optional[Mapping[str, Any]] = None,
        *,
        filename: str = settings.APP_PREFS_FILENAME,
    ) -> None:
        self._file_store = file_store
        self._args = args
        self._filename = filename
        self._prefs: Dict[AppPrefName, Any] = {}
        self._loaded = False
        self._save_lock = asyncio.Lock()

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def filename(self) -> str:
        return self._filename

    async def load(self) -> None:
        """Resolve every pref from arguments and the prefs file.

        Must be awaited before get() or set(). Calling it again re-runs
        resolution and discards values set in the meantime.
        """
        args = self._args
        if args is None:
            args = parse_pref_args(name.value for name in AppPrefName)
        file_prefs: Mapping[str, Any] = {}

        try:
            file_prefs = await self._file_store.load_json_file(self._filename)
        except Exception as e:  # noqa: BLE001 - non-fatal
            _logger.warning("Couldn't read app prefs file; continuing: %s", e)

        for pref_name in AppPrefName:
            value = args.get(pref_name.value)
            if value is None:
                value = file_prefs.get(pref_name.value)
            self._prefs[pref_name] = value
            _logger.info(
                "App pref %s set to %s", pref_name.value, json.dumps(value, default=str)
            )

        self._loaded = True

    def get(self, name: PrefKey) -> Any:
        """Return the current value of a pref, or None if no source set it."""
        if not self._loaded:
            raise AppPrefsNotLoadedError("Tried to get an app pref before they were loaded")
        return self._prefs.get(_coerce_name(name))

    async def set(self, name: PrefKey, value: Any) -> None:
        """Set a pref and save all prefs to the prefs file.

        If saving fails the error propagates and the new value stays in memory
        only; it is not retried.
        """
        if not self._loaded:
            raise AppPrefsNotLoadedError("Tried to set an app pref before they were loaded")
        self._prefs[_coerce_name(name)] = value
        async with self._save_lock:
            # Snapshot under the lock: the last save to run carries every
            # value set before it.
            await self._file_store.save_json_file(self._filename, self.as_dict())

    def as_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready copy of all prefs keyed by their string names."""
        if not self._loaded:
            raise AppPrefsNotLoadedError("Tried to read app prefs before they were loaded")
        return {name.value: value for name, value in self._prefs.items()}

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"AppPrefs(filename={self._filename!r}, loaded={self._loaded})"
