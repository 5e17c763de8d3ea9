"""Async JSON document storage keyed by logical file name.

Each document lives in a single file under a base directory. Reads and writes
run in a worker thread (``asyncio.to_thread``) so callers on the event loop
only suspend at the disk boundary.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Mapping

from config import settings
from . import filesystem

__all__ = ["JsonFileError", "JsonFileStore"]


class JsonFileError(RuntimeError):
    """Raised when a stored document is not a valid JSON object."""


class JsonFileStore:
    """Reads and writes whole JSON documents in ``base_dir``."""

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self._base_dir = Path(base_dir) if base_dir else Path(settings.PREFS_DIR)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, name: str) -> Path:
        return self._base_dir / name

    async def load_json_file(self, name: str) -> Dict[str, Any]:
        """Load the document stored under *name*.

        Raises FileNotFoundError if it was never saved and JsonFileError if the
        content is not a JSON object.
        """
        path = self.path_for(name)
        text = await asyncio.to_thread(filesystem.read_text, path)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise JsonFileError(f"{path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise JsonFileError(f"{path} does not contain a JSON object")
        return data

    async def save_json_file(self, name: str, doc: Mapping[str, Any]) -> Path:
        """Replace the document stored under *name*. Returns the path written."""
        path = self.path_for(name)
        # An unserializable value leaves the previous document intact.
        text = json.dumps(dict(doc), indent=2, ensure_ascii=False)
        await asyncio.to_thread(filesystem.write_text_atomic, path, text)
        return path
