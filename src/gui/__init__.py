"""StoryDesk GUI public API.

Curated, intentionally small surface for callers (CLI, host window code,
tests). Avoid side-effect heavy imports here (no implicit QApplication creation).
"""

from __future__ import annotations
