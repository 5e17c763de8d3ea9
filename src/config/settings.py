"""Global configuration and constants for the StoryDesk preference layer."""

from __future__ import annotations

import os
from typing import Final

APP_PREFS_FILENAME: Final = "app-prefs.json"
PREFS_DIR: Final = os.environ.get(
    "STORYDESK_PREFS_DIR", os.path.join(os.path.expanduser("~"), ".storydesk")
)

APP_NAME: Final = "StoryDesk"
HELP_URL: Final = "https://twinery.org/2guide"

# Scratch files older than this are removed on startup
DEFAULT_SCRATCH_CLEANUP_AGE_DAYS: Final = 3
SCRATCH_DIRNAME: Final = "storydesk-scratch"

LOG_FORMAT: Final = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL: Final = os.environ.get("STORYDESK_LOG_LEVEL", "INFO")
