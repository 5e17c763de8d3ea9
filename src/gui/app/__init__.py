"""Application layer for preference loading, menus and bootstrap.

Public exports include the app prefs store, the menu template builder and the
bootstrap entry point. The PyQt6 menu adapter lives in ``gui.app.qt_menu`` and
is not imported here.
"""

from .app_prefs import (  # noqa: F401
    AppPrefName,
    AppPrefs,
    AppPrefsError,
    AppPrefsNotLoadedError,
)
from .bootstrap import AppContext, configure_logging, create_app  # noqa: F401
from .menu_bar import (  # noqa: F401
    MenuActions,
    MenuItem,
    build_menu_template,
    init_menu_bar,
    make_menu_actions,
)

__all__ = [
    # App prefs
    "AppPrefName",
    "AppPrefs",
    "AppPrefsError",
    "AppPrefsNotLoadedError",
    # Bootstrap
    "AppContext",
    "configure_logging",
    "create_app",
    # Menu
    "MenuActions",
    "MenuItem",
    "build_menu_template",
    "init_menu_bar",
    "make_menu_actions",
]
