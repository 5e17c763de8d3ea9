"""Application menu template.

Builds the menu bar as plain data so it can be inspected in tests without a
display. Items with a ``role`` are standard items whose behavior comes from
the host toolkit; the rest carry a ``click`` callback. The only pref read here
is the checked state of the Disable Hardware Acceleration item.

Use ``init_menu_bar`` with an ``apply`` callback (e.g.
``gui.app.qt_menu.apply_menu_template``) to install the template.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from config import settings

from gui.services.logging_service import LoggingService

from .app_prefs import AppPrefName, AppPrefs
from .hardware_acceleration import toggle_hardware_acceleration_soon

__all__ = [
    "MenuItem",
    "MenuActions",
    "make_menu_actions",
    "build_menu_template",
    "init_menu_bar",
    "find_item",
    "has_item_with_role",
]


@dataclass
class MenuItem:
    label: Optional[str] = None
    role: Optional[str] = None
    click: Optional[Callable[[], None]] = None
    checked: Optional[bool] = None
    item_type: str = "normal"  # "normal" | "checkbox" | "separator"
    submenu: Optional[List["MenuItem"]] = None


@dataclass
class MenuActions:
    """Callbacks invoked by custom menu items."""

    choose_story_directory: Callable[[], None]
    reveal_story_directory: Callable[[], None]
    open_external: Callable[[str], None]
    open_dev_tools: Callable[[], None]
    toggle_hardware_acceleration: Callable[[], None]


def make_menu_actions(
    prefs: AppPrefs,
    log_buffer: LoggingService,
    *,
    choose_story_directory: Callable[[], None],
    reveal_story_directory: Callable[[], None],
    open_external: Callable[[str], None],
    show_debug_console: Callable[[str], None],
) -> MenuActions:
    """Wire the pref-backed and debug console actions to *prefs* and *log_buffer*.

    Show Debug Console passes the buffered log text to *show_debug_console*.
    Disable Hardware Acceleration flips and saves the pref.
    """
    return MenuActions(
        choose_story_directory=choose_story_directory,
        reveal_story_directory=reveal_story_directory,
        open_external=open_external,
        open_dev_tools=lambda: show_debug_console(log_buffer.text()),
        toggle_hardware_acceleration=lambda: toggle_hardware_acceleration_soon(prefs),
    )


def _separator() -> MenuItem:
    return MenuItem(item_type="separator")


def _role(name: str) -> MenuItem:
    return MenuItem(role=name)


def _app_menu(app_name: str, actions: MenuActions, is_mac: bool) -> MenuItem:
    set_library = MenuItem(
        label="Set Story Library Folder", click=actions.choose_story_directory
    )
    if is_mac:
        items = [
            _role("about"),
            _separator(),
            set_library,
            _separator(),
            _role("services"),
            _separator(),
            _role("hide"),
            _role("hideOthers"),
            _role("unhide"),
            _separator(),
            _role("quit"),
        ]
    else:
        items = [set_library, _separator(), _role("quit")]
    return MenuItem(label=app_name, submenu=items)


def _edit_menu() -> MenuItem:
    return MenuItem(
        label="Edit",
        submenu=[
            _role("undo"),
            _role("redo"),
            _separator(),
            _role("cut"),
            _role("copy"),
            _role("paste"),
            _role("delete"),
            _separator(),
            _role("selectAll"),
        ],
    )


def _view_menu(actions: MenuActions) -> MenuItem:
    return MenuItem(
        label="View",
        submenu=[
            _role("resetZoom"),
            _role("zoomIn"),
            _role("zoomOut"),
            _separator(),
            _role("togglefullscreen"),
            _separator(),
            MenuItem(label="Show Story Library", click=actions.reveal_story_directory),
        ],
    )


def _window_menu(is_mac: bool) -> MenuItem:
    items = [_role("minimize"), _role("close")]
    if is_mac:
        items += [_role("zoom"), _separator(), _role("front")]
    return MenuItem(label="Window", role="window", submenu=items)


def _help_menu(prefs: AppPrefs, actions: MenuActions) -> MenuItem:
    troubleshooting = MenuItem(
        label="Troubleshooting",
        submenu=[
            MenuItem(label="Show Debug Console", click=actions.open_dev_tools),
            MenuItem(
                label="Disable Hardware Acceleration",
                item_type="checkbox",
                checked=bool(prefs.get(AppPrefName.DISABLE_HARDWARE_ACCELERATION)),
                click=actions.toggle_hardware_acceleration,
            ),
        ],
    )
    return MenuItem(
        label="Help",
        role="help",
        submenu=[
            MenuItem(
                label="Twine Help", click=lambda: actions.open_external(settings.HELP_URL)
            ),
            troubleshooting,
        ],
    )


def build_menu_template(
    prefs: AppPrefs,
    actions: MenuActions,
    *,
    platform: str | None = None,
    app_name: str = settings.APP_NAME,
) -> List[MenuItem]:
    """Return the top-level menus: app, Edit, View, Window, Help.

    *platform* follows ``sys.platform`` naming; ``"darwin"`` gets the macOS
    application and window menus.
    """
    is_mac = (platform if platform is not None else sys.platform) == "darwin"
    return [
        _app_menu(app_name, actions, is_mac),
        _edit_menu(),
        _view_menu(actions),
        _window_menu(is_mac),
        _help_menu(prefs, actions),
    ]


def init_menu_bar(
    prefs: AppPrefs,
    actions: MenuActions,
    apply: Callable[[List[MenuItem]], object],
    **kwargs,
) -> List[MenuItem]:
    template = build_menu_template(prefs, actions, **kwargs)
    apply(template)
    return template


def find_item(items: Iterable[MenuItem] | None, label: str) -> Optional[MenuItem]:
    for item in items or ():
        if item.label == label:
            return item
    return None


def has_item_with_role(menu: MenuItem, role: str) -> bool:
    return any(item.role == role for item in menu.submenu or ())
