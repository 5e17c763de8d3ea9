"""Install a menu template (see ``gui.app.menu_bar``) into a PyQt6 ``QMenuBar``.

Role items become plain actions titled after their role; the toolkit decides
what they do. ``about`` and ``quit`` also get the matching ``QAction.MenuRole``
so macOS moves them into the application menu.
"""

from __future__ import annotations

from typing import Iterable

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMenu, QMenuBar

from .menu_bar import MenuItem

__all__ = ["ROLE_TITLES", "apply_menu_template"]

ROLE_TITLES: dict[str, str] = {
    "about": "About",
    "services": "Services",
    "hide": "Hide",
    "hideOthers": "Hide Others",
    "unhide": "Show All",
    "quit": "Quit",
    "undo": "Undo",
    "redo": "Redo",
    "cut": "Cut",
    "copy": "Copy",
    "paste": "Paste",
    "delete": "Delete",
    "selectAll": "Select All",
    "resetZoom": "Actual Size",
    "zoomIn": "Zoom In",
    "zoomOut": "Zoom Out",
    "togglefullscreen": "Toggle Full Screen",
    "minimize": "Minimize",
    "close": "Close",
    "zoom": "Zoom",
    "front": "Bring All to Front",
    "window": "Window",
    "help": "Help",
}

_MENU_ROLES = {
    "about": QAction.MenuRole.AboutRole,
    "quit": QAction.MenuRole.QuitRole,
}


def _title(item: MenuItem) -> str:
    if item.label:
        return item.label
    return ROLE_TITLES.get(item.role or "", item.role or "")


def _add_items(menu: QMenu, items: Iterable[MenuItem]) -> None:
    for item in items:
        if item.item_type == "separator":
            menu.addSeparator()
            continue
        if item.submenu is not None:
            _add_items(menu.addMenu(_title(item)), item.submenu)
            continue
        act = menu.addAction(_title(item))
        if item.role in _MENU_ROLES:
            act.setMenuRole(_MENU_ROLES[item.role])
        if item.item_type == "checkbox":
            act.setCheckable(True)
            act.setChecked(bool(item.checked))
        if item.click is not None:
            act.triggered.connect(lambda _checked=False, cb=item.click: cb())  # type: ignore[attr-defined]


def apply_menu_template(menu_bar: QMenuBar, template: Iterable[MenuItem]) -> QMenuBar:
    """Replace the contents of *menu_bar* with *template*."""
    menu_bar.clear()
    for top in template:
        _add_items(menu_bar.addMenu(_title(top)), top.submenu or [])
    return menu_bar
