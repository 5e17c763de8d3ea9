"""Tests for gui.app.qt_menu: installing the menu template into a QMenuBar."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtGui import QAction  # noqa: E402
from PyQt6.QtWidgets import QMenuBar  # noqa: E402

from gui.app.menu_bar import MenuActions, build_menu_template, make_menu_actions  # noqa: E402
from gui.app.qt_menu import apply_menu_template  # noqa: E402
from gui.services.logging_service import LoggingService  # noqa: E402
from tests.factories import make_prefs  # noqa: E402


def _menus(menu_bar):
    return {a.text(): a.menu() for a in menu_bar.actions() if a.menu() is not None}


def _action(menu, text):
    for act in menu.actions():
        if act.text() == text:
            return act
    raise AssertionError(f"No action {text!r} in {menu.title()!r}")


def _actions():
    return MenuActions(
        choose_story_directory=MagicMock(),
        reveal_story_directory=MagicMock(),
        open_external=MagicMock(),
        open_dev_tools=MagicMock(),
        toggle_hardware_acceleration=MagicMock(),
    )


@pytest.mark.asyncio
async def test_menu_bar_populated(qtbot):
    prefs, _ = await make_prefs(file_doc={"disableHardwareAcceleration": True})
    actions = _actions()
    bar = QMenuBar()
    qtbot.addWidget(bar)
    apply_menu_template(bar, build_menu_template(prefs, actions, platform="linux", app_name="Demo"))

    menus = _menus(bar)
    assert list(menus) == ["Demo", "Edit", "View", "Window", "Help"]
    assert _action(menus["Demo"], "Quit").menuRole() == QAction.MenuRole.QuitRole
    assert _action(menus["Edit"], "Select All") is not None

    troubleshooting = _action(menus["Help"], "Troubleshooting").menu()
    hw = _action(troubleshooting, "Disable Hardware Acceleration")
    assert hw.isCheckable() and hw.isChecked()

    hw.trigger()
    actions.toggle_hardware_acceleration.assert_called_once()
    _action(menus["View"], "Show Story Library").trigger()
    actions.reveal_story_directory.assert_called_once()


@pytest.mark.asyncio
async def test_apply_replaces_previous_menus(qtbot):
    prefs, _ = await make_prefs()
    bar = QMenuBar()
    qtbot.addWidget(bar)
    apply_menu_template(bar, build_menu_template(prefs, _actions(), platform="darwin"))
    apply_menu_template(bar, build_menu_template(prefs, _actions(), platform="darwin"))
    assert len(_menus(bar)) == 5
    about = _action(_menus(bar)["StoryDesk"], "About")
    assert about.menuRole() == QAction.MenuRole.AboutRole


@pytest.mark.asyncio
async def test_triggering_checkbox_saves_pref(qtbot):
    prefs, store = await make_prefs()
    actions = make_menu_actions(
        prefs,
        LoggingService(),
        choose_story_directory=MagicMock(),
        reveal_story_directory=MagicMock(),
        open_external=MagicMock(),
        show_debug_console=MagicMock(),
    )
    bar = QMenuBar()
    qtbot.addWidget(bar)
    apply_menu_template(bar, build_menu_template(prefs, actions, platform="linux"))
    troubleshooting = _action(_menus(bar)["Help"], "Troubleshooting").menu()
    hw = _action(troubleshooting, "Disable Hardware Acceleration")
    assert not hw.isChecked()

    hw.trigger()
    for _ in range(50):
        if store.saved:
            break
        await asyncio.sleep(0.01)

    assert hw.isChecked()
    assert store.saved[-1]["disableHardwareAcceleration"] is True
    assert prefs.get("disableHardwareAcceleration") is True
