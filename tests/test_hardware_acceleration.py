import pytest

from gui.app import hardware_acceleration
from gui.app.hardware_acceleration import (
    apply_hardware_acceleration_pref,
    hardware_acceleration_disabled,
    toggle_hardware_acceleration,
)
from tests.factories import make_prefs


@pytest.mark.asyncio
async def test_toggle_flips_and_persists():
    prefs, store = await make_prefs()
    assert hardware_acceleration_disabled(prefs) is False
    assert await toggle_hardware_acceleration(prefs) is True
    assert store.saved[-1]["disableHardwareAcceleration"] is True
    assert await toggle_hardware_acceleration(prefs) is False
    assert prefs.get("disableHardwareAcceleration") is False


@pytest.mark.asyncio
async def test_apply_is_noop_when_enabled():
    prefs, _ = await make_prefs()
    assert apply_hardware_acceleration_pref(prefs) is False


@pytest.mark.asyncio
async def test_apply_requests_software_opengl(monkeypatch):
    calls = []

    class FakeCoreApp:
        @staticmethod
        def setAttribute(attr, on):
            calls.append((attr, on))

    class FakeQt:
        class ApplicationAttribute:
            AA_UseSoftwareOpenGL = "software-gl"

    monkeypatch.setattr(hardware_acceleration, "_QT_AVAILABLE", True)
    monkeypatch.setattr(hardware_acceleration, "QCoreApplication", FakeCoreApp)
    monkeypatch.setattr(hardware_acceleration, "Qt", FakeQt)
    prefs, _ = await make_prefs(args={"disableHardwareAcceleration": True})
    assert apply_hardware_acceleration_pref(prefs) is True
    assert calls == [("software-gl", True)]


@pytest.mark.asyncio
async def test_apply_without_qt(monkeypatch):
    monkeypatch.setattr(hardware_acceleration, "_QT_AVAILABLE", False)
    prefs, _ = await make_prefs(args={"disableHardwareAcceleration": True})
    assert apply_hardware_acceleration_pref(prefs) is False
