# Shared fixtures plus a fallback 'qtbot' fixture if pytest-qt is not installed.
# Qt tests run on the offscreen platform so no display is needed.

import os
import sys
import contextlib
import pytest

from tests.factories import FakeFileStore

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except Exception:  # pragma: no cover
    try:
        from PyQt6.QtWidgets import QApplication
    except Exception:  # pragma: no cover
        QApplication = None  # type: ignore

    @pytest.fixture
    def qtbot():  # type: ignore
        if QApplication is None:
            pytest.skip("PyQt6 not available")
        QApplication.instance() or QApplication(sys.argv[:1])  # type: ignore
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

            @contextlib.contextmanager
            def waitSignal(self, *args, **kwargs):  # no-op stub
                yield

        return Bot()


@pytest.fixture
def fake_store() -> FakeFileStore:
    return FakeFileStore()
