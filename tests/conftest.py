"""
Pytest configuration shared by the rpgen tests.
"""

import os

import pytest

# Run Qt without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from rpgen.controller import SessionController  # noqa: E402


@pytest.fixture
def clipboard():
    """Collects whatever the controller writes to the clipboard."""
    return []


@pytest.fixture
def controller(qtbot, clipboard):
    ctrl = SessionController(clipboard_writer=clipboard.append, reset_ms=50)
    yield ctrl
    ctrl.shutdown()
