"""Shared pytest fixtures for Countdown Timer tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from countdowntimer.timer.engine import TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def settings_dir(tmp_path, monkeypatch):
    """Point every test at a throwaway settings directory."""
    monkeypatch.setattr("countdowntimer.settings.CONFIG_DIR", tmp_path)
    monkeypatch.setattr("countdowntimer.settings.SETTINGS_PATH", tmp_path / "settings.json")
    yield tmp_path


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine in the IDLE state."""
    eng = TimerEngine(parent=None)
    yield eng
    eng.stop()
