"""Shared pytest fixtures for HIIT tests."""

import os
import sys
import tempfile

# Keep tests off the real data directory and off the display
os.environ.setdefault("HIIT_HOME", tempfile.mkdtemp(prefix="hiit-tests-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PyQt6.QtWidgets import QApplication

from hiit.database.db import configure_engine, init_db
from hiit.timer import ExerciseDefinition, IntervalTimer, ManualTickSource


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh, empty in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db(seed=False)
    yield


@pytest.fixture(autouse=True)
def settings_path(tmp_path, monkeypatch):
    """Keep settings reads and writes inside the test's tmp dir."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr("hiit.settings.SETTINGS_PATH", path)
    return path


@pytest.fixture
def ticks():
    return ManualTickSource()


@pytest.fixture
def definition():
    """warmup=2, exercise=2, rest=2, sets=2."""
    return ExerciseDefinition(
        warmup_seconds=2, exercise_seconds=2, rest_seconds=2, sets=2,
    )


@pytest.fixture
def timer(qapp, ticks, definition):
    """Auto-started IntervalTimer driven by a manual tick source."""
    return IntervalTimer(definition, tick_source=ticks)
