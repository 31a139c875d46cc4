"""
Shared test configuration.

Runs Qt offscreen and keeps QStandardPaths (and so the log directory)
out of the real user profile.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PySide6.QtCore import QStandardPaths  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def isolated_standard_paths():
    """Redirect QStandardPaths to test locations for the whole session."""
    QStandardPaths.setTestModeEnabled(True)
    yield
    QStandardPaths.setTestModeEnabled(False)


@pytest.fixture(autouse=True)
def default_tool_commands(monkeypatch):
    """Make sure tool overrides from the developer's shell do not leak in."""
    monkeypatch.delenv("NIMFINDER_CJXL", raising=False)
    monkeypatch.delenv("NIMFINDER_DJXL", raising=False)
