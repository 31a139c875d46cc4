"""
Tests for configuration helpers.
"""

from pathlib import Path

import pytest

from core.config import get_cjxl_command, get_default_open_dir, get_djxl_command, get_log_level


class TestToolCommands:
    """Test the tool command lookups."""

    def test_defaults(self):
        assert get_cjxl_command() == "cjxl"
        assert get_djxl_command() == "djxl"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("NIMFINDER_CJXL", "/usr/local/bin/cjxl")
        monkeypatch.setenv("NIMFINDER_DJXL", "/usr/local/bin/djxl")

        assert get_cjxl_command() == "/usr/local/bin/cjxl"
        assert get_djxl_command() == "/usr/local/bin/djxl"

    def test_empty_override_ignored(self, monkeypatch):
        monkeypatch.setenv("NIMFINDER_CJXL", "")
        assert get_cjxl_command() == "cjxl"


class TestLogLevel:
    """Test get_log_level."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("NIMFINDER_LOG_LEVEL", raising=False)
        assert get_log_level() == "INFO"

    @pytest.mark.parametrize("value,expected", [("debug", "DEBUG"), ("WARNING", "WARNING"), ("error", "ERROR")])
    def test_known_levels(self, monkeypatch, value, expected):
        monkeypatch.setenv("NIMFINDER_LOG_LEVEL", value)
        assert get_log_level() == expected

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("NIMFINDER_LOG_LEVEL", "verbose")
        assert get_log_level() == "INFO"


def test_default_open_dir_exists(qapp):
    """The open dialog always starts in an existing directory."""
    assert Path(get_default_open_dir()).is_dir()
