"""
Unit tests for directory resolution.
"""

import os
from pathlib import Path

import pytest

from setup_air.core.directory import (
    DirectoryError,
    get_home_dir,
    get_temp_dir,
    get_tool_cache_dir,
)


class TestGetHomeDir:
    """Test get_home_dir function."""

    @pytest.mark.skipif(os.name == "nt", reason="POSIX home layout")
    def test_posix(self):
        """Test home dir is ~/.setup-air."""
        assert get_home_dir() == Path.home() / ".setup-air"

    @pytest.mark.skipif(os.name != "nt", reason="Windows only")
    def test_windows_requires_userprofile(self, monkeypatch):
        """Test missing USERPROFILE raises DirectoryError."""
        monkeypatch.delenv("USERPROFILE", raising=False)
        with pytest.raises(DirectoryError):
            get_home_dir()


class TestGetToolCacheDir:
    """Test get_tool_cache_dir function."""

    def test_override_wins(self, tmp_path, monkeypatch):
        """Test explicit override beats RUNNER_TOOL_CACHE."""
        monkeypatch.setenv("RUNNER_TOOL_CACHE", str(tmp_path / "env"))
        assert get_tool_cache_dir(tmp_path / "cli") == tmp_path / "cli"

    def test_runner_tool_cache(self, tmp_path, monkeypatch):
        """Test RUNNER_TOOL_CACHE is used on runners."""
        monkeypatch.setenv("RUNNER_TOOL_CACHE", str(tmp_path / "env"))
        assert get_tool_cache_dir() == tmp_path / "env"

    def test_default(self):
        """Test default is under the home dir."""
        assert get_tool_cache_dir() == get_home_dir() / "tool-cache"


class TestGetTempDir:
    """Test get_temp_dir function."""

    def test_override_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RUNNER_TEMP", str(tmp_path / "env"))
        assert get_temp_dir(str(tmp_path / "cli")) == tmp_path / "cli"

    def test_runner_temp(self, tmp_path, monkeypatch):
        monkeypatch.setenv("RUNNER_TEMP", str(tmp_path / "env"))
        assert get_temp_dir() == tmp_path / "env"

    def test_default(self):
        assert get_temp_dir() == get_home_dir() / "tmp"
