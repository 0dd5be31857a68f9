"""
Unit tests for GitHub Actions runner integration.
"""

import os

from setup_air.core.actions import add_path, set_output


class TestAddPath:
    """Test add_path function."""

    def test_prepends_process_path(self, tmp_path, monkeypatch):
        """Test directory is prepended to PATH of this process."""
        monkeypatch.setenv("PATH", "/usr/bin")

        add_path(tmp_path / "air")

        assert os.environ["PATH"].split(os.pathsep)[0] == str(tmp_path / "air")

    def test_writes_github_path(self, tmp_path, monkeypatch):
        """Test directory is appended to the GITHUB_PATH file."""
        path_file = tmp_path / "path.txt"
        path_file.write_text("/existing\n")
        monkeypatch.setenv("GITHUB_PATH", str(path_file))
        monkeypatch.setenv("PATH", "/usr/bin")

        assert add_path("/opt/air") is True
        assert path_file.read_text() == "/existing\n/opt/air\n"

    def test_without_github_path(self, monkeypatch):
        """Test returns False when GITHUB_PATH is unset."""
        monkeypatch.setenv("PATH", "/usr/bin")
        assert add_path("/opt/air") is False


class TestSetOutput:
    """Test set_output function."""

    def test_single_line(self, tmp_path, monkeypatch):
        """Test name=value form for single-line values."""
        output_file = tmp_path / "output.txt"
        monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

        assert set_output("air-version", "0.4.1") is True
        assert output_file.read_text() == "air-version=0.4.1\n"

    def test_multi_line(self, tmp_path, monkeypatch):
        """Test heredoc form for multi-line values."""
        output_file = tmp_path / "output.txt"
        monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))

        set_output("notes", "line one\nline two")

        lines = output_file.read_text().splitlines()
        delimiter = lines[0].split("<<", 1)[1]
        assert lines[0].startswith("notes<<ghadelimiter_")
        assert lines[1:] == ["line one", "line two", delimiter]

    def test_without_github_output(self):
        """Test returns False when GITHUB_OUTPUT is unset."""
        assert set_output("air-version", "0.4.1") is False
