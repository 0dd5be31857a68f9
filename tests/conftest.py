"""
Pytest configuration and shared fixtures for setup-air tests.
"""

import io
import logging
import os
import tarfile
import zipfile
from pathlib import Path
from typing import Callable, Dict

import pytest

from setup_air.core.tool_cache import ToolCache

ENVIRONMENT_VARIABLES = (
    "RUNNER_TOOL_CACHE",
    "RUNNER_TEMP",
    "GITHUB_TOKEN",
    "GITHUB_API_URL",
    "GITHUB_PATH",
    "GITHUB_OUTPUT",
)


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep runner variables of the machine running the tests out of the way."""
    for name in ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    # add_path() edits PATH in place
    monkeypatch.setenv("PATH", os.environ.get("PATH", ""))


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging.basicConfig(force=True) calls made by CLI runs."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def tool_cache(tmp_path: Path) -> ToolCache:
    """Tool cache rooted in a temporary directory."""
    return ToolCache(
        cache_root=tmp_path / "toolcache", temp_root=tmp_path / "temp", lock_timeout=5
    )


@pytest.fixture
def populate_cache(tool_cache: ToolCache, tmp_path: Path) -> Callable[..., Path]:
    """Register fake Air installs in the tool cache."""

    def _populate(version: str, arch: str = "x86_64") -> Path:
        source = tmp_path / "sources" / f"{version}-{arch}"
        source.mkdir(parents=True)
        (source / "air").write_text(f"air {version}")
        return tool_cache.cache_dir(source, "air", version, arch)

    return _populate


@pytest.fixture
def make_tarball() -> Callable[[Dict[str, str]], bytes]:
    """Build an in-memory .tar.gz from a {path: content} mapping."""

    def _make(files: Dict[str, str]) -> bytes:
        buffer = io.BytesIO()
        with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
            for name, content in files.items():
                data = content.encode("utf-8")
                info = tarfile.TarInfo(name)
                info.size = len(data)
                info.mode = 0o755
                tar.addfile(info, io.BytesIO(data))
        return buffer.getvalue()

    return _make


@pytest.fixture
def make_zip() -> Callable[[Dict[str, str]], bytes]:
    """Build an in-memory .zip from a {path: content} mapping."""

    def _make(files: Dict[str, str]) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as zf:
            for name, content in files.items():
                zf.writestr(name, content)
        return buffer.getvalue()

    return _make
