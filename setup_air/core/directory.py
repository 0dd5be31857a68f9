"""
Directory resolution for setup-air.

The tool cache and the scratch directory follow the GitHub Actions runner
conventions when running in CI and fall back to a per-user directory
otherwise.

Directory Structure:
    Tool cache ($RUNNER_TOOL_CACHE or ~/.setup-air/tool-cache):
        - <tool>/<version>/<arch>/        : Installed tool tree
        - <tool>/<version>/<arch>.complete : Completion marker
        - <tool>/<version>/<arch>.lock     : Cross-process write lock

    Temp ($RUNNER_TEMP or ~/.setup-air/tmp):
        - <uuid>          : Downloaded archives
        - <uuid>/         : Extracted archives
"""

import os
from pathlib import Path
from typing import Optional, Union


class DirectoryError(Exception):
    """Base exception for directory-related errors."""

    pass


def get_home_dir() -> Path:
    """
    Get the per-user setup-air directory.

    Returns:
        Path: ~/.setup-air on Linux/macOS, %USERPROFILE%\\.setup-air on Windows

    Raises:
        DirectoryError: If USERPROFILE is not set on Windows
    """
    if os.name == "nt":  # Windows
        user_profile = os.environ.get("USERPROFILE")
        if not user_profile:
            raise DirectoryError(
                "USERPROFILE environment variable is not set. "
                "Cannot determine setup-air directory."
            )
        return Path(user_profile) / ".setup-air"
    else:  # Linux/macOS
        return Path.home() / ".setup-air"


def get_tool_cache_dir(override: Optional[Union[str, Path]] = None) -> Path:
    """
    Get the tool cache root.

    Args:
        override: Explicit directory (e.g. from CLI or config file)

    Returns:
        Path: override if given, else RUNNER_TOOL_CACHE, else ~/.setup-air/tool-cache

    Example:
        >>> get_tool_cache_dir()
        PosixPath('/opt/hostedtoolcache')  # on a GitHub-hosted runner
    """
    if override:
        return Path(override)
    env_dir = os.environ.get("RUNNER_TOOL_CACHE")
    if env_dir:
        return Path(env_dir)
    return get_home_dir() / "tool-cache"


def get_temp_dir(override: Optional[Union[str, Path]] = None) -> Path:
    """
    Get the scratch directory for downloads and extraction.

    Args:
        override: Explicit directory (e.g. from CLI or config file)

    Returns:
        Path: override if given, else RUNNER_TEMP, else ~/.setup-air/tmp
    """
    if override:
        return Path(override)
    env_dir = os.environ.get("RUNNER_TEMP")
    if env_dir:
        return Path(env_dir)
    return get_home_dir() / "tmp"
