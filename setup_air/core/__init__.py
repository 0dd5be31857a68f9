"""
Core functionality for setup-air.

This package contains the foundational modules the install flow is built
on: directories, platform detection, downloads, archives, versions, the
tool cache and the release API client.
"""

from .directory import (
    get_tool_cache_dir,
    get_temp_dir,
    DirectoryError,
)

from .platform import (
    get_platform,
    get_arch,
    is_supported,
)

from .tool_cache import ToolCache

from .github import GitHubReleasesClient

from .versions import (
    clean_version,
    evaluate_versions,
    is_explicit_version,
)

from .exceptions import (
    SetupAirError,
    VersionNotFoundError,
    ToolCacheError,
    CacheLockTimeout,
    UnsupportedPlatformError,
)

__all__ = [
    # Directory management
    "get_tool_cache_dir",
    "get_temp_dir",
    "DirectoryError",
    # Platform detection
    "get_platform",
    "get_arch",
    "is_supported",
    # Tool cache
    "ToolCache",
    # Release host
    "GitHubReleasesClient",
    # Versions
    "clean_version",
    "evaluate_versions",
    "is_explicit_version",
    # Exceptions
    "SetupAirError",
    "VersionNotFoundError",
    "ToolCacheError",
    "CacheLockTimeout",
    "UnsupportedPlatformError",
]
