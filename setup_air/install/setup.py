"""
End-to-end Air setup: cache lookup, version resolution, download.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from setup_air.core.github import GitHubReleasesClient
from setup_air.core.platform import get_arch, get_platform, is_supported
from setup_air.core.tool_cache import ToolCache
from setup_air.install.downloader import download_version, try_get_from_tool_cache
from setup_air.install.resolver import LATEST, resolve_version

logger = logging.getLogger(__name__)


@dataclass
class SetupResult:
    """Result of setting up Air."""

    version: str
    """Installed version"""

    install_path: Path
    """Directory containing the Air binary"""

    was_cached: bool
    """Whether the tool cache already had a matching version"""


def setup_air(
    version_input: str,
    github_token: Optional[str],
    platform: Optional[str] = None,
    arch: Optional[str] = None,
    tool_cache: Optional[ToolCache] = None,
    client: Optional[GitHubReleasesClient] = None,
) -> SetupResult:
    """
    Make Air available, downloading it only when the cache has no match.

    Ranges are first tried against the cache so a warm runner needs no
    network access. "latest" always asks the release host.

    Args:
        version_input: "latest", an explicit version or a range
        github_token: Token for the releases API and downloads
        platform: Platform tag (default: detected)
        arch: Architecture tag (default: detected)
        tool_cache: Tool cache (default: the runner tool cache)
        client: Releases client (default: one for posit-dev/air)

    Returns:
        SetupResult with the installed version and directory
    """
    platform = platform or get_platform()
    arch = arch or get_arch()
    tool_cache = tool_cache or ToolCache()

    if not is_supported(platform, arch):
        logger.warning(f"No published Air build is known for {arch}-{platform}")

    if version_input != LATEST:
        cached = try_get_from_tool_cache(arch, version_input, tool_cache)
        if cached.installed_path:
            logger.info(f"Found Air in tool-cache for {cached.version}")
            return SetupResult(cached.version, cached.installed_path, True)

    version = resolve_version(version_input, github_token, client=client)

    cached = try_get_from_tool_cache(arch, version, tool_cache)
    if cached.installed_path:
        logger.info(f"Found Air in tool-cache for {cached.version}")
        return SetupResult(cached.version, cached.installed_path, True)

    result = download_version(platform, arch, version, github_token, tool_cache)
    return SetupResult(result.version, result.cached_tool_dir, False)
