"""
Air download, extraction and tool cache registration.

This module turns an explicit version into an installed Air directory:
1. Build the release asset URL for the platform/architecture
2. Download the archive to the temp directory
3. Extract it (zip on Windows, gzip tarball elsewhere)
4. Copy the extracted tree into the tool cache
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from setup_air.constants import (
    GITHUB_HOST,
    OWNER,
    REPO,
    TOOL_CACHE_NAME,
    WINDOWS_PLATFORM,
)
from setup_air.core.tool_cache import ToolCache
from setup_air.core.versions import evaluate_versions

logger = logging.getLogger(__name__)


@dataclass
class ToolCacheResult:
    """Result of a tool cache lookup."""

    version: str
    """Matched cached version, or the requested version when nothing matched"""

    installed_path: Optional[Path]
    """Install directory, None on a cache miss"""


@dataclass
class DownloadResult:
    """Result of a download-and-cache operation."""

    version: str
    """Explicit version that was installed"""

    cached_tool_dir: Path
    """Tool cache directory holding the Air binary"""


def get_artifact_name(arch: str, platform: str) -> str:
    """
    Example:
        >>> get_artifact_name("aarch64", "apple-darwin")
        'air-aarch64-apple-darwin'
    """
    return f"air-{arch}-{platform}"


def get_artifact_extension(platform: str) -> str:
    """Windows assets are zip files, every other platform ships a tarball."""
    return ".zip" if platform == WINDOWS_PLATFORM else ".tar.gz"


def get_download_url(platform: str, arch: str, version: str) -> str:
    """
    Build the release asset URL.

    Example:
        >>> get_download_url("unknown-linux-gnu", "x86_64", "0.4.1")
        'https://github.com/posit-dev/air/releases/download/0.4.1/air-x86_64-unknown-linux-gnu.tar.gz'
    """
    artifact = get_artifact_name(arch, platform)
    extension = get_artifact_extension(platform)
    return f"{GITHUB_HOST}/{OWNER}/{REPO}/releases/download/{version}/{artifact}{extension}"


def try_get_from_tool_cache(
    arch: str, version: str, tool_cache: Optional[ToolCache] = None
) -> ToolCacheResult:
    """
    Look up Air in the tool cache.

    A range is evaluated against the cached versions. When nothing matches,
    the requested version itself is looked up (and usually misses).

    Args:
        arch: Architecture tag
        version: Explicit version or range
        tool_cache: Tool cache to search (default: the runner tool cache)

    Returns:
        ToolCacheResult with installed_path None on a miss
    """
    tool_cache = tool_cache or ToolCache()

    logger.debug(f"Trying to get Air from tool cache for {version}...")
    cached_versions = tool_cache.find_all_versions(TOOL_CACHE_NAME, arch)
    logger.debug(f"Cached versions: {cached_versions}")

    resolved_version = evaluate_versions(cached_versions, version)
    if resolved_version == "":
        resolved_version = version

    installed_path = tool_cache.find(TOOL_CACHE_NAME, resolved_version, arch)
    return ToolCacheResult(version=resolved_version, installed_path=installed_path)


def download_version(
    platform: str,
    arch: str,
    version: str,
    github_token: Optional[str],
    tool_cache: Optional[ToolCache] = None,
) -> DownloadResult:
    """
    Download an explicit Air version and add it to the tool cache.

    Args:
        platform: Platform tag (e.g. 'unknown-linux-gnu')
        arch: Architecture tag (e.g. 'x86_64')
        version: Explicit version, used verbatim in the URL
        github_token: Token sent with the download request
        tool_cache: Tool cache to populate (default: the runner tool cache)

    Returns:
        DownloadResult with the tool cache directory

    Raises:
        DownloadError: If the download fails
        ArchiveExtractionError: If the archive cannot be extracted
        ToolCacheError: If the extracted tree cannot be cached
    """
    tool_cache = tool_cache or ToolCache()

    artifact = get_artifact_name(arch, platform)
    extension = get_artifact_extension(platform)
    download_url = get_download_url(platform, arch, version)
    logger.info(f'Downloading Air from "{download_url}" ...')

    download_path = tool_cache.download_tool(download_url, auth=github_token)

    if platform == WINDOWS_PLATFORM:
        # The zip extractor picks the format from the file suffix
        full_path_with_extension = Path(f"{download_path}{extension}")
        shutil.copyfile(download_path, full_path_with_extension)
        air_dir = tool_cache.extract_zip(full_path_with_extension)
        # Windows archives have no intermediate directory
    else:
        extracted_dir = tool_cache.extract_tar(download_path)
        air_dir = extracted_dir / artifact

    cached_tool_dir = tool_cache.cache_dir(air_dir, TOOL_CACHE_NAME, version, arch)

    return DownloadResult(version=version, cached_tool_dir=cached_tool_dir)
