"""
Air installation: version resolution, download and setup.
"""

from .resolver import resolve_version
from .downloader import (
    DownloadResult,
    ToolCacheResult,
    download_version,
    get_download_url,
    try_get_from_tool_cache,
)
from .setup import SetupResult, setup_air

__all__ = [
    "resolve_version",
    "DownloadResult",
    "ToolCacheResult",
    "download_version",
    "get_download_url",
    "try_get_from_tool_cache",
    "SetupResult",
    "setup_air",
]
