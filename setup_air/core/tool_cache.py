"""
Tool cache for downloaded binaries.

Installed tools are indexed by name, version and architecture using the
directory layout of the GitHub Actions hosted tool cache, so entries written
here are visible to other actions on the same runner and vice versa.

Layout:
    <root>/<tool>/<version>/<arch>/           installed tree
    <root>/<tool>/<version>/<arch>.complete   written last; marks the entry valid
    <root>/<tool>/<version>/<arch>.lock       cross-process write lock

Example:
    >>> cache = ToolCache()
    >>> archive = cache.download_tool("https://example.com/air.tar.gz")
    >>> extracted = cache.extract_tar(archive)
    >>> cache.cache_dir(extracted, "air", "0.4.1", "x86_64")
    PosixPath('/opt/hostedtoolcache/air/0.4.1/x86_64')
"""

import logging
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import List, Optional, Union

from filelock import FileLock, Timeout

from setup_air.core.directory import get_temp_dir, get_tool_cache_dir
from setup_air.core.download import DownloadProgress, download_file
from setup_air.core.exceptions import CacheLockTimeout, ToolCacheError
from setup_air.core.filesystem import (
    extract_archive,
    extract_tar_file,
    recursive_copy,
    safe_rmtree,
)
from setup_air.core.versions import (
    clean_version,
    evaluate_versions,
    is_explicit_version,
)

logger = logging.getLogger(__name__)


class ToolCache:
    """
    Finds, downloads, extracts and registers tool installations.

    Args:
        cache_root: Tool cache root (default: RUNNER_TOOL_CACHE or ~/.setup-air/tool-cache)
        temp_root: Scratch directory (default: RUNNER_TEMP or ~/.setup-air/tmp)
        lock_timeout: Seconds to wait for another process writing the same entry
    """

    def __init__(
        self,
        cache_root: Optional[Path] = None,
        temp_root: Optional[Path] = None,
        lock_timeout: int = 300,
    ):
        self.cache_root = get_tool_cache_dir(cache_root)
        self.temp_root = get_temp_dir(temp_root)
        self.lock_timeout = lock_timeout

        logger.debug(f"Tool cache at {self.cache_root}, temp at {self.temp_root}")

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find(self, tool_name: str, version_spec: str, arch: str) -> Optional[Path]:
        """
        Find the install path of a cached tool.

        Args:
            tool_name: Tool name (e.g. 'air')
            version_spec: Explicit version or range; ranges are evaluated
                against the cached versions
            arch: Architecture tag

        Returns:
            Path to the installed tree, or None if not cached

        Raises:
            ValueError: If tool_name or version_spec is empty
        """
        if not tool_name:
            raise ValueError("tool_name parameter is required")
        if not version_spec:
            raise ValueError("version_spec parameter is required")

        if not is_explicit_version(version_spec):
            local_versions = self.find_all_versions(tool_name, arch)
            version_spec = evaluate_versions(local_versions, version_spec)

        if not version_spec:
            return None

        version = clean_version(version_spec) or ""
        if not version:
            return None

        cache_path = self._entry_path(tool_name, version, arch)
        logger.debug(f"checking cache: {cache_path}")
        if cache_path.is_dir() and self._marker_path(cache_path).exists():
            logger.debug(f"Found tool in cache {tool_name} {version} {arch}")
            return cache_path

        logger.debug("not found")
        return None

    def find_all_versions(self, tool_name: str, arch: str) -> List[str]:
        """
        List the versions of a tool cached for an architecture.

        Only completed entries are returned.
        """
        tool_path = self.cache_root / tool_name
        if not tool_path.is_dir():
            return []

        versions = []
        for child in sorted(tool_path.iterdir()):
            if not child.is_dir() or not is_explicit_version(child.name):
                continue
            if self.find(tool_name, child.name, arch):
                versions.append(child.name)

        return versions

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def cache_dir(
        self,
        source_dir: Union[str, Path],
        tool_name: str,
        version: str,
        arch: str,
    ) -> Path:
        """
        Copy a directory tree into the cache.

        Any previous entry for the same tool/version/arch is replaced.

        Args:
            source_dir: Directory whose contents are cached
            tool_name: Tool name
            version: Explicit version
            arch: Architecture tag

        Returns:
            Path to the cache entry

        Raises:
            ToolCacheError: If source_dir is not a directory
            ValueError: If the entry would land outside cache_root
            CacheLockTimeout: If another process holds the entry lock too long
        """
        source_dir = Path(source_dir)
        version = clean_version(version) or version

        logger.debug(f"Caching tool {tool_name} {version} {arch}")
        logger.debug(f"source dir: {source_dir}")
        if not source_dir.is_dir():
            raise ToolCacheError(f"sourceDir is not a directory: {source_dir}")

        dest_path = self._entry_path(tool_name, version, arch)
        marker_path = self._marker_path(dest_path)

        with self._lock(dest_path):
            logger.debug(f"destination {dest_path}")
            safe_rmtree(dest_path, require_prefix=self.cache_root)
            marker_path.unlink(missing_ok=True)

            dest_path.mkdir(parents=True, exist_ok=True)
            recursive_copy(source_dir, dest_path)

            marker_path.write_text("", encoding="utf-8")
            logger.debug("finished caching tool")

        return dest_path

    # ------------------------------------------------------------------
    # Download and extraction
    # ------------------------------------------------------------------

    def download_tool(
        self,
        url: str,
        dest: Optional[Union[str, Path]] = None,
        auth: Optional[str] = None,
    ) -> Path:
        """
        Download a file into the temp directory.

        Args:
            url: URL to download
            dest: Destination file (default: a random name under temp_root,
                with no extension)
            auth: Access token sent with the request

        Returns:
            Path to the downloaded file

        Raises:
            ToolCacheError: If dest already exists
            DownloadError: If the transfer fails
        """
        dest = Path(dest) if dest else self.temp_root / str(uuid.uuid4())
        if dest.exists():
            raise ToolCacheError(f"Destination file path {dest} already exists")

        logger.debug(f"Downloading {url}")
        logger.debug(f"Destination {dest}")
        return download_file(url, dest, token=auth, progress_callback=_log_progress)

    def extract_tar(
        self, file: Union[str, Path], dest: Optional[Union[str, Path]] = None
    ) -> Path:
        """
        Extract a gzip tarball.

        The format is not inferred from the file name.

        Returns:
            Directory containing the extracted files
        """
        if not file:
            raise ValueError("parameter 'file' is required")
        dest = self._create_extract_folder(dest)
        logger.debug(f"Extracting tar {file} to {dest}")
        extract_tar_file(Path(file), dest, "r:gz")
        return dest

    def extract_zip(
        self, file: Union[str, Path], dest: Optional[Union[str, Path]] = None
    ) -> Path:
        """
        Extract a zip archive.

        The file name must end in '.zip'; the format is inferred from it.

        Returns:
            Directory containing the extracted files

        Raises:
            UnsupportedArchiveFormat: If the file has no '.zip' suffix
        """
        if not file:
            raise ValueError("parameter 'file' is required")
        dest = self._create_extract_folder(dest)
        logger.debug(f"Extracting zip {file} to {dest}")
        extract_archive(Path(file), dest)
        return dest

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _entry_path(self, tool_name: str, version: str, arch: str) -> Path:
        return self.cache_root / tool_name / version / arch

    @staticmethod
    def _marker_path(entry_path: Path) -> Path:
        return entry_path.with_name(f"{entry_path.name}.complete")

    def _create_extract_folder(self, dest: Optional[Union[str, Path]]) -> Path:
        folder = Path(dest) if dest else self.temp_root / str(uuid.uuid4())
        folder.mkdir(parents=True, exist_ok=True)
        return folder

    @contextmanager
    def _lock(self, entry_path: Path):
        """
        Hold the exclusive write lock of a cache entry.

        Raises:
            CacheLockTimeout: If lock cannot be acquired within timeout
        """
        lock_path = entry_path.with_name(f"{entry_path.name}.lock")
        lock_path.parent.mkdir(parents=True, exist_ok=True)

        lock = FileLock(lock_path, timeout=self.lock_timeout)

        try:
            with lock:
                logger.debug(f"Acquired cache lock {lock_path}")
                yield
            logger.debug(f"Released cache lock {lock_path}")

        except Timeout as e:
            raise CacheLockTimeout(
                f"Could not acquire cache lock {lock_path} within {self.lock_timeout} seconds"
            ) from e


def _log_progress(progress: DownloadProgress):
    logger.debug(f"Downloaded {progress}")


__all__ = [
    "ToolCache",
    "evaluate_versions",
    "is_explicit_version",
]
