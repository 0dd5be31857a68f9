"""
Platform detection for setup-air.

Air artifacts are named with Rust target-triple fragments, so this module
maps the host OS and CPU onto those tags rather than onto generic names.

Usage:
    from setup_air.core.platform import get_platform, get_arch

    platform_tag = get_platform()   # e.g. 'unknown-linux-gnu'
    arch_tag = get_arch()           # e.g. 'x86_64'
"""

import platform

from setup_air.core.exceptions import UnsupportedPlatformError

LINUX = "unknown-linux-gnu"
MACOS = "apple-darwin"
WINDOWS = "pc-windows-msvc"

X86_64 = "x86_64"
AARCH64 = "aarch64"
I686 = "i686"

SUPPORTED_PLATFORMS = (LINUX, MACOS, WINDOWS)
SUPPORTED_ARCHITECTURES = (X86_64, AARCH64, I686)

# Published (arch, platform) pairs
_PUBLISHED_TARGETS = {
    (X86_64, LINUX),
    (AARCH64, LINUX),
    (X86_64, MACOS),
    (AARCH64, MACOS),
    (X86_64, WINDOWS),
    (AARCH64, WINDOWS),
    (I686, WINDOWS),
}


def get_platform() -> str:
    """
    Detect the platform tag of the current host.

    Returns:
        'unknown-linux-gnu', 'apple-darwin' or 'pc-windows-msvc'

    Raises:
        UnsupportedPlatformError: If the OS has no Air artifacts
    """
    system = platform.system().lower()

    if system == "linux":
        return LINUX
    elif system == "darwin":
        return MACOS
    elif system == "windows":
        return WINDOWS
    else:
        raise UnsupportedPlatformError(f"Unsupported operating system: {system}")


def get_arch() -> str:
    """
    Detect the architecture tag of the current host.

    Returns:
        'x86_64', 'aarch64' or 'i686'

    Raises:
        UnsupportedPlatformError: If the CPU has no Air artifacts
    """
    machine = platform.machine().lower()

    # Normalize architecture names
    if machine in ("x86_64", "amd64", "x64"):
        return X86_64
    elif machine in ("aarch64", "arm64"):
        return AARCH64
    elif machine in ("i386", "i686", "x86"):
        return I686
    else:
        raise UnsupportedPlatformError(f"Unsupported architecture: {machine}")


def is_supported(platform_tag: str, arch: str) -> bool:
    """
    Check whether Air publishes an artifact for a platform/arch pair.

    Example:
        >>> is_supported("apple-darwin", "aarch64")
        True
        >>> is_supported("apple-darwin", "i686")
        False
    """
    return (arch, platform_tag) in _PUBLISHED_TARGETS


__all__ = [
    "LINUX",
    "MACOS",
    "WINDOWS",
    "X86_64",
    "AARCH64",
    "I686",
    "SUPPORTED_PLATFORMS",
    "SUPPORTED_ARCHITECTURES",
    "get_platform",
    "get_arch",
    "is_supported",
]
