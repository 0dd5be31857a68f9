"""
Centralized exception hierarchy for setup-air.

Transport errors from `requests` and archive errors from
`setup_air.core.filesystem` are not wrapped here; they reach the caller
as raised by the layer that produced them.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class SetupAirError(Exception):
    """Base exception for all setup-air errors."""

    pass


# ============================================================================
# Version Resolution Exceptions
# ============================================================================


class VersionNotFoundError(SetupAirError):
    """Raised when no release satisfies a version specifier."""

    def __init__(self, version_spec: str):
        self.version_spec = version_spec
        super().__init__(f"No version found for {version_spec}")


# ============================================================================
# Tool Cache Exceptions
# ============================================================================


class ToolCacheError(SetupAirError):
    """Base exception for tool cache errors."""

    pass


class CacheLockTimeout(ToolCacheError):
    """Raised when a cache entry lock cannot be acquired within timeout."""

    pass


# ============================================================================
# Platform Exceptions
# ============================================================================


class UnsupportedPlatformError(SetupAirError):
    """Raised when the host OS or CPU has no published Air artifact."""

    pass
