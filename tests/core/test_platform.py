"""
Unit tests for the platform detection module.

Tests cover:
- OS detection with mocking
- Architecture detection and normalization
- Published target validation
"""

import pytest
from unittest.mock import patch

from setup_air.core.exceptions import UnsupportedPlatformError
from setup_air.core.platform import (
    AARCH64,
    I686,
    LINUX,
    MACOS,
    WINDOWS,
    X86_64,
    get_arch,
    get_platform,
    is_supported,
)


class TestGetPlatform:
    """Test get_platform function."""

    @pytest.mark.parametrize(
        "system,expected",
        [("Linux", LINUX), ("Darwin", MACOS), ("Windows", WINDOWS)],
    )
    def test_known_systems(self, system, expected):
        """Test supported systems map to artifact platform tags."""
        with patch("setup_air.core.platform.platform.system", return_value=system):
            assert get_platform() == expected

    def test_unsupported_system(self):
        """Test unsupported OS raises UnsupportedPlatformError."""
        with patch("setup_air.core.platform.platform.system", return_value="FreeBSD"):
            with pytest.raises(UnsupportedPlatformError, match="freebsd"):
                get_platform()


class TestGetArch:
    """Test get_arch function."""

    @pytest.mark.parametrize(
        "machine,expected",
        [
            ("x86_64", X86_64),
            ("AMD64", X86_64),
            ("arm64", AARCH64),
            ("aarch64", AARCH64),
            ("i686", I686),
            ("x86", I686),
        ],
    )
    def test_normalization(self, machine, expected):
        """Test machine names are normalized to artifact arch tags."""
        with patch("setup_air.core.platform.platform.machine", return_value=machine):
            assert get_arch() == expected

    def test_unsupported_arch(self):
        """Test unsupported CPU raises UnsupportedPlatformError."""
        with patch("setup_air.core.platform.platform.machine", return_value="riscv64"):
            with pytest.raises(UnsupportedPlatformError, match="riscv64"):
                get_arch()


class TestIsSupported:
    """Test is_supported function."""

    def test_linux_x86_64(self):
        assert is_supported(LINUX, X86_64) is True

    def test_macos_arm(self):
        assert is_supported(MACOS, AARCH64) is True

    def test_windows_i686(self):
        assert is_supported(WINDOWS, I686) is True

    def test_i686_only_on_windows(self):
        """Test 32-bit artifacts exist only for Windows."""
        assert is_supported(LINUX, I686) is False
        assert is_supported(MACOS, I686) is False

    def test_unknown_platform(self):
        assert is_supported("unknown-freebsd", X86_64) is False
