"""
Unit tests for version helpers.
"""

import pytest

from setup_air.core.versions import (
    clean_version,
    evaluate_versions,
    is_explicit_version,
    sort_versions,
)


class TestIsExplicitVersion:
    """Test is_explicit_version function."""

    @pytest.mark.parametrize(
        "version", ["1.2.3", "v1.2.3", "0.4.1", "10.20.30", "1.0.0-rc.1"]
    )
    def test_explicit(self, version):
        """Test full versions with or without a v prefix are explicit."""
        assert is_explicit_version(version) is True

    @pytest.mark.parametrize(
        "version", ["latest", "1.x", "1", "1.2", "^1.2.3", ">=1.0.0", "", "1.2.3.4"]
    )
    def test_not_explicit(self, version):
        """Test ranges, partial versions and keywords are not explicit."""
        assert is_explicit_version(version) is False


class TestCleanVersion:
    """Test clean_version function."""

    def test_strips_v_prefix(self):
        """Test leading v is removed."""
        assert clean_version("v0.4.1") == "0.4.1"

    def test_plain_version_unchanged(self):
        assert clean_version("0.4.1") == "0.4.1"

    def test_prerelease_keeps_semver_form(self):
        """Test pre-release suffixes are not rewritten."""
        assert clean_version("v1.0.0-rc.1") == "1.0.0-rc.1"

    def test_surrounding_whitespace(self):
        assert clean_version(" v0.4.1 ") == "0.4.1"

    def test_range_is_none(self):
        """Test ranges have no clean form."""
        assert clean_version("0.x") is None


class TestSortVersions:
    """Test sort_versions function."""

    def test_sorts_semantically(self):
        """Test 1.10.0 sorts after 1.9.1."""
        assert sort_versions(["1.10.0", "1.2.0", "1.9.1"]) == [
            "1.2.0",
            "1.9.1",
            "1.10.0",
        ]

    def test_drops_non_versions(self):
        """Test non-semver names are dropped and tags keep their prefix."""
        assert sort_versions(["nightly", "0.2.0", "v0.1.0"]) == ["v0.1.0", "0.2.0"]

    def test_prerelease_sorts_before_release(self):
        assert sort_versions(["1.0.0", "1.0.0-rc.1"]) == ["1.0.0-rc.1", "1.0.0"]


class TestEvaluateVersions:
    """Test evaluate_versions function."""

    def test_picks_highest_match(self):
        """Test highest satisfying version wins."""
        assert evaluate_versions(["1.0.0", "1.5.2", "2.0.0"], "1.x") == "1.5.2"

    def test_order_independent(self):
        assert evaluate_versions(["2.0.0", "1.5.2", "1.0.0"], "1.x") == "1.5.2"

    def test_returns_original_tag(self):
        """Test the tag is returned as listed, prefix included."""
        assert evaluate_versions(["v0.3.0", "v0.4.1"], "0.x") == "v0.4.1"

    def test_no_match(self):
        assert evaluate_versions(["1.0.0", "1.5.2"], "3.x") == ""

    def test_empty_list(self):
        assert evaluate_versions([], "1.x") == ""

    def test_invalid_range_returns_empty(self):
        assert evaluate_versions(["1.0.0"], "latest") == ""

    def test_skips_prereleases_for_plain_range(self):
        """Test pre-releases need an explicit pre-release range."""
        assert evaluate_versions(["1.0.0", "1.1.0-rc.1"], "1.x") == "1.0.0"

    def test_prerelease_range_matches_prerelease(self):
        """Test a range naming a pre-release admits that release line."""
        assert (
            evaluate_versions(["1.0.0-rc.1", "1.0.0-rc.2"], ">=1.0.0-rc.1")
            == "1.0.0-rc.2"
        )

    def test_ignores_invalid_tags(self):
        assert evaluate_versions(["nightly", "1.0.0"], "1.x") == "1.0.0"

    @pytest.mark.parametrize(
        "versions,version_range,expected",
        [
            (["1.2.3", "1.9.9", "2.0.0"], "^1.2.3", "1.9.9"),
            (["0.4.1", "0.4.9", "0.5.0"], "^0.4.1", "0.4.9"),
            (["0.0.3", "0.0.4"], "^0.0.3", "0.0.3"),
            (["1.2.3", "1.2.9", "1.3.0"], "~1.2.3", "1.2.9"),
            (["0.9.0", "1.4.0", "2.0.0"], ">=1.0.0 <2.0.0", "1.4.0"),
            (["0.3.1", "0.4.2", "0.5.0"], "0.3.x || 0.5.x", "0.5.0"),
            (["1.0.0", "1.5.0", "1.6.0"], "1.0.0 - 1.5.0", "1.5.0"),
            (["0.1.0", "3.2.1"], "*", "3.2.1"),
        ],
    )
    def test_npm_ranges(self, versions, version_range, expected):
        """Test caret, tilde, comparator, union, hyphen and star ranges."""
        assert evaluate_versions(versions, version_range) == expected

    def test_greater_than_partial_excludes_its_patches(self):
        """Test >1.2 means 1.3.0 and above."""
        assert evaluate_versions(["1.2.5"], ">1.2") == ""

    def test_less_or_equal_partial_includes_its_patches(self):
        """Test <=1.2 admits every 1.2.x."""
        assert evaluate_versions(["1.2.0", "1.2.5", "1.3.0"], "<=1.2") == "1.2.5"

    def test_hyphen_range_with_partial_upper_bound(self):
        """Test 1.2 - 2 admits every 2.x but not 3.0.0."""
        versions = ["1.1.9", "1.2.0", "2.9.9", "3.0.0"]
        assert evaluate_versions(versions, "1.2 - 2") == "2.9.9"
