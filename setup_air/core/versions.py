"""
Semantic version helpers for release tags and cached versions.

Users write npm-style ranges ("1.x", "^0.4", "~0.4.1", ">=0.3 <0.5",
"0.3 || 0.4"), the notation release tooling on GitHub Actions uses. Ranges
are evaluated with `node-semver`, a port of npm's semver package. Release
tags may carry a leading "v".
"""

import logging
from typing import Iterable, List, Optional

import nodesemver

logger = logging.getLogger(__name__)


def clean_version(version: str) -> Optional[str]:
    """
    Normalize an explicit version string.

    Pre-release and build suffixes keep their semver form.

    Returns:
        The bare version ("v1.0.0-rc.1" -> "1.0.0-rc.1"), or None if not explicit

    Example:
        >>> clean_version("v0.4.1")
        '0.4.1'
        >>> clean_version("0.x") is None
        True
    """
    cleaned = nodesemver.clean(version.strip(), True)
    if cleaned is None or nodesemver.valid(cleaned, False) is None:
        return None
    return cleaned


def is_explicit_version(version_spec: str) -> bool:
    """
    Check whether a specifier names exactly one version.

    An explicit version has exactly major, minor and patch components,
    optionally prefixed with "v" and optionally a pre-release.

    Example:
        >>> is_explicit_version("v0.4.1")
        True
        >>> is_explicit_version("0.x")
        False
        >>> is_explicit_version("latest")
        False
    """
    valid = clean_version(version_spec) is not None
    logger.debug(f"isExplicit: {version_spec} -> {valid}")
    return valid


def _semver_only(versions: Iterable[str]) -> List[str]:
    candidates = []
    for version in versions:
        if not is_explicit_version(version):
            logger.debug(f"Ignoring non-semver version: {version}")
            continue
        candidates.append(version.strip())
    return candidates


def sort_versions(versions: Iterable[str]) -> List[str]:
    """
    Sort version strings ascending, dropping anything that is not a version.
    """
    return nodesemver.sort(_semver_only(versions), True)


def evaluate_versions(versions: Iterable[str], version_spec: str) -> str:
    """
    Pick the highest version satisfying a range.

    Pre-releases only match ranges that name a pre-release of the same
    major.minor.patch, as in npm.

    Args:
        versions: Candidate versions (release tags or cached versions)
        version_spec: npm-style range

    Returns:
        The matching version as given in `versions`, or "" when none matches
        or the range is not a range

    Example:
        >>> evaluate_versions(["1.0.0", "1.5.2", "2.0.0"], "1.x")
        '1.5.2'
    """
    candidates = _semver_only(versions)
    logger.debug(f"evaluating {len(candidates)} versions")

    try:
        version_range = nodesemver.make_range(version_spec, True)
    except ValueError:
        logger.debug(f"Not a version range: {version_spec}")
        return ""

    matched = nodesemver.max_satisfying(candidates, version_range, loose=True)
    if matched is None:
        logger.debug("match not found")
        return ""

    logger.debug(f"matched: {matched}")
    return matched


__all__ = [
    "clean_version",
    "is_explicit_version",
    "sort_versions",
    "evaluate_versions",
]
