"""
Version resolution against published Air releases.
"""

import logging
from typing import Optional

from setup_air.core.exceptions import VersionNotFoundError
from setup_air.core.github import GitHubReleasesClient
from setup_air.core.versions import evaluate_versions, is_explicit_version

logger = logging.getLogger(__name__)

LATEST = "latest"


def resolve_version(
    version_input: str,
    github_token: Optional[str],
    client: Optional[GitHubReleasesClient] = None,
) -> str:
    """
    Resolve a version specifier to an explicit release tag.

    "latest" becomes the tag of the latest release. Explicit versions are
    returned unchanged without listing releases. Ranges are evaluated
    against every release tag and the highest match wins.

    Args:
        version_input: "latest", an explicit version or a range
        github_token: Token for the releases API
        client: Releases client (default: one for posit-dev/air)

    Returns:
        Explicit version string

    Raises:
        VersionNotFoundError: If no release tag satisfies the range
        requests.HTTPError: If the releases API rejects a request

    Example:
        >>> resolve_version("0.4.x", token)
        '0.4.1'
    """
    logger.debug(f"Resolving {version_input}...")
    if client is None:
        client = GitHubReleasesClient(token=github_token)

    version = client.get_latest_tag() if version_input == LATEST else version_input

    if is_explicit_version(version):
        logger.debug(f"Version {version} is an explicit version.")
        return version

    available_versions = client.list_release_tags()
    resolved_version = evaluate_versions(available_versions, version)
    if resolved_version == "":
        raise VersionNotFoundError(version)

    logger.debug(f"Resolved version: {resolved_version}")
    return resolved_version
