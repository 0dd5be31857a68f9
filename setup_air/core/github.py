"""
GitHub releases API client.

Only the two release queries setup-air needs are implemented: the full
(paginated) release list and the latest release. HTTP errors are raised as
`requests.HTTPError` without wrapping.
"""

import logging
import os
from typing import Any, Dict, Iterator, List, Optional

import requests

from setup_air.constants import DEFAULT_API_URL, OWNER, REPO

logger = logging.getLogger(__name__)

API_VERSION = "2022-11-28"
PAGE_SIZE = 100


def get_api_url() -> str:
    """Get the REST API base URL (GitHub Enterprise sets GITHUB_API_URL)."""
    return os.environ.get("GITHUB_API_URL") or DEFAULT_API_URL


class GitHubReleasesClient:
    """
    Queries releases of one repository.

    Example:
        >>> client = GitHubReleasesClient(token=os.environ["GITHUB_TOKEN"])
        >>> client.get_latest_tag()
        '0.4.1'
    """

    def __init__(
        self,
        token: Optional[str] = None,
        owner: str = OWNER,
        repo: str = REPO,
        api_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: int = 30,
    ):
        self.owner = owner
        self.repo = repo
        self.api_url = (api_url or get_api_url()).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(self._headers(token))

    @staticmethod
    def _headers(token: Optional[str]) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": "setup-air",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    @property
    def releases_url(self) -> str:
        return f"{self.api_url}/repos/{self.owner}/{self.repo}/releases"

    def _get(self, url: str, params: Optional[Dict[str, Any]] = None):
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response

    def iter_releases(self) -> Iterator[Dict[str, Any]]:
        """
        Yield every release, following the Link header across pages.
        """
        url: Optional[str] = self.releases_url
        params: Optional[Dict[str, Any]] = {"per_page": PAGE_SIZE}
        page = 0

        while url:
            response = self._get(url, params=params)
            page += 1
            releases = response.json()
            logger.debug(f"Fetched page {page} with {len(releases)} releases")
            yield from releases

            next_link = response.links.get("next")
            url = next_link["url"] if next_link else None
            # The next URL already carries the query string
            params = None

    def list_releases(self) -> List[Dict[str, Any]]:
        """Get all releases of the repository."""
        return list(self.iter_releases())

    def list_release_tags(self) -> List[str]:
        """Get the tag name of every release."""
        return [release["tag_name"] for release in self.iter_releases()]

    def get_latest_release(self) -> Dict[str, Any]:
        """Get the most recent non-prerelease, non-draft release."""
        return self._get(f"{self.releases_url}/latest").json()

    def get_latest_tag(self) -> str:
        """Get the tag name of the latest release."""
        return self.get_latest_release()["tag_name"]


__all__ = ["GitHubReleasesClient", "get_api_url"]
