"""GitHub API client for fetching releases."""

import logging

import httpx

from pwshup import __version__
from pwshup.core.errors import CatalogFetchError
from pwshup.models.release import Release

logger = logging.getLogger(__name__)


GITHUB_API_BASE = "https://api.github.com"


class GitHubClient:
    """Client for the release list of a single repository."""

    def __init__(
        self,
        repo: str,
        token: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.repo = repo
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"pwshup/{__version__}",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        else:
            logger.warning(
                "No GitHub token provided; unauthenticated requests are rate limited"
            )

        self.client = httpx.Client(
            base_url=GITHUB_API_BASE,
            headers=headers,
            timeout=30.0,
            follow_redirects=True,
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.client.close()

    def get_releases(self, per_page: int = 100) -> list[Release]:
        """Get published releases, newest first.

        Raises:
            CatalogFetchError: on transport failure, non-success status or a
                payload that cannot be decoded
        """
        try:
            response = self.client.get(
                f"/repos/{self.repo}/releases",
                params={"per_page": per_page},
            )
        except httpx.HTTPError as e:
            raise CatalogFetchError(
                f"Failed to fetch releases for {self.repo}: {e}"
            ) from e

        if response.status_code == 404:
            raise CatalogFetchError(f"Repository {self.repo} not found")
        if response.status_code in (403, 429):
            raise CatalogFetchError(
                "GitHub API rate limit exceeded; pass a token to raise the limit",
                {"status": response.status_code},
            )
        try:
            response.raise_for_status()
            payload = response.json()
            releases = []
            for data in payload:
                release = Release.from_api_response(data)
                if not release.draft:  # Skip draft releases
                    releases.append(release)
        except httpx.HTTPStatusError as e:
            raise CatalogFetchError(
                f"Failed to fetch releases for {self.repo}: {e}",
                {"status": response.status_code},
            ) from e
        except (ValueError, KeyError, TypeError) as e:
            raise CatalogFetchError(
                f"Unexpected release payload for {self.repo}: {e}"
            ) from e

        logger.debug("Fetched %d releases for %s", len(releases), self.repo)
        return releases
