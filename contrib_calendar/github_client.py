"""
GitHub API client for fetching public user profiles.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from contrib_calendar import config

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "User not found or API rate limit exceeded"
NO_BIO_PLACEHOLDER = "No bio available"


class GitHubClientError(Exception):
    """Base exception for GitHub client errors."""

    pass


class GitHubClient:
    """Client for the public GitHub REST API."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize the GitHub client.

        Args:
            base_url: API root. Defaults to GITHUB_API_URL.
            timeout: Request timeout in seconds. Defaults to GITHUB_TIMEOUT.
        """
        self.base_url = (base_url or config.GITHUB_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.get_timeout()
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "contrib-calendar",
            }
        )

    def get_user(self, username: str) -> dict:
        """
        Fetch the public profile record for a user.

        Args:
            username: GitHub login to look up

        Returns:
            User dictionary from the GitHub API

        Raises:
            GitHubClientError: If the request fails or returns a non-2xx status
        """
        # Escape every reserved character so the path stays on /users/
        url = f"{self.base_url}/users/{requests.utils.quote(username, safe='')}"
        logger.debug("GET %s", url)

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("GitHub request for %s failed: %s", username, e)
            raise GitHubClientError("Could not reach the GitHub API") from e

        if not response.ok:
            # 404 and 403 (rate limit) are reported the same way
            logger.warning(
                "GitHub returned %s for user %s (remaining requests: %s)",
                response.status_code,
                username,
                response.headers.get("X-RateLimit-Remaining", "unknown"),
            )
            raise GitHubClientError(NOT_FOUND_MESSAGE)

        try:
            payload = response.json()
        except ValueError as e:
            raise GitHubClientError("GitHub returned an invalid response") from e

        if not isinstance(payload, dict):
            raise GitHubClientError("GitHub returned an invalid response")

        return payload


@dataclass
class UserProfile:
    """Profile fields shown in the user info panel."""

    login: str
    display_name: str
    avatar_url: str
    bio: str
    public_repos: int
    followers: int
    following: int
    public_gists: int

    @classmethod
    def from_api(cls, payload: dict) -> "UserProfile":
        """
        Build a profile from a GitHub user record, applying display fallbacks.

        A missing name falls back to the login, a missing bio to a fixed
        placeholder and missing counts to 0.
        """
        login = payload.get("login") or ""
        return cls(
            login=login,
            display_name=payload.get("name") or login,
            avatar_url=payload.get("avatar_url") or "",
            bio=payload.get("bio") or NO_BIO_PLACEHOLDER,
            public_repos=payload.get("public_repos") or 0,
            followers=payload.get("followers") or 0,
            following=payload.get("following") or 0,
            public_gists=payload.get("public_gists") or 0,
        )


def fetch_profile(username: str, client: Optional[GitHubClient] = None) -> UserProfile:
    """
    Look up a user and return their display profile.

    Raises:
        GitHubClientError: If the lookup fails
    """
    if client is None:
        client = GitHubClient()
    return UserProfile.from_api(client.get_user(username))
