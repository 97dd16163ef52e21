"""Configuration for the Bitbucket API connection."""

import os

DEFAULT_API_URL = "https://api.bitbucket.org/1.0"


class BitbucketSettings:
    """Settings for the Bitbucket issues API, read from environment variables."""

    def __init__(self, api_url: str = DEFAULT_API_URL) -> None:
        self.api_url = api_url.rstrip("/")

    @classmethod
    def from_env(cls) -> "BitbucketSettings":
        """Build settings from ``BITBUCKET_API_URL`` (falls back to the public API)."""
        return cls(api_url=os.getenv("BITBUCKET_API_URL") or DEFAULT_API_URL)

    def issues_url(self, repository: str) -> str:
        """Issue-creation endpoint for an ``owner/slug`` repository."""
        return f"{self.api_url}/repositories/{repository}/issues"
