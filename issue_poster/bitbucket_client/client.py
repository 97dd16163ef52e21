"""HTTP adapter for the Bitbucket 1.0 issues API."""

import logging

import httpx

from .. import __version__
from ..config import BitbucketSettings
from .models import IssueEntry

logger = logging.getLogger(__name__)


class BitbucketClientError(Exception):
    """Raised when the tracker answers with a non-success status."""

    def __init__(self, message: str, status_code: int, reason: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class BitbucketClient:
    """Bitbucket issues client using HTTP Basic authentication.

    Proxy settings are taken from the environment (``HTTPS_PROXY``,
    ``ALL_PROXY``, ``NO_PROXY``); proxy credentials belong in the proxy URL
    and are unrelated to the tracker credentials.
    """

    def __init__(
        self,
        username: str,
        password: str,
        settings: BitbucketSettings | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            username: Bitbucket username
            password: Bitbucket password or app password
            settings: API settings. If None, read from the environment.
        """
        self.settings = settings or BitbucketSettings.from_env()
        self._http = httpx.Client(
            auth=httpx.BasicAuth(username, password),
            headers={"User-Agent": f"bitbucket-issue-poster/{__version__}"},
            trust_env=True,
        )

    def close(self) -> None:
        if not self._http.is_closed:
            self._http.close()

    def __enter__(self) -> "BitbucketClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def create_issue(self, repository: str, entry: IssueEntry) -> httpx.Response:
        """Create a single issue.

        Args:
            repository: Repository in ``owner/slug`` format.
            entry: Issue to create.

        Returns:
            The successful tracker response.

        Raises:
            BitbucketClientError: On any non-2xx response.
            httpx.TransportError: When the request cannot be sent or answered.
        """
        url = self.settings.issues_url(repository)
        logger.debug("POST %s (title=%r)", url, entry.title)
        resp = self._http.post(url, data=entry.to_form())
        logger.debug("%s -> %s %s", url, resp.status_code, resp.reason_phrase)
        self._raise_for_status(resp)
        return resp

    def _raise_for_status(self, resp: httpx.Response) -> None:
        if not resp.is_success:
            raise BitbucketClientError(
                f"Bitbucket API error {resp.status_code}: {resp.reason_phrase}",
                status_code=resp.status_code,
                reason=resp.reason_phrase,
            )
