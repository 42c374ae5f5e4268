"""Read-only GitHub client for pull request metadata and diffs."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..config import GITHUB_API_URL, GITHUB_DIFF_URL, USER_AGENT
from ..errors import DiffFetchError, MalformedResponseError, MetadataFetchError
from .models import PullRequestRecord, PullRequestReference

logger = logging.getLogger(__name__)


class PullRequestClient:
    """Fetches pull request metadata and raw diffs over the GitHub REST API.

    Each call opens its own connection and holds no state between calls, so
    one instance can serve concurrent requests.
    """

    def __init__(
        self,
        token: str | None = None,
        api_url: str = GITHUB_API_URL,
        diff_url: str = GITHUB_DIFF_URL,
    ):
        """Initialize the client.

        Args:
            token: GitHub personal access token, sent with metadata requests only
            api_url: Base URL of the REST API
            diff_url: Base URL of the raw diff host
        """
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.diff_url = diff_url.rstrip("/")
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": USER_AGENT,
        }
        if token:
            self.headers["Authorization"] = f"token {token}"

    def _http_client(self) -> httpx.AsyncClient:
        # No request timeout
        return httpx.AsyncClient(timeout=None, follow_redirects=True)

    def metadata_url(self, ref: PullRequestReference) -> str:
        return f"{self.api_url}/repos/{ref.owner}/{ref.repository}/pulls/{ref.number}"

    def diff_url_for(self, ref: PullRequestReference) -> str:
        return (
            f"{self.diff_url}/raw/{ref.owner}/{ref.repository}"
            f"/pull/{ref.number}.diff"
        )

    async def fetch_metadata(self, ref: PullRequestReference) -> PullRequestRecord:
        """Fetch pull request metadata.

        Args:
            ref: Pull request to fetch

        Returns:
            Decoded PullRequestRecord

        Raises:
            MetadataFetchError: If GitHub returns a non-success status, the
                request fails in transport, or the reference does not form a
                valid URL
            MalformedResponseError: If the body is not a pull request object
        """
        url = self.metadata_url(ref)
        logger.debug("Fetching pull request metadata: %s", url)

        try:
            async with self._http_client() as client:
                response = await client.get(url, headers=self.headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Metadata request for %s failed: %s", ref, e)
            raise MetadataFetchError(None, str(e) or type(e).__name__) from e

        logger.debug("Metadata response for %s: %s", ref, response.status_code)
        if not response.is_success:
            logger.warning(
                "Metadata request for %s returned %s", ref, response.status_code
            )
            raise MetadataFetchError(response.status_code, response.reason_phrase)

        try:
            data: Any = response.json()
            return PullRequestRecord.model_validate(data)
        except ValueError as e:
            # JSONDecodeError and pydantic's ValidationError
            logger.warning("Malformed metadata response for %s: %s", ref, e)
            raise MalformedResponseError(None, _summarize_error(e)) from e

    async def fetch_diff(self, ref: PullRequestReference) -> str:
        """Fetch the unified diff of a pull request.

        The request is unauthenticated and the body is returned verbatim.

        Raises:
            DiffFetchError: If the diff host returns a non-success status, the
                request fails in transport, or the reference does not form a
                valid URL
        """
        url = self.diff_url_for(ref)
        logger.debug("Fetching pull request diff: %s", url)

        try:
            async with self._http_client() as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Diff request for %s failed: %s", ref, e)
            raise DiffFetchError(None, str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.warning("Diff request for %s returned %s", ref, response.status_code)
            raise DiffFetchError(response.status_code, response.reason_phrase)

        logger.debug("Fetched %d characters of diff for %s", len(response.text), ref)
        return response.text


def _summarize_error(error: Exception) -> str:
    if isinstance(error, ValidationError):
        fields = sorted(
            {
                ".".join(str(part) for part in err["loc"]) or "body"
                for err in error.errors()
            }
        )
        return f"missing or invalid fields: {', '.join(fields)}"
    return str(error)
