"""Tests for the pull request client."""

from typing import Any

import httpx
import pytest
import respx

from pr_context.errors import (
    DiffFetchError,
    MalformedResponseError,
    MetadataFetchError,
)
from pr_context.github_client.client import PullRequestClient
from pr_context.github_client.models import PullRequestReference

API_URL = "https://api.github.com/repos/octo/widgets/pulls/7"
DIFF_URL = "https://patch-diff.githubusercontent.com/raw/octo/widgets/pull/7.diff"
SAMPLE_DIFF = (
    "diff --git a/w.py b/w.py\n--- a/w.py\n+++ b/w.py\n"
    "@@ -1 +1,2 @@\n import os\n+import sys\n"
)


class TestPullRequestClient:
    """Test PullRequestClient class."""

    def test_urls(
        self, client: PullRequestClient, pr_ref: PullRequestReference
    ) -> None:
        assert client.metadata_url(pr_ref) == API_URL
        assert client.diff_url_for(pr_ref) == DIFF_URL

    def test_custom_base_urls(self, pr_ref: PullRequestReference) -> None:
        """Test base URLs are configurable and trailing slashes ignored."""
        client = PullRequestClient(
            api_url="https://ghe.example.com/api/v3/",
            diff_url="https://ghe.example.com/",
        )
        assert (
            client.metadata_url(pr_ref)
            == "https://ghe.example.com/api/v3/repos/octo/widgets/pulls/7"
        )
        assert (
            client.diff_url_for(pr_ref)
            == "https://ghe.example.com/raw/octo/widgets/pull/7.diff"
        )

    def test_headers_without_token(self) -> None:
        client = PullRequestClient()
        assert client.headers == {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "pull-request-context-mcp",
        }

    def test_headers_with_token(self) -> None:
        client = PullRequestClient(token="secret")
        assert client.headers["Authorization"] == "token secret"

    @pytest.mark.asyncio
    async def test_fetch_metadata_success(
        self, pr_payload: dict[str, Any], pr_ref: PullRequestReference
    ) -> None:
        """Test metadata is fetched with the expected headers and decoded."""
        client = PullRequestClient(token="secret")
        with respx.mock:
            route = respx.get(API_URL).mock(
                return_value=httpx.Response(200, json=pr_payload)
            )
            pr = await client.fetch_metadata(pr_ref)

        assert route.call_count == 1
        request = route.calls.last.request
        assert request.headers["Accept"] == "application/vnd.github.v3+json"
        assert request.headers["User-Agent"] == "pull-request-context-mcp"
        assert request.headers["Authorization"] == "token secret"
        assert pr.title == "Add widgets"
        assert pr.additions == 12

    @pytest.mark.asyncio
    async def test_fetch_metadata_unauthenticated(
        self,
        client: PullRequestClient,
        pr_payload: dict[str, Any],
        pr_ref: PullRequestReference,
    ) -> None:
        with respx.mock:
            route = respx.get(API_URL).mock(
                return_value=httpx.Response(200, json=pr_payload)
            )
            await client.fetch_metadata(pr_ref)

        assert "Authorization" not in route.calls.last.request.headers

    @pytest.mark.asyncio
    async def test_fetch_metadata_not_found(
        self, client: PullRequestClient, pr_ref: PullRequestReference
    ) -> None:
        """Test non-success status carries code and status text."""
        with respx.mock:
            respx.get(API_URL).mock(
                return_value=httpx.Response(404, json={"message": "Not Found"})
            )
            with pytest.raises(MetadataFetchError) as exc_info:
                await client.fetch_metadata(pr_ref)

        assert exc_info.value.status_code == 404
        assert exc_info.value.reason == "Not Found"
        assert str(exc_info.value) == "GitHub API request failed: 404 Not Found"

    @pytest.mark.asyncio
    async def test_fetch_metadata_malformed(
        self, client: PullRequestClient, pr_ref: PullRequestReference
    ) -> None:
        """Test a body missing required fields is rejected up front."""
        with respx.mock:
            respx.get(API_URL).mock(
                return_value=httpx.Response(200, json={"number": 7})
            )
            with pytest.raises(MalformedResponseError) as exc_info:
                await client.fetch_metadata(pr_ref)

        assert exc_info.value.status_code is None
        assert "title" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_fetch_metadata_invalid_json(
        self, client: PullRequestClient, pr_ref: PullRequestReference
    ) -> None:
        with respx.mock:
            respx.get(API_URL).mock(return_value=httpx.Response(200, text="<html>"))
            with pytest.raises(MalformedResponseError):
                await client.fetch_metadata(pr_ref)

    @pytest.mark.asyncio
    async def test_fetch_metadata_transport_error(
        self, client: PullRequestClient, pr_ref: PullRequestReference
    ) -> None:
        with respx.mock:
            respx.get(API_URL).mock(
                side_effect=httpx.ConnectError("connection refused")
            )
            with pytest.raises(MetadataFetchError) as exc_info:
                await client.fetch_metadata(pr_ref)

        assert exc_info.value.status_code is None
        assert "connection refused" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_fetch_metadata_unusable_url(self, client: PullRequestClient) -> None:
        """Test a reference with control characters fails as a fetch error."""
        ref = PullRequestReference(owner="oc\x01to", repository="widgets", number=7)
        with respx.mock(assert_all_called=False) as router:
            with pytest.raises(MetadataFetchError) as exc_info:
                await client.fetch_metadata(ref)

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)
        assert router.calls.call_count == 0

    @pytest.mark.asyncio
    async def test_fetch_diff_unusable_url(self, client: PullRequestClient) -> None:
        ref = PullRequestReference(owner="octo", repository="wid\tgets", number=7)
        with respx.mock(assert_all_called=False) as router:
            with pytest.raises(DiffFetchError) as exc_info:
                await client.fetch_diff(ref)

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)
        assert router.calls.call_count == 0

    @pytest.mark.asyncio
    async def test_fetch_diff_success(self, pr_ref: PullRequestReference) -> None:
        """Test the diff is fetched without credentials and returned verbatim."""
        client = PullRequestClient(token="secret")
        big_diff = SAMPLE_DIFF * 200
        with respx.mock:
            route = respx.get(DIFF_URL).mock(
                return_value=httpx.Response(200, text=big_diff)
            )
            diff = await client.fetch_diff(pr_ref)

        assert diff == big_diff
        assert "Authorization" not in route.calls.last.request.headers

    @pytest.mark.asyncio
    async def test_fetch_diff_follows_redirect(
        self, client: PullRequestClient, pr_ref: PullRequestReference
    ) -> None:
        canonical = "https://github.com/octo/widgets/pull/7.diff"
        with respx.mock:
            respx.get(DIFF_URL).mock(
                return_value=httpx.Response(302, headers={"Location": canonical})
            )
            respx.get(canonical).mock(
                return_value=httpx.Response(200, text=SAMPLE_DIFF)
            )
            diff = await client.fetch_diff(pr_ref)

        assert diff == SAMPLE_DIFF

    @pytest.mark.asyncio
    async def test_fetch_diff_failure(
        self, client: PullRequestClient, pr_ref: PullRequestReference
    ) -> None:
        with respx.mock:
            respx.get(DIFF_URL).mock(return_value=httpx.Response(500))
            with pytest.raises(DiffFetchError) as exc_info:
                await client.fetch_diff(pr_ref)

        assert exc_info.value.status_code == 500
        assert (
            str(exc_info.value) == "Failed to fetch PR diff: 500 Internal Server Error"
        )
