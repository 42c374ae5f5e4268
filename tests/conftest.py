"""Test configuration and fixtures."""

import logging
from collections.abc import Iterator
from typing import Any

import pytest

from pr_context.github_client.client import PullRequestClient
from pr_context.github_client.models import PullRequestRecord, PullRequestReference

API_URL = "https://api.github.com/repos/octo/widgets/pulls/7"


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Remove the handler and level set by setup_logging after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if getattr(h, "_pr_context", False)]:
        root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def pr_payload() -> dict[str, Any]:
    """GitHub REST API pull request object, trimmed to realistic fields."""
    return {
        "url": API_URL,
        "id": 1001,
        "number": 7,
        "title": "Add widgets",
        "body": "Adds the widget registry.",
        "state": "open",
        "user": {"login": "octocat", "id": 1},
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-01-16T08:00:00Z",
        "html_url": "https://github.com/octo/widgets/pull/7",
        "head": {"ref": "feature/widgets", "sha": "abc123", "label": "octo:feature"},
        "base": {"ref": "main", "sha": "def456", "label": "octo:main"},
        "merged": False,
        "mergeable": True,
        "additions": 12,
        "deletions": 3,
        "changed_files": 2,
        "comments": 0,
    }


@pytest.fixture
def pr_record(pr_payload: dict[str, Any]) -> PullRequestRecord:
    return PullRequestRecord.model_validate(pr_payload)


@pytest.fixture
def pr_ref() -> PullRequestReference:
    return PullRequestReference(owner="octo", repository="widgets", number=7)


@pytest.fixture
def client() -> PullRequestClient:
    return PullRequestClient()
