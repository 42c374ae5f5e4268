"""GitHub client package for pull request lookups."""

from .client import PullRequestClient
from .identifiers import parse_pr_identifier
from .models import (
    GitBranchRef,
    GitHubUser,
    Mergeability,
    PullRequestRecord,
    PullRequestReference,
)

__all__ = [
    "PullRequestClient",
    "parse_pr_identifier",
    "GitBranchRef",
    "GitHubUser",
    "Mergeability",
    "PullRequestRecord",
    "PullRequestReference",
]
