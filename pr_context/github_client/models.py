"""Pydantic models for GitHub pull request data.

PullRequestRecord maps the subset of the REST API pull request object that
the context formatter renders.
API Reference: https://docs.github.com/en/rest/pulls/pulls#get-a-pull-request
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Mergeability(str, Enum):
    """Three-valued reading of the nullable ``mergeable`` flag.

    GitHub computes mergeability in the background and reports null until
    the computation finishes.
    """

    MERGEABLE = "mergeable"
    CONFLICTING = "conflicting"
    UNKNOWN = "unknown"

    @classmethod
    def from_flag(cls, flag: bool | None) -> "Mergeability":
        if flag is None:
            return cls.UNKNOWN
        return cls.MERGEABLE if flag else cls.CONFLICTING


class PullRequestReference(BaseModel):
    """Canonical (owner, repository, number) triple for one pull request."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1, description="Repository owner login")
    repository: str = Field(..., min_length=1, description="Repository name")
    number: int = Field(..., ge=0, description="Pull request number")

    def __str__(self) -> str:
        return f"{self.owner}/{self.repository}#{self.number}"


class GitHubUser(BaseModel):
    """GitHub user account, reduced to the login.

    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")


class GitBranchRef(BaseModel):
    """Head or base side of a pull request."""

    ref: str = Field(..., description="Branch name (string)")
    sha: str = Field(..., description="Commit SHA the branch points at (string)")


class PullRequestRecord(BaseModel):
    """Read-only snapshot of a GitHub pull request.

    Fields not listed here are ignored when decoding the API response.
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="Pull request number (integer)")
    title: str = Field(..., description="Pull request title (string)")
    body: str | None = Field(
        None, description="Pull request description in markdown (string or null)"
    )
    state: str = Field(..., description="Lifecycle state: 'open', 'closed' (string)")
    user: GitHubUser = Field(..., description="Author of the pull request")
    created_at: datetime = Field(..., description="Creation timestamp (ISO 8601)")
    updated_at: datetime = Field(..., description="Last update timestamp (ISO 8601)")
    html_url: str = Field(..., description="Canonical web URL (string)")
    head: GitBranchRef = Field(..., description="Source branch")
    base: GitBranchRef = Field(..., description="Target branch")
    merged: bool = Field(False, description="Whether the pull request was merged")
    mergeable: bool | None = Field(
        None, description="Whether GitHub can merge cleanly; null while computing"
    )
    additions: int = Field(0, description="Lines added (integer)")
    deletions: int = Field(0, description="Lines deleted (integer)")
    changed_files: int = Field(0, description="Number of changed files (integer)")

    @property
    def mergeability(self) -> Mergeability:
        return Mergeability.from_flag(self.mergeable)
