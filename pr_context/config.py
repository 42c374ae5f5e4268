"""Configuration for the pull request context server."""

import os
from typing import Optional

GITHUB_API_URL = "https://api.github.com"
GITHUB_DIFF_URL = "https://patch-diff.githubusercontent.com"
USER_AGENT = "pull-request-context-mcp"


class ServerConfig:
    """Configuration read once from the environment at process start."""

    def __init__(self, github_token: Optional[str] = None) -> None:
        """Initialize configuration.

        Args:
            github_token: Explicit token. If None, reads GITHUB_TOKEN.
        """
        token = github_token if github_token is not None else os.getenv("GITHUB_TOKEN")
        # An empty GITHUB_TOKEN behaves like an unset one
        self.github_token: Optional[str] = token or None
        self.api_url: str = GITHUB_API_URL
        self.diff_url: str = GITHUB_DIFF_URL

    def is_authenticated(self) -> bool:
        """Check if a GitHub token is available."""
        return self.github_token is not None
