"""Pull request identifier parsing.

Accepted forms, tried in order:
- https://github.com/owner/repo/pull/123 (or /pulls/123)
- owner/repo/pull/123 (or owner/repo/pulls/123)
- owner/repo#123
"""

import re

from .models import PullRequestReference

GITHUB_URL_PREFIX = re.compile(r"^https?://github\.com/")
PULL_PATH_PATTERN = re.compile(r"([^/]+)/([^/]+)/pulls?/([0-9]+)")
SHORTHAND_PATTERN = re.compile(r"([^/]+)/([^#]+)#([0-9]+)")


def parse_pr_identifier(identifier: str) -> PullRequestReference | None:
    """Parse a human-typed pull request identifier.

    Args:
        identifier: Identifier in one of the accepted forms

    Returns:
        PullRequestReference, or None if the identifier is not recognized

    Example:
        >>> parse_pr_identifier("octo/widgets/pull/42")
        PullRequestReference(owner='octo', repository='widgets', number=42)
    """
    cleaned = GITHUB_URL_PREFIX.sub("", identifier, count=1)

    for pattern in (PULL_PATH_PATTERN, SHORTHAND_PATTERN):
        match = pattern.fullmatch(cleaned)
        if match:
            owner, repository, number = match.groups()
            return PullRequestReference(
                owner=owner, repository=repository, number=int(number, 10)
            )

    return None
