"""Request handling for the get_pr_context tool and the help resource."""

import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictStr,
    ValidationError,
    field_validator,
)

from .errors import (
    FetchError,
    IdentifierNotRecognizedError,
    InvalidArgumentsError,
    PullRequestContextError,
    UnknownResourceError,
)
from .formatting import format_pr_context
from .github_client.client import PullRequestClient
from .github_client.identifiers import parse_pr_identifier

logger = logging.getLogger(__name__)

TOOL_NAME = "get_pr_context"
TOOL_DESCRIPTION = (
    "Fetch detailed context about a GitHub pull request. Accepts PR identifiers "
    "in formats like 'owner/repo/pull/123', 'owner/repo#123', or full GitHub URLs."
)
TOOL_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "identifier": {
            "type": "string",
            "description": (
                "PR identifier (e.g., 'facebook/react/pull/12345' or "
                "'facebook/react#12345')"
            ),
        },
        "include_diff": {
            "type": "boolean",
            "description": (
                "Whether to include the full diff content in the response "
                "(default: true)"
            ),
        },
    },
    "required": ["identifier"],
}

HELP_URI = "pr://help"
HELP_NAME = "Pull Request Help"
HELP_DESCRIPTION = "Information on how to use this MCP server"
HELP_TEXT = """Pull Request Context MCP Server

This server provides tools to fetch GitHub pull request information.

Usage:
1. Use the 'get_pr_context' tool with a PR identifier
2. Supported formats:
   - owner/repo/pull/123
   - owner/repo#123
   - https://github.com/owner/repo/pull/123

Example: get_pr_context with identifier "facebook/react/pull/12345"

Environment Variables:
- GITHUB_TOKEN: Optional GitHub personal access token for higher rate limits
"""

_TYPE_NAMES = {"identifier": "a string", "include_diff": "a boolean"}


class GetPRContextArgs(BaseModel):
    """Arguments accepted by the get_pr_context tool."""

    model_config = ConfigDict(extra="ignore")

    identifier: StrictStr
    include_diff: StrictBool = True

    @field_validator("include_diff", mode="before")
    @classmethod
    def _null_means_default(cls, value: Any) -> Any:
        return True if value is None else value


def validate_arguments(arguments: dict[str, Any] | None) -> GetPRContextArgs:
    """Validate raw tool arguments.

    Raises:
        InvalidArgumentsError: If a field is missing or has the wrong type
    """
    try:
        return GetPRContextArgs.model_validate(arguments or {})
    except ValidationError as e:
        first_error = e.errors()[0]
        field = str(first_error["loc"][0]) if first_error["loc"] else "arguments"
        expected = _TYPE_NAMES.get(field)
        if expected:
            raise InvalidArgumentsError(f"{field} must be {expected}") from None
        raise InvalidArgumentsError(
            f"Invalid value for {field}: {first_error['msg']}"
        ) from None


async def get_pr_context(
    client: PullRequestClient, identifier: str, include_diff: bool = True
) -> str:
    """Resolve an identifier, fetch the pull request, and format its context.

    The diff is only requested after the metadata fetch succeeds.

    Raises:
        IdentifierNotRecognizedError: If the identifier cannot be parsed
        PullRequestContextError: If the metadata or diff fetch fails
    """
    ref = parse_pr_identifier(identifier)
    if ref is None:
        raise IdentifierNotRecognizedError(identifier)

    logger.info("Fetching context for %s (include_diff=%s)", ref, include_diff)
    try:
        pr = await client.fetch_metadata(ref)
        diff = await client.fetch_diff(ref) if include_diff else None
    except FetchError as e:
        raise PullRequestContextError(e) from e

    return format_pr_context(pr, diff)


async def handle_get_pr_context(
    client: PullRequestClient, arguments: dict[str, Any] | None
) -> str:
    """Validate tool arguments and run get_pr_context."""
    args = validate_arguments(arguments)
    return await get_pr_context(client, args.identifier, args.include_diff)


def read_help_resource(uri: str) -> str:
    """Return the text of a static resource.

    Raises:
        UnknownResourceError: For any URI other than the help resource
    """
    if uri == HELP_URI:
        return HELP_TEXT
    raise UnknownResourceError(uri)
