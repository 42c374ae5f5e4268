"""Exceptions raised while serving pull request context."""


class PRContextError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentsError(PRContextError):
    """Tool arguments failed validation before any network call."""


class IdentifierNotRecognizedError(PRContextError):
    """A pull request identifier matched none of the accepted shapes."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"Invalid PR identifier format: {identifier}. "
            "Use formats like 'owner/repo/pull/123' or 'owner/repo#123'"
        )


class FetchError(PRContextError):
    """A request to GitHub did not produce a usable response.

    Attributes:
        status_code: HTTP status returned by GitHub, or None when the request
            never got a response
        reason: Status text or transport error description
    """

    prefix = "GitHub request failed"

    def __init__(self, status_code: int | None, reason: str):
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            detail = reason
        else:
            detail = f"{status_code} {reason}".rstrip()
        super().__init__(f"{self.prefix}: {detail}")


class MetadataFetchError(FetchError):
    """The pull request metadata request failed."""

    prefix = "GitHub API request failed"


class MalformedResponseError(MetadataFetchError):
    """GitHub answered but the body is not a pull request record."""

    prefix = "Malformed GitHub API response"


class DiffFetchError(FetchError):
    """The raw diff request failed."""

    prefix = "Failed to fetch PR diff"


class PullRequestContextError(PRContextError):
    """Wraps a fetch failure with the name of the overall operation."""

    def __init__(self, cause: FetchError):
        self.cause = cause
        super().__init__(f"Failed to fetch PR: {cause}")


class UnknownToolError(PRContextError):
    """A tool name that this server does not provide."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class UnknownResourceError(PRContextError):
    """A resource URI that this server does not provide."""

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"Unknown resource: {uri}")
