"""Pull request context formatting for language model consumption."""

from datetime import datetime

from .github_client.models import PullRequestRecord

MAX_DIFF_CHARS = 2000
TRUNCATION_MARKER = "\n...[truncated, see original for more]..."
NO_DESCRIPTION = "*No description provided*"


def format_timestamp(value: datetime) -> str:
    """Render a timestamp in local time using the locale's default format.

    Output depends on the TZ and LC_TIME of the running process.
    """
    return value.astimezone().strftime("%c")


def truncate_diff(diff: str, limit: int = MAX_DIFF_CHARS) -> str:
    """Keep the first ``limit`` characters of a diff, marking any cut."""
    if len(diff) > limit:
        return diff[:limit] + TRUNCATION_MARKER
    return diff


def format_pr_context(pr: PullRequestRecord, diff: str | None = None) -> str:
    """Build the tag-delimited context block for a pull request.

    Args:
        pr: Pull request metadata
        diff: Unified diff text; omitted from the output when None or empty

    Returns:
        Formatted context string
    """
    merged = " (merged)" if pr.merged else ""
    output = (
        f"<title> {pr.title} </title>\n"
        f"<pull_request>{pr.number} - {pr.state}{merged}</pull_request>\n"
        f"<author> {pr.user.login} </author>\n"
        f"<url> {pr.html_url} </url>\n"
        "\n"
        f"<branch> `{pr.head.ref}` → `{pr.base.ref}` </branch>\n"
        f"<created> {format_timestamp(pr.created_at)} </created>\n"
        f"<updated> {format_timestamp(pr.updated_at)} </updated>\n"
        "\n"
        f"<changes> +{pr.additions} -{pr.deletions} across "
        f"{pr.changed_files} file(s) </changes>\n"
        "\n"
        "<description>\n"
        f"{pr.body or NO_DESCRIPTION}\n"
        "</description>"
    )

    if diff:
        output += f"\n\n<diff>\n{truncate_diff(diff)}\n</diff>"

    return output
