"""Main CLI entry point."""

import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..config import ServerConfig
from ..errors import IdentifierNotRecognizedError, PRContextError
from ..github_client.client import PullRequestClient
from ..handler import get_pr_context
from ..logging_config import setup_logging

load_dotenv()

app = typer.Typer(
    name="pr-context",
    help="GitHub pull request context for language models",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
err_console = Console(stderr=True)

@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def serve(
    log_level: str = typer.Option(
        "INFO", "--log-level", "-L", help="Logging level written to stderr"
    ),
) -> None:
    """Run the MCP server on stdin/stdout."""
    from ..server import main as run_server

    run_server(log_level)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def fetch(
    identifier: str = typer.Argument(
        ..., help="PR identifier, e.g. 'owner/repo#123' or a GitHub URL"
    ),
    include_diff: bool = typer.Option(
        True, "--diff/--no-diff", help="Include the (truncated) diff"
    ),
    token: str | None = typer.Option(
        None,
        "--token",
        "-t",
        help="GitHub API token (defaults to GITHUB_TOKEN env var)",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-L", help="Logging level written to stderr"
    ),
) -> None:
    """Print the formatted context for a single pull request.

    Examples:
        pr-context fetch octo/widgets#7
        pr-context fetch https://github.com/octo/widgets/pull/7 --no-diff
    """
    setup_logging(log_level)
    config = ServerConfig(github_token=token)
    client = PullRequestClient(
        token=config.github_token, api_url=config.api_url, diff_url=config.diff_url
    )

    try:
        context = asyncio.run(get_pr_context(client, identifier, include_diff))
    except IdentifierNotRecognizedError as e:
        err_console.print(f"❌ {e}", style="red", markup=False)
        raise typer.Exit(2)
    except PRContextError as e:
        err_console.print(f"❌ {e}", style="red", markup=False)
        raise typer.Exit(1)

    # Diff text can contain square brackets and :emoji: codes
    console.print(
        context, markup=False, emoji=False, highlight=False, soft_wrap=True
    )


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from pr_context import __version__

    console.print(f"Pull Request Context MCP v{__version__}")


if __name__ == "__main__":
    app()
