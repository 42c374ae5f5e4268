"""Command line interface for the pull request context server."""
