"""MCP server exposing pull request context over stdio."""

import asyncio
import logging
import sys
from collections.abc import Iterable, Sequence
from typing import Any

from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from mcp.types import Resource, TextContent, Tool
from pydantic import AnyUrl

from . import __version__
from .config import ServerConfig
from .errors import UnknownToolError
from .github_client.client import PullRequestClient
from .handler import (
    HELP_DESCRIPTION,
    HELP_NAME,
    HELP_URI,
    TOOL_DESCRIPTION,
    TOOL_INPUT_SCHEMA,
    TOOL_NAME,
    handle_get_pr_context,
    read_help_resource,
)
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

SERVER_NAME = "pull-request-context-mcp"


class PRContextServer:
    """Low-level MCP server with one tool and one static resource."""

    def __init__(self, config: ServerConfig | None = None) -> None:
        self.config = config or ServerConfig()
        self.client = PullRequestClient(
            token=self.config.github_token,
            api_url=self.config.api_url,
            diff_url=self.config.diff_url,
        )
        self.server: Server = Server(SERVER_NAME, version=__version__)
        self._register_handlers()

    def _register_handlers(self) -> None:
        self.server.list_resources()(self.handle_list_resources)
        self.server.read_resource()(self.handle_read_resource)
        self.server.list_tools()(self.handle_list_tools)
        self.server.call_tool()(self.handle_call_tool)

    async def handle_list_resources(self) -> list[Resource]:
        return [
            Resource(
                uri=AnyUrl(HELP_URI),
                name=HELP_NAME,
                description=HELP_DESCRIPTION,
                mimeType="text/plain",
            )
        ]

    async def handle_read_resource(
        self, uri: AnyUrl
    ) -> Iterable[ReadResourceContents]:
        text = read_help_resource(str(uri))
        return [ReadResourceContents(content=text, mime_type="text/plain")]

    async def handle_list_tools(self) -> list[Tool]:
        return [
            Tool(
                name=TOOL_NAME,
                description=TOOL_DESCRIPTION,
                inputSchema=TOOL_INPUT_SCHEMA,
            )
        ]

    async def handle_call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> Sequence[TextContent]:
        """Dispatch a tool invocation by name.

        Exceptions propagate to the SDK, which reports them to the client as
        an error tool result carrying the exception message.

        Raises:
            UnknownToolError: If name is not get_pr_context
            PRContextError: Any failure of the tool itself
        """
        if name != TOOL_NAME:
            raise UnknownToolError(name)

        text = await handle_get_pr_context(self.client, arguments)
        return [TextContent(type="text", text=text)]

    async def run(self) -> None:
        """Serve requests on stdin/stdout until the client disconnects."""
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            capabilities = self.server.get_capabilities(
                NotificationOptions(), experimental_capabilities={}
            )
            logger.warning("Pull Request Context MCP Server running on stdio")
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=SERVER_NAME,
                    server_version=__version__,
                    capabilities=capabilities,
                ),
            )


def create_server(config: ServerConfig | None = None) -> PRContextServer:
    """Factory for a PRContextServer instance."""
    return PRContextServer(config)


def main(log_level: str = "INFO") -> None:
    """Process entry point: run the stdio server, exiting 1 on fatal errors."""
    setup_logging(log_level)
    try:
        asyncio.run(create_server().run())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.critical("Fatal error", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
