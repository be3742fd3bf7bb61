"""Serve the tool registry over the Model Context Protocol."""

import json
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from greyhack_mcp import __version__
from greyhack_mcp.core import InvocationRequest, Settings, ToolDispatcher, ToolExecutionError, ToolRegistry
from greyhack_mcp.core.logger import get_logger
from greyhack_mcp.greyhack import GitHubCodeSearchClient, build_registry

logger = get_logger(__name__)

SERVER_NAME = "greyhack-mcp-server"
SERVER_INSTRUCTIONS = (
    "A Grey Hack MCP server with GitHub code search, Greybel-JS transpilation, "
    "API validation and script generation"
)

__all__ = ["GreyHackMCPServer", "create_server", "SERVER_NAME"]


class GreyHackMCPServer:
    """Binds a frozen registry and its dispatcher to an MCP low-level server."""

    def __init__(self, registry: ToolRegistry, dispatcher: ToolDispatcher, name: str = SERVER_NAME) -> None:
        """Registers the list/call handlers on a new MCP server.

        Args:
            registry: The registry whose tools are listed.
            dispatcher: The dispatcher that runs tool calls.
            name: Server name reported to clients during initialization.
        """
        self.registry = registry
        self.dispatcher = dispatcher
        self.server: Server = Server(name, version=__version__, instructions=SERVER_INSTRUCTIONS)

        self.server.list_tools()(self.list_tools)
        # Parameters are validated once, by the dispatcher.
        self.server.call_tool(validate_input=False)(self.call_tool)

    async def list_tools(self) -> List[types.Tool]:
        """Lists every registered tool with its input schema."""
        tools = self.registry.tool_object
        logger.debug("Listing %d tools.", len(tools))
        return tools

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        """Dispatches one ``tools/call`` request.

        A Success payload is returned as JSON text. Failures and structural errors
        are raised so the MCP server answers with an error result.

        Raises:
            ToolError: For unknown tools, invalid parameters, and failed handlers.
        """
        logger.info("%s called with: %s", name, arguments)
        result = await self.dispatcher.dispatch(InvocationRequest(tool_name=name, parameters=arguments or {}))

        if not result.ok:
            raise ToolExecutionError(result.to_payload()["error"])

        text = json.dumps(result.to_payload(), ensure_ascii=False, indent=2)
        return [types.TextContent(type="text", text=text)]

    async def run_stdio(self) -> None:
        """Serves requests over stdin/stdout until the client disconnects."""
        logger.info("Starting %s %s on stdio with %d tools.", SERVER_NAME, __version__, len(self.registry))
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(read_stream, write_stream, self.server.create_initialization_options())
        logger.info("Client disconnected; server stopped.")


def create_server(settings: Settings, client: Optional[GitHubCodeSearchClient] = None) -> GreyHackMCPServer:
    """Builds the registry, dispatcher and MCP server from settings.

    Args:
        settings: Server settings.
        client: Optional prebuilt GitHub client.
    """
    registry = build_registry(settings, client)
    dispatcher = ToolDispatcher(registry=registry, tool_timeout=settings.tool_timeout)
    return GreyHackMCPServer(registry, dispatcher)
