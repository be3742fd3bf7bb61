"""MCP transport for the Grey Hack tools."""

from .registry import MCPToolRegistry
from .mcp_server import GreyHackMCPServer, create_server, SERVER_NAME

__all__ = ["MCPToolRegistry", "GreyHackMCPServer", "create_server", "SERVER_NAME"]
