"""Grey Hack MCP server - GreyScript tools served over the Model Context Protocol."""

__version__ = "0.1.0"

from .core import (
    Settings,
    ToolDefinition,
    ToolParameter,
    ToolRegistry,
    ToolDispatcher,
    InvocationRequest,
    InvocationResult,
    Success,
    Failure,
)
from .greyhack import build_registry
from .server import MCPToolRegistry, GreyHackMCPServer, create_server

__all__ = [
    "__version__",
    "Settings",
    "ToolDefinition",
    "ToolParameter",
    "ToolRegistry",
    "ToolDispatcher",
    "InvocationRequest",
    "InvocationResult",
    "Success",
    "Failure",
    "build_registry",
    "MCPToolRegistry",
    "GreyHackMCPServer",
    "create_server",
]
