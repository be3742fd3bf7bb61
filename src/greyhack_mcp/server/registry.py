"""Render tool definitions as MCP tool listings."""

from typing import List

from mcp import types

from greyhack_mcp.core import ToolRegistry


class MCPToolRegistry(ToolRegistry):
    """
    A ToolRegistry that renders its definitions as ``mcp.types.Tool`` objects,
    the shape MCP clients receive from ``tools/list``.
    """

    @property
    def tool_object(self) -> List[types.Tool]:
        """
        Builds the MCP tool listing in registration order.

        Returns:
            One ``types.Tool`` per registered definition.
        """
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema)
            for tool in self.list()
        ]
