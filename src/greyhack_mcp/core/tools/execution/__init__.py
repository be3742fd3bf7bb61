"""Tool execution logic."""

from .dispatcher import ToolDispatcher

__all__ = ["ToolDispatcher"]
