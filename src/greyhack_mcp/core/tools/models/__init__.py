"""Tool-related data models."""

from .models import ParameterType, ToolDefinition, ToolParameter
from .invocation import InvocationRequest, InvocationResult, Success, Failure

__all__ = [
    "ParameterType",
    "ToolDefinition",
    "ToolParameter",
    "InvocationRequest",
    "InvocationResult",
    "Success",
    "Failure",
]
