from .models import (
    ToolDefinition,
    ToolParameter,
    InvocationRequest,
    InvocationResult,
    Success,
    Failure,
)
from .registry import ToolRegistry
from .execution import ToolDispatcher
from .schema import SchemaValidator

__all__ = [
    "ToolDefinition",
    "ToolParameter",
    "InvocationRequest",
    "InvocationResult",
    "Success",
    "Failure",
    "ToolRegistry",
    "ToolDispatcher",
    "SchemaValidator",
]
