"""Public exports for the tool registry, dispatcher and shared utilities."""

from .config import Settings
from .exceptions import (
    ToolError,
    ToolRegistrationError,
    DuplicateNameError,
    ToolNotFoundError,
    UnknownToolError,
    ToolValidationError,
    MissingRequiredFieldError,
    TypeMismatchError,
    ToolExecutionError,
    InvalidScriptType,
    UpstreamServiceError,
)
from .logger import get_logger, setup_logging
from .tools import (
    ToolDefinition,
    ToolParameter,
    InvocationRequest,
    InvocationResult,
    Success,
    Failure,
    ToolRegistry,
    ToolDispatcher,
    SchemaValidator,
)

__all__ = [
    "Settings",
    "ToolError",
    "ToolRegistrationError",
    "DuplicateNameError",
    "ToolNotFoundError",
    "UnknownToolError",
    "ToolValidationError",
    "MissingRequiredFieldError",
    "TypeMismatchError",
    "ToolExecutionError",
    "InvalidScriptType",
    "UpstreamServiceError",
    "get_logger",
    "setup_logging",
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
