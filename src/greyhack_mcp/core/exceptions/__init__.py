"""Export the tool-related exception hierarchy used across registration, dispatch and handlers."""

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

__all__ = [
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
]
