"""
Custom exception classes for the tool system.

Registration, lookup and schema errors are structural: they are raised at
registration or dispatch time. Handler errors (execution, upstream, invalid
script type) are converted into Failure results by the dispatcher.
"""


class ToolError(Exception):
    """Base exception for all tool-related errors."""

    pass


class ToolRegistrationError(ToolError):
    """Raised when there is an error registering a tool."""

    pass


class DuplicateNameError(ToolRegistrationError):
    """Raised when a tool name is already present in the registry."""

    pass


class ToolNotFoundError(ToolError):
    """Raised when a requested tool is not found in the registry."""

    pass


class UnknownToolError(ToolNotFoundError):
    """Raised when an invocation references a tool that was never registered."""

    pass


class ToolValidationError(ToolError):
    """Raised when tool parameters or definition are invalid."""

    pass


class MissingRequiredFieldError(ToolValidationError):
    """Raised when an invocation omits a parameter marked as required."""

    pass


class TypeMismatchError(ToolValidationError):
    """Raised when a parameter value does not match its declared type tag."""

    pass


class ToolExecutionError(ToolError):
    """Raised when a tool fails during execution."""

    pass


class InvalidScriptType(ToolExecutionError):
    """Raised when a script generation request names an unsupported script type."""

    pass


class UpstreamServiceError(ToolExecutionError):
    """Raised when an external service is unusable: missing credential, network or provider error."""

    pass
