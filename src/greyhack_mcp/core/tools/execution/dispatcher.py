"""Validates invocation requests and routes them to tool handlers."""

from __future__ import annotations

import asyncio
import inspect
import json
from typing import Any, Callable, Dict, Mapping

from ...exceptions import ToolError, ToolExecutionError, TypeMismatchError
from ...logger import get_logger
from ..models import Failure, InvocationRequest, InvocationResult, Success
from ..registry import ToolRegistry
from ..schema import SchemaValidator

logger = get_logger(__name__)


class ToolDispatcher:
    """Routes a single InvocationRequest to its handler.

    Unknown tools and parameters that violate the schema are structural errors
    and are raised. Everything that goes wrong inside a handler, including a
    timeout, is returned as a ``Failure``.
    """

    def __init__(self, *, registry: ToolRegistry, tool_timeout: float = 30.0) -> None:
        """Initialize the dispatcher.

        Args:
            registry: Tool registry used to resolve tool definitions.
            tool_timeout: Timeout in seconds for a single handler call.
        """
        self._registry = registry
        self._tool_timeout = tool_timeout

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def dispatch(self, request: InvocationRequest) -> InvocationResult:
        """Validate and run a single invocation.

        Args:
            request: The tool name and raw parameters.

        Returns:
            ``Success`` with the handler's result mapping, or ``Failure`` with a message.

        Raises:
            UnknownToolError: If the tool is not registered.
            MissingRequiredFieldError: If a required parameter is absent.
            TypeMismatchError: If a parameter has the wrong type or the parameters are not a mapping.
        """
        logger.debug(f"Dispatching tool call: {request.tool_name} (ID: {request.call_id})")

        tool_def = self._registry.get(request.tool_name)
        arguments = self._normalize_arguments(request.tool_name, request.parameters)
        validated = SchemaValidator.validate_arguments(
            tool_def.name, tool_def.parameters, arguments, args_model=tool_def.args_model
        )

        try:
            logger.info(f"Executing tool '{tool_def.name}'...")
            result = await self._execute_tool(tool_def.func, validated)
        except ToolError as exc:
            logger.warning(f"Tool '{tool_def.name}' failed: {exc} ({type(exc).__name__})")
            return Failure(
                tool_name=tool_def.name,
                message=str(exc),
                error_type=type(exc).__name__,
                call_id=request.call_id,
            )
        except Exception as exc:
            logger.error(f"Unexpected error executing tool '{tool_def.name}': {exc}", exc_info=True)
            return Failure(
                tool_name=tool_def.name,
                message=f"Error executing tool '{tool_def.name}': {exc}",
                error_type=type(exc).__name__,
                call_id=request.call_id,
            )

        if not isinstance(result, Mapping):
            msg = f"Tool '{tool_def.name}' returned {type(result).__name__} instead of a mapping."
            logger.error(msg)
            return Failure(tool_name=tool_def.name, message=msg, call_id=request.call_id)

        logger.info(f"Tool '{tool_def.name}' executed successfully.")
        return Success(tool_name=tool_def.name, data=dict(result), call_id=request.call_id)

    @staticmethod
    def _normalize_arguments(tool_name: str, raw_args: Any) -> Dict[str, Any]:
        """Normalize invocation parameters into a dictionary.

        Handles JSON strings, mappings, or None values.

        Raises:
            TypeMismatchError: If the parameters cannot be read as an object.
        """
        if raw_args is None or raw_args == "":
            return {}

        if isinstance(raw_args, Mapping):
            return dict(raw_args)

        if isinstance(raw_args, str):
            try:
                parsed = json.loads(raw_args)
            except json.JSONDecodeError as exc:
                raise TypeMismatchError(f"Failed to parse arguments for tool '{tool_name}': {exc}") from exc

            if parsed is None:
                return {}
            if isinstance(parsed, dict):
                return parsed

        raise TypeMismatchError(f"Arguments for tool '{tool_name}' must be an object.")

    async def _execute_tool(self, handler: Callable[..., Any], arguments: Dict[str, Any]) -> Any:
        """Run the handler, awaiting coroutines and moving blocking handlers to a worker thread.

        Raises:
            ToolExecutionError: If execution times out.
        """
        try:
            if inspect.iscoroutinefunction(handler):
                return await asyncio.wait_for(handler(arguments), timeout=self._tool_timeout)

            result = await asyncio.wait_for(
                asyncio.to_thread(handler, arguments),
                timeout=self._tool_timeout,
            )
            if inspect.isawaitable(result):
                result = await asyncio.wait_for(result, timeout=self._tool_timeout)
            return result

        except asyncio.TimeoutError as exc:
            msg = f"Tool execution timed out after {self._tool_timeout} seconds."
            raise ToolExecutionError(msg) from exc
