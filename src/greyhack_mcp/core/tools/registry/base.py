"""Tool registry abstraction."""

import inspect
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..models import ToolDefinition, ToolParameter
from ...exceptions import DuplicateNameError, ToolRegistrationError, ToolValidationError, UnknownToolError
from ...logger import get_logger

logger = get_logger(__name__)


class ToolRegistry(ABC):
    """
    A central registry to manage and access all available tools.

    Definitions are kept in registration order. Once the registry is frozen it
    is read-only and can be shared between concurrent invocations without locking.
    """

    def __init__(self, definitions: Iterable[ToolDefinition] = ()) -> None:
        """Initialize the ToolRegistry.

        Args:
            definitions: Optional definitions to register right away, in order.
        """
        self._tools: Dict[str, ToolDefinition] = {}
        self._frozen = False
        for definition in definitions:
            self.register(definition)

    def register(
        self,
        name_or_tool: Union[str, ToolDefinition, Callable],
        description: Optional[str] = None,
        func: Optional[Callable] = None,
        parameters: Optional[Sequence[ToolParameter]] = None,
    ) -> ToolDefinition:
        """
        Register a new tool.

        A tool can be registered by passing a `ToolDefinition`, by passing its
        components (name, description, func, parameters), or by passing a
        documented callable whose name and docstring become the tool's name and
        description.

        Args:
            name_or_tool: Either a `ToolDefinition` object, the name of the tool (str), or a Callable.
            description: A brief description of what the tool does. Falls back to the handler's docstring.
            func: The handler. Required if `name_or_tool` is a string.
            parameters: Declared parameters of the tool. Defaults to none.

        Returns:
            The registered definition.

        Raises:
            ToolRegistrationError: If the registry is frozen or components are missing.
            DuplicateNameError: If a tool with the same name already exists. The first one is kept.
            ToolValidationError: If no description is given and the handler has no docstring.
        """
        if self._frozen:
            msg = "Registry is frozen; tools can only be registered during startup."
            logger.error(msg)
            raise ToolRegistrationError(msg)

        if isinstance(name_or_tool, ToolDefinition):
            tool = name_or_tool
        elif callable(name_or_tool):
            tool = self._generate_tool_definition(name_or_tool, description=description, parameters=parameters)
        else:
            if func is None:
                raise ToolRegistrationError("If passing name as string, func is required.")
            tool = self._generate_tool_definition(
                func, name=name_or_tool, description=description, parameters=parameters
            )

        if tool.name in self._tools:
            msg = f"Tool '{tool.name}' is already registered."
            logger.error(msg)
            raise DuplicateNameError(msg)

        self._tools[tool.name] = tool
        logger.info(f"Successfully registered tool: '{tool.name}'")
        return tool

    def tool(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        parameters: Optional[Sequence[ToolParameter]] = None,
    ) -> Callable[[Callable], Callable]:
        """A decorator to register a handler as a tool.

        Args:
            name: Optional tool name. Defaults to the function name.
            description: Optional description. Defaults to the function docstring.
            parameters: Declared parameters of the tool.

        Returns:
            A decorator returning the original function after registering it.
        """

        def decorator(func: Callable) -> Callable:
            self.register(name or func, description=description, func=func, parameters=parameters)
            return func

        return decorator

    def freeze(self) -> None:
        """Makes the registry read-only."""
        self._frozen = True
        logger.debug("Registry frozen with %d tool(s).", len(self._tools))

    @property
    def frozen(self) -> bool:
        return self._frozen

    def list(self) -> List[ToolDefinition]:
        """Returns all definitions in registration order."""
        return list(self._tools.values())

    def get(self, tool_name: str) -> ToolDefinition:
        """Looks up a definition by name.

        Raises:
            UnknownToolError: If no tool with that name is registered.
        """
        try:
            return self._tools[tool_name]
        except KeyError:
            raise UnknownToolError(f"Unknown tool: '{tool_name}'") from None

    @property
    def tools(self) -> Mapping[str, ToolDefinition]:
        """Read-only view of the registered definitions keyed by name."""
        return MappingProxyType(self._tools)

    def __contains__(self, tool_name: object) -> bool:
        return tool_name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    @property
    @abstractmethod
    def tool_object(self) -> Any:
        """Constructs the tool listing specific to the serving protocol.

        Returns:
            The protocol-specific tool representation.
        """
        pass

    def _generate_tool_definition(
        self,
        func: Callable,
        name: Optional[str] = None,
        description: Optional[str] = None,
        parameters: Optional[Sequence[ToolParameter]] = None,
    ) -> ToolDefinition:
        tool_name = name or func.__name__
        if description is None:
            description = self._get_docstring_from_func(func, tool_name)
        return ToolDefinition(
            name=tool_name,
            description=description,
            func=func,
            parameters=tuple(parameters or ()),
        )

    @staticmethod
    def _get_docstring_from_func(func: Callable, tool_name: str) -> str:
        doc = inspect.getdoc(func)
        if not doc:
            msg = f"Tool '{tool_name}' missing docstring. Callers need a description of what the tool does."
            logger.error(msg)
            raise ToolValidationError(msg)
        return doc
