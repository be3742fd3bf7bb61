"""Declarative tool definitions."""

from functools import cached_property
from typing import Any, Callable, Dict, Literal, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ParameterType = Literal["string", "number", "integer", "boolean", "object", "array"]


class ToolParameter(BaseModel):
    """
    A single field of a tool's parameter schema.

    Attributes:
        name: Field name as it appears in the invocation parameters.
        type: Type tag the value must match.
        description: Human-readable description shown to callers.
        required: Whether the field must be present in every invocation.
        default: Value filled in when the field is absent. ``None`` means no default.
        enum: Optional enumeration of allowed values. Enforced by the handler, not the dispatcher.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    type: ParameterType
    description: str = ""
    required: bool = False
    default: Optional[Any] = None
    enum: Optional[Tuple[Any, ...]] = None

    @model_validator(mode="after")
    def _check_default(self) -> "ToolParameter":
        if self.default is None:
            return self
        if self.required:
            raise ValueError(f"Parameter '{self.name}' is required and cannot declare a default.")
        if self.enum is not None and self.default not in self.enum:
            raise ValueError(f"Default of parameter '{self.name}' is not one of {list(self.enum)}.")
        return self

    @property
    def has_default(self) -> bool:
        return self.default is not None


class ToolDefinition(BaseModel):
    """
    Represents the definition of a tool that can be served to MCP clients.

    Attributes:
        name: The unique name of the tool.
        description: A brief description of what the tool does.
        func: The handler. Receives the validated parameter mapping and returns a result mapping.
              May be a plain function or a coroutine function.
        parameters: Ordered, declarative parameter schema.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str
    func: Callable[[Dict[str, Any]], Any]
    parameters: Tuple[ToolParameter, ...] = ()

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Tool name must not be empty.")
        return value

    @model_validator(mode="after")
    def _unique_parameter_names(self) -> "ToolDefinition":
        names = [p.name for p in self.parameters]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Tool '{self.name}' declares duplicate parameters: {duplicates}")
        return self

    @cached_property
    def args_model(self) -> Type[BaseModel]:
        """Pydantic model the dispatcher validates invocation parameters with."""
        from ..schema import SchemaValidator

        return SchemaValidator.build_model(self.name, self.parameters)

    @property
    def input_schema(self) -> Dict[str, Any]:
        """JSON-Schema rendering of the parameter declarations, for discovery."""
        from ..schema import SchemaValidator

        return SchemaValidator.to_json_schema(self.args_model)
