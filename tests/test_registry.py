import pytest
from typing import Any, Dict
from pydantic import ValidationError
from mcp import types

from greyhack_mcp.core import ToolDefinition, ToolParameter, ToolRegistry
from greyhack_mcp.core.exceptions import (
    DuplicateNameError,
    ToolRegistrationError,
    ToolValidationError,
    UnknownToolError,
)
from greyhack_mcp.server import MCPToolRegistry


# Concrete implementation for testing base class functionality
class ConcreteTestRegistry(ToolRegistry):
    @property
    def tool_object(self) -> Any:
        return None


def _echo(params: Dict[str, Any]) -> Dict[str, Any]:
    return dict(params)


def test_register_definition_and_list_in_order() -> None:
    registry = ConcreteTestRegistry()
    for name in ("zeta", "alpha", "mid"):
        registry.register(ToolDefinition(name=name, description=f"{name} tool", func=_echo))

    assert [t.name for t in registry.list()] == ["zeta", "alpha", "mid"]
    assert len(registry) == 3
    assert "alpha" in registry


def test_duplicate_registration_keeps_first() -> None:
    registry = ConcreteTestRegistry()
    registry.register(ToolDefinition(name="my_tool", description="First implementation.", func=_echo))

    with pytest.raises(DuplicateNameError, match="already registered"):
        registry.register(ToolDefinition(name="my_tool", description="Second implementation.", func=_echo))

    assert len(registry) == 1
    assert registry.get("my_tool").description == "First implementation."


def test_registry_tool_decorator() -> None:
    registry = ConcreteTestRegistry()

    @registry.tool(parameters=[ToolParameter(name="x", type="integer", required=True)])
    def double(params: Dict[str, Any]) -> Dict[str, Any]:
        """Doubles x."""
        return {"value": params["x"] * 2}

    tool_def = registry.get("double")
    assert tool_def.description == "Doubles x."
    assert tool_def.parameters[0].name == "x"
    assert tool_def.func({"x": 2}) == {"value": 4}


def test_registry_tool_decorator_with_explicit_name() -> None:
    registry = ConcreteTestRegistry()

    @registry.tool(name="renamed", description="Explicit description")
    def original(params: Dict[str, Any]) -> Dict[str, Any]:
        return {}

    assert "renamed" in registry
    assert "original" not in registry
    assert registry.get("renamed").description == "Explicit description"


def test_registry_missing_docstring() -> None:
    registry = ConcreteTestRegistry()
    with pytest.raises(ToolValidationError, match="missing docstring"):

        @registry.tool()
        def no_doc_tool(params: Dict[str, Any]) -> Dict[str, Any]:
            return {}


def test_register_by_name_requires_func() -> None:
    registry = ConcreteTestRegistry()
    with pytest.raises(ToolRegistrationError, match="func is required"):
        registry.register("lonely", description="No handler")


def test_frozen_registry_rejects_registration() -> None:
    registry = ConcreteTestRegistry([ToolDefinition(name="a", description="a", func=_echo)])
    registry.freeze()

    assert registry.frozen
    with pytest.raises(ToolRegistrationError, match="frozen"):
        registry.register(ToolDefinition(name="b", description="b", func=_echo))
    assert [t.name for t in registry.list()] == ["a"]


def test_get_unknown_tool() -> None:
    registry = ConcreteTestRegistry()
    with pytest.raises(UnknownToolError, match="nope"):
        registry.get("nope")


def test_tools_view_is_read_only() -> None:
    registry = ConcreteTestRegistry([ToolDefinition(name="a", description="a", func=_echo)])
    with pytest.raises(TypeError):
        registry.tools["b"] = registry.get("a")  # type: ignore[index]


def test_tool_definition_rejects_blank_name_and_duplicate_parameters() -> None:
    with pytest.raises(ValidationError):
        ToolDefinition(name="  ", description="blank", func=_echo)

    with pytest.raises(ValidationError, match="duplicate parameters"):
        ToolDefinition(
            name="dup",
            description="dup",
            func=_echo,
            parameters=(ToolParameter(name="x", type="string"), ToolParameter(name="x", type="number")),
        )


def test_tool_parameter_default_rules() -> None:
    with pytest.raises(ValidationError, match="cannot declare a default"):
        ToolParameter(name="x", type="string", required=True, default="a")

    with pytest.raises(ValidationError, match="not one of"):
        ToolParameter(name="x", type="string", default="c", enum=("a", "b"))

    param = ToolParameter(name="x", type="string", default="a", enum=["a", "b"])
    assert param.enum == ("a", "b")
    assert param.has_default


def test_input_schema_is_introspectable() -> None:
    tool_def = ToolDefinition(
        name="search",
        description="Search",
        func=_echo,
        parameters=(
            ToolParameter(name="query", type="string", description="The query", required=True),
            ToolParameter(name="limit", type="integer", default=5),
            ToolParameter(name="mode", type="string", enum=("fast", "slow")),
        ),
    )

    assert tool_def.input_schema == {
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "The query"},
            "limit": {"type": "integer", "default": 5},
            "mode": {"type": "string", "enum": ["fast", "slow"]},
        },
        "required": ["query"],
        "additionalProperties": True,
    }
    assert tool_def.args_model is tool_def.args_model


def test_mcp_registry_tool_object() -> None:
    registry = MCPToolRegistry()

    @registry.tool(parameters=[ToolParameter(name="x", type="integer", description="An integer", required=True)])
    def my_tool(params: Dict[str, Any]) -> Dict[str, Any]:
        """My tool description."""
        return {"x": params["x"]}

    tool_obj = registry.tool_object
    assert isinstance(tool_obj, list)
    assert len(tool_obj) == 1
    assert isinstance(tool_obj[0], types.Tool)
    assert tool_obj[0].name == "my_tool"
    assert tool_obj[0].description == "My tool description."
    assert tool_obj[0].inputSchema["required"] == ["x"]
