from typing import Annotated, Any, Dict, List, Mapping, Optional, Sequence, Type

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, create_model
from pydantic import Strict, StrictBool, StrictFloat, StrictInt, StrictStr

from ...exceptions import MissingRequiredFieldError, TypeMismatchError
from ...logger import get_logger
from ..models.models import ToolParameter

logger = get_logger(__name__)


def _integral_float_to_int(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# Strict types: no string to number coercion, and a bool is never a number.
_ANNOTATIONS: Dict[str, Any] = {
    "string": StrictStr,
    "number": StrictFloat,
    "integer": Annotated[StrictInt, BeforeValidator(_integral_float_to_int)],
    "boolean": StrictBool,
    "object": Annotated[Dict[str, Any], Strict()],
    "array": Annotated[List[Any], Strict()],
}


class SchemaValidator:
    """
    Helper class that turns a declarative parameter schema into a pydantic
    model, validates invocation parameters with it and renders it as JSON Schema.
    """

    @staticmethod
    def build_model(tool_name: str, parameters: Sequence[ToolParameter]) -> Type[BaseModel]:
        """
        Creates the parameter model of a tool.

        Fields are keyed by position and aliased to the declared names, so a
        parameter may use any name, including ones that clash with pydantic's.
        Undeclared fields are kept as extras.

        Args:
            tool_name: Name of the tool, used as the model name.
            parameters: The tool's declared parameters.

        Returns:
            A pydantic model class.
        """
        fields: Dict[str, Any] = {}
        for index, param in enumerate(parameters):
            extra = {"enum": list(param.enum)} if param.enum is not None else None
            default: Any = ... if param.required else param.default
            fields[f"p{index}"] = (
                _ANNOTATIONS[param.type],
                Field(
                    default,
                    alias=param.name,
                    description=param.description or None,
                    json_schema_extra=extra,
                ),
            )
        return create_model(f"{tool_name}Params", __config__=ConfigDict(extra="allow"), **fields)

    @staticmethod
    def validate_arguments(
        tool_name: str,
        parameters: Sequence[ToolParameter],
        arguments: Mapping[str, Any],
        args_model: Optional[Type[BaseModel]] = None,
    ) -> Dict[str, Any]:
        """
        Checks ``arguments`` against ``parameters`` and fills in defaults.

        A null value counts as absent. Fields that are not declared are passed
        through without any check.

        Args:
            tool_name: Name of the tool, used in error messages.
            parameters: The tool's declared parameters.
            arguments: Raw invocation parameters.
            args_model: The model built from ``parameters``. Built on the fly if omitted.

        Returns:
            A new dictionary with defaults applied.

        Raises:
            MissingRequiredFieldError: If a required field is absent or null.
            TypeMismatchError: If a present field does not match its type tag.
        """
        if args_model is None:
            args_model = SchemaValidator.build_model(tool_name, parameters)

        declared = {param.name: param for param in parameters}
        present = {k: v for k, v in arguments.items() if not (k in declared and v is None)}

        try:
            model = args_model.model_validate(present)
        except ValidationError as exc:
            raise SchemaValidator._translate_error(tool_name, declared, present, exc) from None

        validated = model.model_dump(by_alias=True)
        for name, param in declared.items():
            if name not in present and not param.has_default:
                validated.pop(name, None)
        return validated

    @staticmethod
    def _translate_error(
        tool_name: str, declared: Mapping[str, ToolParameter], arguments: Mapping[str, Any], exc: ValidationError
    ) -> Exception:
        errors = exc.errors()
        missing = [e for e in errors if e["type"] == "missing"]
        if missing:
            msg = f"Tool '{tool_name}' is missing required field '{missing[0]['loc'][0]}'."
            logger.warning(msg)
            return MissingRequiredFieldError(msg)

        # Nested errors point into the value; the field itself is what gets reported.
        name = str(errors[0]["loc"][0])
        param = declared[name]
        value = arguments[name]
        msg = f"Field '{name}' of tool '{tool_name}' expects type '{param.type}', got {type(value).__name__}."
        logger.warning(msg)
        return TypeMismatchError(msg)

    @staticmethod
    def to_json_schema(args_model: Type[BaseModel]) -> Dict[str, Any]:
        """
        Renders a parameter model as a JSON Schema object.

        Titles are removed, as are the ``null`` defaults of optional fields
        that declare no default.

        Args:
            args_model: A model built by ``build_model``.

        Returns:
            An object schema with ``properties`` and, if any, ``required``.
        """
        schema = args_model.model_json_schema()
        schema.pop("title", None)
        for prop in schema.get("properties", {}).values():
            prop.pop("title", None)
            if "default" in prop and prop["default"] is None:
                del prop["default"]
        return schema
