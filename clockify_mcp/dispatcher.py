"""Routes tool calls to their handlers.

Arguments are checked against the tool's declared schema before any
handler runs, so a bad call never reaches Clockify.
"""
import logging
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr, ValidationError, create_model

from clockify_tools import catalogue as default_catalogue

from .clockify import ClockifyClient
from .errors import AdapterError, InvalidArgumentsError, MethodNotFoundError
from .handlers import HANDLERS
from .routing import Handler

logger = logging.getLogger(__name__)

SCALARS = {
    "string": StrictStr,
    "number": Union[StrictInt, StrictFloat],
    "boolean": StrictBool,
}


class Arguments(BaseModel):
    model_config = ConfigDict(extra="allow")


def _annotation(model_name: str, spec: dict) -> Any:
    if "enum" in spec:
        return Literal[tuple(spec["enum"])]
    kind = spec.get("type")
    if kind == "array":
        return list[_annotation(model_name, spec.get("items", {}))]
    if kind == "object":
        return arguments_model(model_name, spec)
    if kind in SCALARS:
        return SCALARS[kind]
    return Any


def arguments_model(model_name: str, schema: dict) -> type[BaseModel]:
    """Build a pydantic model mirroring a JSON-schema object.

    Every field is optional here; required arguments are checked separately
    so the error can name them all at once.
    """
    fields = {
        field: (Optional[_annotation(f"{model_name}_{field}", spec)], None)
        for field, spec in schema.get("properties", {}).items()
    }
    return create_model(model_name, __base__=Arguments, **fields)


def missing_arguments(required: list[str], arguments: dict) -> list[str]:
    return [name for name in required if arguments.get(name) is None or arguments.get(name) == ""]


def required_message(missing: list[str]) -> str:
    if len(missing) == 1:
        return f"{missing[0]} is required"
    return f"{', '.join(missing[:-1])} and {missing[-1]} are required"


def describe_errors(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )


def text_result(text: str) -> dict:
    return {"content": [{"type": "text", "text": text}], "isError": False}


class Dispatcher:
    def __init__(
        self,
        client: ClockifyClient,
        catalogue: list[dict] | None = None,
        handlers: dict[str, Handler] | None = None,
    ):
        self.client = client
        self.catalogue = default_catalogue if catalogue is None else catalogue
        self.handlers = HANDLERS if handlers is None else handlers
        self.tools = {tool["name"]: tool for tool in self.catalogue}

        unhandled = set(self.tools) - set(self.handlers)
        undeclared = set(self.handlers) - set(self.tools)
        if unhandled or undeclared:
            raise RuntimeError(
                f"Catalogue and handlers disagree: no handler for {sorted(unhandled)}, "
                f"no catalogue entry for {sorted(undeclared)}"
            )

        self.models = {
            name: arguments_model(f"{name}_arguments", tool["inputSchema"]) for name, tool in self.tools.items()
        }

    def list_tools(self) -> list[dict]:
        return self.catalogue

    def validate(self, name: str, arguments: dict) -> None:
        tool = self.tools.get(name)
        if tool is None:
            raise MethodNotFoundError(f"Unknown tool: {name}")

        missing = missing_arguments(tool["inputSchema"].get("required", []), arguments)
        if missing:
            raise InvalidArgumentsError(required_message(missing))

        try:
            self.models[name].model_validate(arguments)
        except ValidationError as e:
            raise InvalidArgumentsError(f"Invalid arguments for {name}: {describe_errors(e)}") from e

    async def handle(self, name: str, arguments: dict | None = None) -> dict:
        arguments = arguments or {}
        logger.info("Calling tool %s", name)
        try:
            self.validate(name, arguments)
            text = await self.handlers[name](self.client, arguments)
        except AdapterError as e:
            logger.warning("Tool %s failed: %s", name, e.error.message)
            raise
        except Exception as e:
            logger.exception("Tool %s raised an unexpected error", name)
            raise AdapterError(f"Tool execution failed: {e}") from e
        return text_result(text)
