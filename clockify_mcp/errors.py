"""Error types surfaced to MCP clients.

Every failure leaving the adapter is an :class:`AdapterError`, which is an
``McpError`` carrying a JSON-RPC error code and a message. The subclasses
only exist so callers (and the HTTP transport) can tell the kinds apart.
"""
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class AdapterError(McpError):
    code = INTERNAL_ERROR

    def __init__(self, message: str, code: int | None = None):
        super().__init__(ErrorData(code=self.code if code is None else code, message=message))

    @property
    def message(self) -> str:
        return self.error.message


class ConfigurationError(AdapterError):
    code = INVALID_PARAMS


class InvalidArgumentsError(AdapterError):
    code = INVALID_PARAMS


class MethodNotFoundError(AdapterError):
    code = METHOD_NOT_FOUND


class RemoteAPIError(AdapterError):
    """Non-success HTTP status returned by Clockify."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Clockify API error ({status_code}): {body}")


class TransportError(AdapterError):
    """The request never produced a usable response."""

    def __init__(self, reason: str):
        super().__init__(f"Request failed: {reason}")
