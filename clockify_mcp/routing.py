"""Registration table mapping tool names to handler coroutines."""
from typing import Any, Awaitable, Callable

from .clockify import ClockifyClient

Handler = Callable[[ClockifyClient, dict[str, Any]], Awaitable[str]]


class ToolRouter:
    """Collects the handlers of one module, keyed by tool name."""

    def __init__(self):
        self.handlers: dict[str, Handler] = {}

    def tool(self, name: str):
        def decorator(func: Handler) -> Handler:
            if name in self.handlers:
                raise ValueError(f"Handler for {name!r} registered twice")
            self.handlers[name] = func
            return func

        return decorator
