"""HTTP front end for the Clockify tools.

Exposes the same catalogue and dispatcher as the stdio server so the tools
can be driven from plain HTTP clients (see ``client.py``).
"""
import os
from typing import Any

import httpx
from fastapi import Body, FastAPI, Request
from fastapi.responses import JSONResponse
from mcp.types import INVALID_PARAMS, METHOD_NOT_FOUND

from . import __version__
from .clockify import ClockifyClient
from .config import Settings, setup_logging
from .dispatcher import Dispatcher
from .errors import AdapterError, RemoteAPIError


def error_status(exc: AdapterError) -> int:
    if isinstance(exc, RemoteAPIError):
        return exc.status_code if exc.status_code >= 400 else 502
    if exc.error.code == INVALID_PARAMS:
        return 400
    if exc.error.code == METHOD_NOT_FOUND:
        return 404
    return 500


def create_app(settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    dispatcher = Dispatcher(ClockifyClient(settings, transport=transport))

    app = FastAPI(title="Clockify MCP", version=__version__)
    app.state.dispatcher = dispatcher

    @app.exception_handler(AdapterError)
    async def adapter_error_handler(request: Request, exc: AdapterError):
        return JSONResponse(
            status_code=error_status(exc),
            content={"error": {"code": exc.error.code, "message": exc.error.message}},
        )

    @app.get("/tools")
    async def list_tools():
        """List every tool with its argument schema."""
        return {"tools": dispatcher.list_tools()}

    @app.post("/tools/{name}")
    async def call_tool(name: str, arguments: dict[str, Any] | None = Body(default=None)):
        """Invoke one tool with the JSON body as its arguments."""
        return await dispatcher.handle(name, arguments or {})

    return app


def run() -> None:
    import uvicorn

    settings = Settings.from_env()
    setup_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=os.getenv("CLOCKIFY_MCP_HOST", "0.0.0.0"),
        port=int(os.getenv("CLOCKIFY_MCP_PORT", "8000")),
    )


if __name__ == "__main__":
    run()
