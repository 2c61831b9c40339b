"""Clockify MCP server over stdio, for desktop MCP clients."""
import asyncio
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolRequest, CallToolResult, ServerResult, TextContent, Tool

from . import __version__
from .clockify import ClockifyClient
from .config import Settings, setup_logging
from .dispatcher import Dispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "clockify-mcp-server"


def create_server(dispatcher: Dispatcher) -> Server:
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(name=tool["name"], description=tool["description"], inputSchema=tool["inputSchema"])
            for tool in dispatcher.list_tools()
        ]

    # Adapter errors propagate so the server replies with a JSON-RPC error
    # carrying their code; @server.call_tool() would fold them into isError.
    async def call_tool(request: CallToolRequest) -> ServerResult:
        result = await dispatcher.handle(request.params.name, request.params.arguments or {})
        return ServerResult(
            CallToolResult(
                content=[TextContent(type="text", text=item["text"]) for item in result["content"]],
                isError=result["isError"],
            )
        )

    server.request_handlers[CallToolRequest] = call_tool
    return server


async def serve(settings: Settings) -> None:
    dispatcher = Dispatcher(ClockifyClient(settings))
    server = create_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Clockify MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    asyncio.run(serve(settings))


if __name__ == "__main__":
    main()
