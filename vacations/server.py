"""MCP stdio entry point exposing the ``search_airbnb`` tool.

stdout carries the protocol, so logging and diagnostics go to stderr.
"""

import asyncio
import logging
import sys

import httpx
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from vacations.config import Settings, configure_logging
from vacations.routers.tools import TOOLS, call_tool
from vacations.schemas.tools import ToolResult
from vacations.services.airbnb import AirbnbSearchService

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-server-vacations"
SERVER_VERSION = "1.0.0"
STARTUP_MESSAGE = "MCP Vacations Server running on stdio"


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


def create_server(service: AirbnbSearchService) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.input_schema,
            )
            for tool in TOOLS
        ]

    # Raw handler: UnknownToolError must propagate to the session as a fault.
    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await call_tool(req.params.name, req.params.arguments or {}, service)
        return types.ServerResult(to_call_tool_result(result))

    server.request_handlers[types.CallToolRequest] = handle_call_tool

    return server


async def serve(settings: Settings) -> None:
    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        service = AirbnbSearchService(
            client,
            base_url=settings.airbnb_base_url,
            timeout=settings.request_timeout,
        )
        server = create_server(service)
        async with stdio_server() as (read_stream, write_stream):
            print(STARTUP_MESSAGE, file=sys.stderr)
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def run() -> None:
    try:
        settings = Settings()
        configure_logging(settings, stream=sys.stderr)
        asyncio.run(serve(settings))
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    run()
