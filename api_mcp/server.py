# The module wires the dispatcher into an MCP server running over stdio.
# Author: API MCP Server contributors
# Date: 2025-06-12
# Version: 0.1.0

import asyncio
from typing import List, Optional
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from api_mcp.core.config import Settings, get_settings
from api_mcp.core.dispatcher import Dispatcher
from api_mcp.utils.logger import console


def build_server(settings: Settings, dispatcher: Optional[Dispatcher] = None) -> Server:
    """
    Creates the MCP server and registers the tools/list and tools/call handlers.

    tools/call is registered as a raw request handler so that an McpError
    raised by the dispatcher reaches the client as a JSON-RPC error, and the
    SDK's own input validation does not pre-empt the dispatcher's checks.
    """
    dispatcher = dispatcher or Dispatcher(settings)
    server = Server(settings.SERVER_NAME, version=settings.SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return dispatcher.list_tools()

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        content = await dispatcher.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(types.CallToolResult(content=content))

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def serve(settings: Settings):
    dispatcher = Dispatcher(settings)
    server = build_server(settings, dispatcher)
    console.display_tools_table(dispatcher.describe_tools(), title=f"{settings.SERVER_NAME} {settings.SERVER_VERSION}")
    async with stdio_server() as (read_stream, write_stream):
        console.success("MCP API Server running on stdio")
        # raise_exceptions=False: session errors are logged by the SDK and the server keeps running.
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
            raise_exceptions=False,
        )


def main():
    settings = get_settings()
    console.set_level(settings.LOG_LEVEL)
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        console.info("Interrupted, MCP API Server closed.")


if __name__ == "__main__":
    main()
