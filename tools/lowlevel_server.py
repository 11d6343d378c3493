# =============================================================================
# tools/lowlevel_server.py  —  Raw list-tools / call-tool MCP server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   The same six tools as tools/mcp_server.py, hosted on the MCP SDK's
#   low-level Server instead of FastMCP.  Here the catalog's JSON schemas are
#   advertised verbatim and a single call_tool handler routes by name.
#
# WHEN TO USE IT:
#   Set GUMROAD_MCP_SERVER=lowlevel.  The FastMCP server is the default;
#   both expose an identical external contract.
# =============================================================================

from typing import Any, Optional

from fastmcp.exceptions import ToolError
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from core.catalog import ToolDispatcher
from tools.console import log_request, log_response, log_status
from tools.mcp_server import SERVER_NAME, SERVER_VERSION


def list_tool_definitions(dispatcher: ToolDispatcher) -> list[types.Tool]:
    """The static catalog as MCP Tool objects."""
    return [
        types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema)
        for tool in dispatcher.list_tools()
    ]


async def handle_call(
    dispatcher: ToolDispatcher,
    name: str,
    arguments: Optional[dict[str, Any]],
) -> list[types.TextContent]:
    """Dispatch one tool call.

    Raises:
        ToolError: When the tool failed.  The SDK turns any exception raised
                   by the handler into a result with isError=true carrying
                   the exception text.
    """
    log_request(name, arguments or {})
    log_status("calling Gumroad")
    response = log_response(name, await dispatcher.call_tool(name, arguments))
    if response.is_error:
        raise ToolError(response.text)
    return [types.TextContent(**item) for item in response.to_content()]


def create_server(dispatcher: ToolDispatcher) -> Server:
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return list_tool_definitions(dispatcher)

    @server.call_tool()
    async def _call_tool(name: str, arguments: Optional[dict[str, Any]]) -> list[types.TextContent]:
        return await handle_call(dispatcher, name, arguments)

    return server


async def run_stdio(server: Server) -> None:
    """Serve `server` over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
