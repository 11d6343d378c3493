# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers the six Gumroad tools with FastMCP.  Each tool is a thin
#   wrapper that hands its arguments to the ToolDispatcher (core/catalog.py)
#   and returns the dispatcher's text.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name via MCP (e.g., "get_sales")
#   2. FastMCP validates the arguments against the function signature
#   3. The function forwards them to ToolDispatcher.call_tool()
#   4. The dispatcher validates again against the catalog schema, calls
#      Gumroad, and renders the result as indented JSON
#   5. An error response is raised as ToolError, which FastMCP turns into
#      a result with isError=true and the "Error: ..." text
#
# TOOL NAMING CONVENTIONS:
#   - get_*  → Read-only retrieval (idempotent, safe to retry)
#   All tools in this server are read-only.
#
# RUNNING THIS SERVER:
#   Normally started through main.py, which loads the access token first.
# =============================================================================

from typing import Annotated, Any, Optional, Union

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field, StrictFloat, StrictInt

from core.catalog import ToolDispatcher
from tools.console import log_request, log_response, log_status


SERVER_NAME = "gumroad-mcp"
SERVER_VERSION = "1.0.0"


def create_server(dispatcher: ToolDispatcher) -> FastMCP:
    """Build a FastMCP server with every catalog tool registered.

    Descriptions come from the catalog so both hosting strategies advertise
    identical text.
    """
    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

    def describe(name: str) -> str:
        return dispatcher.get_tool(name).description

    async def run(tool_name: str, **arguments: Any) -> str:
        # Optional parameters the agent left out arrive as None.
        args = {k: v for k, v in arguments.items() if v is not None}
        log_request(tool_name, args)
        log_status("calling Gumroad")
        response = log_response(tool_name, await dispatcher.call_tool(tool_name, args))
        if response.is_error:
            raise ToolError(response.text)
        return response.text

    # =========================================================================
    # Subscribers
    # =========================================================================
    @mcp.tool(name="get_subscribers", description=describe("get_subscribers"))
    async def get_subscribers(
        product_id: Annotated[str, Field(description="The Gumroad product ID")],
    ) -> str:
        return await run("get_subscribers", product_id=product_id)

    @mcp.tool(name="get_subscriber", description=describe("get_subscriber"))
    async def get_subscriber(
        subscriber_id: Annotated[str, Field(description="The subscriber ID")],
    ) -> str:
        return await run("get_subscriber", subscriber_id=subscriber_id)

    # =========================================================================
    # Sales
    # =========================================================================
    @mcp.tool(name="get_sales", description=describe("get_sales"))
    async def get_sales(
        after: Annotated[
            Optional[str],
            Field(description="ISO 8601 timestamp - only return sales after this date"),
        ] = None,
        before: Annotated[
            Optional[str],
            Field(description="ISO 8601 timestamp - only return sales before this date"),
        ] = None,
        # Strict: "2" and True are rejected, not coerced to a number.
        page: Annotated[
            Optional[Union[StrictInt, StrictFloat]],
            Field(description="Page number for pagination"),
        ] = None,
        email: Annotated[Optional[str], Field(description="Filter sales by customer email")] = None,
    ) -> str:
        return await run("get_sales", after=after, before=before, page=page, email=email)

    @mcp.tool(name="get_sale", description=describe("get_sale"))
    async def get_sale(
        sale_id: Annotated[str, Field(description="The sale ID")],
    ) -> str:
        return await run("get_sale", sale_id=sale_id)

    # =========================================================================
    # Products
    # =========================================================================
    @mcp.tool(name="get_products", description=describe("get_products"))
    async def get_products() -> str:
        return await run("get_products")

    @mcp.tool(name="get_product", description=describe("get_product"))
    async def get_product(
        product_id: Annotated[str, Field(description="The product ID")],
    ) -> str:
        return await run("get_product", product_id=product_id)

    return mcp
