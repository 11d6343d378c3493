# =============================================================================
# core/catalog.py  —  Static tool catalog + dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Defines the six Gumroad tools ONCE (name, description, JSON input
#   schema, handler), independent of how they get registered with an MCP
#   host.  Both hosting strategies in tools/ are thin adapters over this.
#
# THE FLOW FOR ONE TOOL CALL:
#   1. Look the tool up by name            (unknown → UnknownToolError)
#   2. Validate arguments against schema   (bad args → ValidationError,
#                                           before ANY network call)
#   3. Run the handler → one GumroadClient accessor → one HTTP GET
#   4. Render the result as indented JSON text
#   5. Anything raised in 1–4 becomes an error-flagged ToolResponse
#
# The dispatcher never lets a tool failure escape as an exception: the agent
# always gets either the JSON payload or a short "Error: ..." message.
# =============================================================================

from dataclasses import dataclass
import json
import logging
from typing import Any, Awaitable, Callable, Optional

from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

from core.errors import GumroadError, UnknownToolError, ValidationError
from core.gumroad_client import GumroadClient


ToolHandler = Callable[[GumroadClient, dict[str, Any]], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDefinition:
    """One entry in the catalog."""

    name: str
    description: str
    input_schema: dict[str, Any]
    handler: ToolHandler


@dataclass(frozen=True)
class ToolResponse:
    """Uniform envelope returned to the caller for every tool call."""

    text: str
    is_error: bool = False

    def to_content(self) -> list[dict[str, str]]:
        return [{"type": "text", "text": self.text}]


def _object_schema(properties: dict[str, dict[str, str]], required: tuple[str, ...] = ()) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = list(required)
    return schema


# =============================================================================
# Handlers: one per tool, each calling exactly one client accessor
# =============================================================================
async def _get_subscribers(client: GumroadClient, args: dict[str, Any]) -> Any:
    return await client.get_subscribers(args["product_id"])


async def _get_subscriber(client: GumroadClient, args: dict[str, Any]) -> Any:
    return await client.get_subscriber(args["subscriber_id"])


async def _get_sales(client: GumroadClient, args: dict[str, Any]) -> Any:
    return await client.get_sales(
        after=args.get("after"),
        before=args.get("before"),
        page=args.get("page"),
        email=args.get("email"),
    )


async def _get_sale(client: GumroadClient, args: dict[str, Any]) -> Any:
    return await client.get_sale(args["sale_id"])


async def _get_products(client: GumroadClient, args: dict[str, Any]) -> Any:
    return await client.get_products()


async def _get_product(client: GumroadClient, args: dict[str, Any]) -> Any:
    return await client.get_product(args["product_id"])


# =============================================================================
# The catalog
# =============================================================================
# Order here is the order list_tools() reports.
# =============================================================================
TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="get_subscribers",
        description="Get all subscribers for a specific Gumroad product",
        input_schema=_object_schema(
            {"product_id": {"type": "string", "description": "The Gumroad product ID"}},
            required=("product_id",),
        ),
        handler=_get_subscribers,
    ),
    ToolDefinition(
        name="get_subscriber",
        description="Get details for a specific subscriber",
        input_schema=_object_schema(
            {"subscriber_id": {"type": "string", "description": "The subscriber ID"}},
            required=("subscriber_id",),
        ),
        handler=_get_subscriber,
    ),
    ToolDefinition(
        name="get_sales",
        description="Get all sales with optional filters (date range, email, pagination)",
        input_schema=_object_schema(
            {
                "after": {
                    "type": "string",
                    "description": "ISO 8601 timestamp - only return sales after this date",
                },
                "before": {
                    "type": "string",
                    "description": "ISO 8601 timestamp - only return sales before this date",
                },
                "page": {"type": "number", "description": "Page number for pagination"},
                "email": {"type": "string", "description": "Filter sales by customer email"},
            }
        ),
        handler=_get_sales,
    ),
    ToolDefinition(
        name="get_sale",
        description="Get details for a specific sale",
        input_schema=_object_schema(
            {"sale_id": {"type": "string", "description": "The sale ID"}},
            required=("sale_id",),
        ),
        handler=_get_sale,
    ),
    ToolDefinition(
        name="get_products",
        description="Get all Gumroad products",
        input_schema=_object_schema({}),
        handler=_get_products,
    ),
    ToolDefinition(
        name="get_product",
        description="Get details for a specific product",
        input_schema=_object_schema(
            {"product_id": {"type": "string", "description": "The product ID"}},
            required=("product_id",),
        ),
        handler=_get_product,
    ),
)


def render_result(result: Any) -> str:
    """Pretty-print a result for the agent.  Not a wire contract."""
    return json.dumps(result, indent=2, ensure_ascii=False)


class ToolDispatcher:
    """Routes (tool name, arguments) to a handler and wraps the outcome.

    Holds no per-call state, so one instance can serve concurrent calls.
    """

    def __init__(self, client: GumroadClient, tools: tuple[ToolDefinition, ...] = TOOLS) -> None:
        self._client = client
        self._tools = {tool.name: tool for tool in tools}
        self._validators = {tool.name: Draft7Validator(tool.input_schema) for tool in tools}

    def list_tools(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def get_tool(self, name: str) -> ToolDefinition:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def validate(self, name: str, arguments: Optional[dict[str, Any]]) -> dict[str, Any]:
        """Check `arguments` against the tool's schema and return them.

        Raises:
            UnknownToolError: If `name` is not in the catalog.
            ValidationError: On a missing required field or a wrong type.
        """
        self.get_tool(name)
        args = {} if arguments is None else arguments
        error = best_match(self._validators[name].iter_errors(args))
        if error is not None:
            raise ValidationError(name, error.message)
        return args

    async def call_tool(self, name: str, arguments: Optional[dict[str, Any]] = None) -> ToolResponse:
        """Run one tool and return its response envelope.  Never raises."""
        try:
            args = self.validate(name, arguments)
            result = await self._tools[name].handler(self._client, args)
        except GumroadError as e:
            logging.warning("%s failed: %s", name, e)
            return ToolResponse(text=f"Error: {e}", is_error=True)
        except Exception as e:
            logging.exception("%s failed unexpectedly", name)
            return ToolResponse(text=f"Error: {e}", is_error=True)

        return ToolResponse(text=render_result(result))
