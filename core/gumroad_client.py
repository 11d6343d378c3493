# =============================================================================
# core/gumroad_client.py  —  Gumroad REST API client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps the handful of read-only Gumroad v2 endpoints the tools need.
#   Every accessor is one authenticated HTTP GET:
#
#     get_subscribers(product_id) → GET /products/{product_id}/subscribers
#     get_subscriber(id)          → GET /subscribers/{id}
#     get_sales(...filters)       → GET /sales
#     get_sale(id)                → GET /sales/{id}
#     get_products()              → GET /products
#     get_product(id)             → GET /products/{id}
#
# TWO LAYERS OF FAILURE:
#   1. HTTP status: non-2xx raises TransportError (status, reason, body).
#   2. Envelope: Gumroad can answer 200 with {"success": false}.
#      That raises ApiError with a per-endpoint message.
#
# WHAT THIS CLIENT DELIBERATELY DOESN'T DO:
#   No caching, no retries, no pagination traversal.  Remote state is
#   authoritative and can change between calls, so every accessor call
#   hits the network.
#
# CONCURRENCY:
#   The only state is the access token, set once in __init__.  Each request
#   opens its own httpx.AsyncClient, so concurrent tool calls never share a
#   connection or any mutable state.
# =============================================================================

import logging
from typing import Any, Optional, Union

import httpx

from core.config import DEFAULT_BASE_URL
from core.errors import ApiError, TransportError
from core.models import (
    ApiResponse,
    Product,
    ProductsResponse,
    Sale,
    SalesResponse,
    Subscriber,
    SubscribersResponse,
)


class GumroadClient:
    """Async client for the Gumroad v2 API.

    Args:
        access_token: The seller's OAuth access token.  Sent as the
                      `access_token` query parameter on every request.
        base_url: API root.  Only overridden in tests or against a stub.
        transport: Optional httpx transport.  Tests inject an
                   httpx.MockTransport here so nothing touches the network.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._access_token = access_token
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    # =========================================================================
    # Request primitive
    # =========================================================================
    async def _get(self, endpoint: str, params: Optional[dict[str, str]] = None) -> Any:
        """GET `endpoint` and return the decoded JSON body.

        The body is returned as-is; envelope checks happen in the accessors.

        Raises:
            TransportError: On any non-2xx status.
        """
        url = f"{self._base_url}{endpoint}"
        query = {"access_token": self._access_token}
        if params:
            query.update(params)

        logging.debug("GET %s params=%s", url, sorted(k for k in query if k != "access_token"))

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.get(url, params=query)

        if not response.is_success:
            raise TransportError(response.status_code, response.reason_phrase, response.text)

        return response.json()

    # =========================================================================
    # Subscribers
    # =========================================================================
    async def get_subscribers(self, product_id: str) -> list[Subscriber]:
        """All subscribers for a product (may be empty)."""
        response: SubscribersResponse = await self._get(f"/products/{product_id}/subscribers")
        return _unwrap(response, "subscribers", "Failed to fetch subscribers")

    async def get_subscriber(self, subscriber_id: str) -> Subscriber:
        response: ApiResponse = await self._get(f"/subscribers/{subscriber_id}")
        return _unwrap(response, "data", "Failed to fetch subscriber details")

    # =========================================================================
    # Sales
    # =========================================================================
    async def get_sales(
        self,
        after: Optional[str] = None,
        before: Optional[str] = None,
        page: Union[int, float, None] = None,
        email: Optional[str] = None,
    ) -> list[Sale]:
        """Sales, optionally filtered.

        Args:
            after: ISO 8601 date; only sales after it.
            before: ISO 8601 date; only sales before it.
            page: 1-based page number.
            email: Only sales to this buyer email.

        Filters that are None or empty are left off the query string.
        """
        params: dict[str, str] = {}
        if after:
            params["after"] = after
        if before:
            params["before"] = before
        if page:
            params["page"] = _format_page(page)
        if email:
            params["email"] = email

        response: SalesResponse = await self._get("/sales", params)
        return _unwrap(response, "sales", "Failed to fetch sales")

    async def get_sale(self, sale_id: str) -> Sale:
        response: ApiResponse = await self._get(f"/sales/{sale_id}")
        return _unwrap(response, "data", "Failed to fetch sale details")

    # =========================================================================
    # Products
    # =========================================================================
    async def get_products(self) -> list[Product]:
        response: ProductsResponse = await self._get("/products")
        return _unwrap(response, "products", "Failed to fetch products")

    async def get_product(self, product_id: str) -> Product:
        response: ApiResponse = await self._get(f"/products/{product_id}")
        return _unwrap(response, "data", "Failed to fetch product details")


def _unwrap(response: Any, field: str, failure_message: str) -> Any:
    """Return `field` from an envelope, or raise ApiError.

    A missing payload field is a failure even when `success` is true.  An
    empty record or list is a valid payload.
    """
    if not response.get("success") or response.get(field) is None:
        raise ApiError(failure_message, response.get("message"))
    return response[field]


def _format_page(page: Union[int, float]) -> str:
    # 2 and 2.0 both go on the wire as "2".
    if isinstance(page, float) and page.is_integer():
        return str(int(page))
    return str(page)
