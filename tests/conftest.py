"""Test fixtures for the Gumroad MCP server.

The Gumroad API is never contacted: every client is built on an
httpx.MockTransport backed by FakeGumroad, which answers from a route table
and records each request it sees.
"""

import copy
from typing import Any, Union

import httpx
import pytest

from core.catalog import ToolDispatcher
from core.gumroad_client import GumroadClient

# =============================================================================
# Sample records
# =============================================================================

SAMPLE_SUBSCRIBER: dict[str, Any] = {
    "id": "sub_123",
    "product_id": "prod_abc",
    "product_name": "Pro Membership",
    "user_id": "user_9",
    "user_email": "buyer@example.com",
    "purchase_ids": ["pur_1", "pur_2"],
    "created_at": "2024-01-05T10:00:00Z",
    "user_requested_cancellation_at": None,
    "charge_occurrence_count": None,
    "recurrence": "monthly",
    "status": "alive",
    "ended_at": None,
    "failed_at": None,
    "free_trial_ends_at": None,
    "license_key": "ABCD-EFGH",
}

SAMPLE_SALE: dict[str, Any] = {
    "id": "sale_42",
    "email": "buyer@example.com",
    "seller_id": "seller_1",
    "timestamp": "about 1 hour ago",
    "daystamp": " 5 Jan 2024 10:00 AM",
    "created_at": "2024-01-05T10:00:00Z",
    "product_name": "Pro Membership",
    "product_id": "prod_abc",
    "product_permalink": "pro",
    "formatted_display_price": "$10",
    "formatted_total_price": "$10",
    "currency_symbol": "$",
    "amount_refundable_in_currency": "10",
    "price": 1000,
    "gumroad_fee": 100,
    "formatted_subtotal": "$10",
    "subscription_id": "sub_123",
    "is_recurring_billing": True,
    "can_contact": True,
    "is_gift_sender_purchase": False,
    "is_gift_receiver_purchase": False,
    "refunded": False,
    "chargedback": False,
    "disputed": False,
    "dispute_won": False,
    "purchase_email": "buyer@example.com",
    "license_key": "ABCD-EFGH",
    "quantity": 1,
    "shipping_information": None,
    "is_shipping_required": False,
    "card": {
        "visual": "**** **** **** 4242",
        "type": "visa",
        "bin": None,
        "expiry_month": None,
        "expiry_year": None,
    },
}

SAMPLE_PRODUCT: dict[str, Any] = {
    "id": "prod_abc",
    "name": "Pro Membership",
    "url": "https://example.gumroad.com/l/pro",
    "preview_url": None,
    "description": "Monthly access, includes café perks",
    "customizable_price": None,
    "require_shipping": False,
    "published": True,
    "custom_permalink": "pro",
    "subscription_duration": "monthly",
    "custom_receipt": None,
    "custom_fields": [],
    "sales_count": 12,
    "sales_usd_cents": 12000,
    "is_tiered_membership": True,
    "recurrences": ["monthly", "yearly"],
    "variants": [{"title": "Tier", "options": [{"name": "Gold"}]}],
}


# =============================================================================
# Fake Gumroad API
# =============================================================================

Payload = Union[dict[str, Any], str]


class FakeGumroad:
    """Route table keyed by path (without the /v2 prefix)."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, Payload]] = {}
        self.requests: list[httpx.Request] = []

    def route(self, path: str, payload: Payload, status: int = 200) -> None:
        self.routes[path] = (status, payload)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/v2")
        if path not in self.routes:
            return httpx.Response(404, text="not found")
        status, payload = self.routes[path]
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, json=copy.deepcopy(payload))


@pytest.fixture
def gumroad() -> FakeGumroad:
    return FakeGumroad()


@pytest.fixture
def client(gumroad: FakeGumroad) -> GumroadClient:
    return GumroadClient("test-token", transport=httpx.MockTransport(gumroad))


@pytest.fixture
def dispatcher(client: GumroadClient) -> ToolDispatcher:
    return ToolDispatcher(client)
