# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the Gumroad API)
# =============================================================================
#
# These types describe the *shape* of every record the Gumroad API sends
# back.  The server never creates or mutates them; it only transports
# them from the remote API to the calling agent.
#
# WHY TypedDict AND NOT DATACLASSES?
#   Records are passed through exactly as Gumroad returned them.  Decoding
#   into a dataclass would silently drop fields Gumroad adds later (or crash
#   on fields it removes).  A TypedDict is still a plain dict at runtime, so
#   the JSON the agent sees is byte-for-byte what the API returned, while the
#   type checker still knows which keys to expect.
#
# DESIGN PRINCIPLE: pass-through, not datastore.
#   No cross-references are validated (a Sale's product_id is never checked
#   against a Product).  The remote API is authoritative.
# =============================================================================

from typing import Any, Literal, Optional, TypedDict


SubscriberStatus = Literal["alive", "cancelled", "pending_cancellation", "pending_failure"]


# -----------------------------------------------------------------------------
# Subscriber: one recurring-purchase relationship
# -----------------------------------------------------------------------------
class Subscriber(TypedDict, total=False):
    """A buyer's membership/subscription to a product."""

    id: str
    product_id: str
    product_name: str
    user_id: str
    user_email: str
    purchase_ids: list[str]
    created_at: str
    user_requested_cancellation_at: Optional[str]
    charge_occurrence_count: Optional[int]
    recurrence: str                    # "monthly", "yearly", ...
    status: SubscriberStatus
    ended_at: Optional[str]
    failed_at: Optional[str]
    free_trial_ends_at: Optional[str]
    license_key: str


# -----------------------------------------------------------------------------
# Card: masked payment card summary attached to a sale
# -----------------------------------------------------------------------------
class Card(TypedDict):
    visual: Optional[str]              # "**** **** **** 4242"
    type: Optional[str]
    bin: Optional[str]
    expiry_month: Optional[str]
    expiry_year: Optional[str]


# -----------------------------------------------------------------------------
# Sale: a single completed transaction
# -----------------------------------------------------------------------------
class Sale(TypedDict, total=False):
    """One completed purchase."""

    id: str
    email: str
    seller_id: str
    timestamp: str
    daystamp: str
    created_at: str
    product_name: str
    product_id: str
    product_permalink: str

    # --- Pricing ---
    # Gumroad sends both pre-formatted strings and raw numbers.
    formatted_display_price: str
    formatted_total_price: str
    formatted_subtotal: str
    currency_symbol: str
    amount_refundable_in_currency: str
    price: int                         # cents
    gumroad_fee: int                   # cents

    subscription_id: Optional[str]
    is_recurring_billing: bool
    can_contact: bool
    is_gift_sender_purchase: bool
    is_gift_receiver_purchase: bool
    refunded: bool
    chargedback: bool
    disputed: bool
    dispute_won: bool
    purchase_email: str
    license_key: str
    quantity: int
    shipping_information: Optional[dict[str, Any]]   # free-form
    is_shipping_required: bool
    card: Optional[Card]


# -----------------------------------------------------------------------------
# Product: a sellable listing
# -----------------------------------------------------------------------------
class Product(TypedDict, total=False):
    """A product listed on the seller's Gumroad account."""

    id: str
    name: str
    url: str
    preview_url: Optional[str]
    description: str
    customizable_price: Optional[bool]
    require_shipping: bool
    published: bool
    custom_permalink: Optional[str]
    subscription_duration: Optional[str]
    custom_receipt: Optional[str]
    custom_fields: list[Any]           # opaque
    sales_count: int
    sales_usd_cents: int
    is_tiered_membership: bool
    recurrences: Optional[list[str]]
    variants: list[Any]                # opaque


# =============================================================================
# Envelopes
# =============================================================================
# Every Gumroad response is a JSON object with at least a boolean `success`.
# `success: false` means failure regardless of the HTTP status code.
# =============================================================================
class ApiResponse(TypedDict, total=False):
    """Single-record envelope: {"success": ..., "data": {...}}."""

    success: bool
    data: dict[str, Any]
    message: str


class SubscribersResponse(TypedDict, total=False):
    success: bool
    subscribers: list[Subscriber]
    message: str


class SalesResponse(TypedDict, total=False):
    success: bool
    sales: list[Sale]
    message: str


class ProductsResponse(TypedDict, total=False):
    success: bool
    products: list[Product]
    message: str
