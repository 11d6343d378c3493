# =============================================================================
# core/errors.py  —  Error taxonomy
# =============================================================================
#
# Every failure a tool call can hit has its own exception type, so the
# dispatcher (core/catalog.py) can turn any of them into the same short
# "Error: <message>" text for the agent.
#
#   TransportError    → Gumroad answered with a non-2xx HTTP status
#   ApiError          → HTTP was fine, but the envelope said success=false
#                       (or the expected payload field was missing)
#   ValidationError   → tool arguments don't match the tool's input schema
#   UnknownToolError  → the agent asked for a tool that doesn't exist
#   ConfigError       → startup configuration is missing or invalid
#
# Only ConfigError is fatal.  Everything else is recovered at the tool
# boundary and never escapes as a process-level fault.
# =============================================================================

from typing import Optional


class GumroadError(Exception):
    """Base class for all errors raised by this package."""


class TransportError(GumroadError):
    """The Gumroad API returned a non-2xx HTTP response.

    The raw response body is kept verbatim to aid diagnosis.
    """

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"Gumroad API error: {status_code} {reason} - {body}")


class ApiError(GumroadError):
    """The response decoded fine but its envelope reports failure."""

    def __init__(self, message: str, remote_message: Optional[str] = None) -> None:
        self.remote_message = remote_message
        super().__init__(message)


class ValidationError(GumroadError):
    """Tool arguments were rejected by the tool's input schema."""

    def __init__(self, tool_name: str, message: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Invalid arguments for {tool_name}: {message}")


class UnknownToolError(GumroadError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ConfigError(GumroadError):
    """Required configuration is missing; the server must not start."""
