# =============================================================================
# tools/console.py  —  Logging setup shared by both MCP servers
# =============================================================================
#
# We log to STDERR because the MCP server talks to the agent over STDOUT
# (stdio transport).  Anything we printed to stdout would corrupt the
# JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + arguments)
#     - GREEN for successful responses
#     - YELLOW for status/progress messages
#     - RED for tool errors
# =============================================================================

import logging
import sys
from typing import Any

from core.catalog import ToolResponse


_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"


def configure_logging(level: str = "INFO") -> None:
    """Send all log output to stderr with the [MCP] prefix."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def log_request(tool_name: str, arguments: dict[str, Any]) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def log_response(tool_name: str, response: ToolResponse) -> ToolResponse:
    """Log the outcome of a tool call, then return the response unchanged.

    Successful payloads can be large (a page of sales), so only the size is
    logged.  Errors are short and logged in full.
    """
    if response.is_error:
        logging.info(f"{_RED}  ← {tool_name} {response.text}{_RESET}")
    else:
        logging.info(f"{_GREEN}  ← {tool_name} response: {len(response.text)} chars{_RESET}")
    return response
