# =============================================================================
# main.py  —  Entry Point for the Gumroad MCP server
# =============================================================================
#
# HOW TO RUN:
#   GUMROAD_ACCESS_TOKEN=... uv run python main.py
#   (or put GUMROAD_ACCESS_TOKEN in a .env file next to this script)
#
# WHAT HAPPENS:
#   1. Loads .env and reads settings (core/config.py)
#   2. Refuses to start without an access token (exit code 1)
#   3. Builds the Gumroad client and the tool dispatcher
#   4. Hosts the tools over stdio, with FastMCP (default) or the low-level
#      MCP server (GUMROAD_MCP_SERVER=lowlevel)
#
# Everything human-readable goes to STDERR.  STDOUT belongs to the MCP
# protocol.
# =============================================================================

import asyncio
import logging
import sys

from dotenv import load_dotenv

# Load .env BEFORE reading settings, so GUMROAD_ACCESS_TOKEN can live there.
load_dotenv()

from core.catalog import ToolDispatcher
from core.config import Settings, load_settings
from core.errors import ConfigError
from core.gumroad_client import GumroadClient
from tools import lowlevel_server, mcp_server
from tools.console import configure_logging


def build_dispatcher(settings: Settings) -> ToolDispatcher:
    client = GumroadClient(settings.access_token, base_url=settings.base_url)
    return ToolDispatcher(client)


def main() -> int:
    """Start the server.  Returns the process exit code."""
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)
    dispatcher = build_dispatcher(settings)

    try:
        logging.info("Gumroad MCP server running on stdio")
        if settings.server_mode == "lowlevel":
            asyncio.run(lowlevel_server.run_stdio(lowlevel_server.create_server(dispatcher)))
        else:
            mcp_server.create_server(dispatcher).run(transport="stdio")
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
