# =============================================================================
# core/config.py  —  Settings loaded from the environment
# =============================================================================
#
# The server has exactly one required input: a Gumroad access token.
# Everything else has a sensible default.
#
#   GUMROAD_ACCESS_TOKEN   (required)  OAuth access token for the seller
#   GUMROAD_API_BASE_URL   (optional)  defaults to https://api.gumroad.com/v2
#   GUMROAD_MCP_LOG_LEVEL  (optional)  DEBUG / INFO / WARNING ...
#   GUMROAD_MCP_SERVER     (optional)  "fastmcp" (default) or "lowlevel"
#
# main.py calls load_dotenv() BEFORE load_settings(), so a local .env file
# works the same as real environment variables.
# =============================================================================

from dataclasses import dataclass
import os
from typing import Mapping, Optional

from core.errors import ConfigError


DEFAULT_BASE_URL = "https://api.gumroad.com/v2"
SERVER_MODES = ("fastmcp", "lowlevel")


@dataclass(frozen=True)
class Settings:
    """Immutable runtime configuration."""

    access_token: str
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"
    server_mode: str = "fastmcp"

    def __repr__(self) -> str:
        # Never leak the token into logs or tracebacks.
        return (
            f"Settings(access_token='***', base_url={self.base_url!r}, "
            f"log_level={self.log_level!r}, server_mode={self.server_mode!r})"
        )


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the process environment.

    Args:
        environ: Mapping to read from (defaults to os.environ).  Tests pass
                 a plain dict here instead of patching the real environment.

    Raises:
        ConfigError: If GUMROAD_ACCESS_TOKEN is missing/blank, or the server
                     mode is not one of SERVER_MODES.
    """
    env = os.environ if environ is None else environ

    token = env.get("GUMROAD_ACCESS_TOKEN", "").strip()
    if not token:
        raise ConfigError("GUMROAD_ACCESS_TOKEN environment variable is required")

    server_mode = env.get("GUMROAD_MCP_SERVER", "fastmcp").strip().lower()
    if server_mode not in SERVER_MODES:
        raise ConfigError(
            f"GUMROAD_MCP_SERVER must be one of {', '.join(SERVER_MODES)}, got {server_mode!r}"
        )

    return Settings(
        access_token=token,
        base_url=env.get("GUMROAD_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        log_level=env.get("GUMROAD_MCP_LOG_LEVEL", "INFO").upper(),
        server_mode=server_mode,
    )
