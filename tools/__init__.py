# =============================================================================
# tools/__init__.py
# =============================================================================
# This package hosts the Gumroad tool catalog over MCP.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP host and core/.
#     - mcp_server.py      registers each tool with FastMCP (default)
#     - lowlevel_server.py raw list-tools / call-tool on the MCP SDK Server
#     - console.py         stderr logging shared by both
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk to Gumroad directly (that's core/gumroad_client.py)
#   - They do NOT define schemas or error text (that's core/catalog.py)
# =============================================================================
