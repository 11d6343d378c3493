# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL of the Gumroad-facing logic: the REST client,
# the record shapes, the error types, and the static tool catalog.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or the MCP SDK.  The catalog
#   describes tools as plain data (name, description, JSON schema, handler),
#   so any host can register them.  The MCP wiring lives in tools/.
# =============================================================================
