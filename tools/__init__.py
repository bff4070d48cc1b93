# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool registry.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the MCP protocol and core/.
#   mcp_server.py:
#     1. Declares each tool's name, description and argument constraints
#     2. Calls a report function from core/
#     3. Wraps the returned string in a single MCP text content block
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP (that's core/weather.py, core/notifications.py)
#   - They do NOT format provider data (that's core/formatting.py)
#   - They do NOT re-validate arguments (FastMCP already did)
# =============================================================================
