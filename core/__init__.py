# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL provider access and formatting logic for the
# weather & price-alert tool server.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or Google ADK.  The modules here
#   speak HTTP (via httpx) and return plain strings; the tools/ layer wraps
#   those strings into MCP content blocks.
#
#   core/config.py         → process-wide service settings (URLs, headers)
#   core/models.py         → typed views of provider JSON (optional fields)
#   core/formatting.py     → pure text rendering, never fails
#   core/weather.py        → National Weather Service adapter + reports
#   core/notifications.py  → local notification/price service adapter + reports
# =============================================================================
