# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains a Google ADK demo agent for manual testing.
#
# ARCHITECTURAL ROLE:
#   The MCP server (tools/) is meant to be driven by an external agent.
#   agent/ provides one: an LLM that spawns the server over stdio, decides
#   which tool to call, and explains the answer.
#
# WHAT THE AGENT IS NOT:
#   - It is NOT required to run the server
#   - It does NOT call the weather or notification services itself
#   - It does NOT format provider data (that's core/formatting.py)
# =============================================================================
