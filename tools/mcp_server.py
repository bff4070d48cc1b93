# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares the five MCP tools an agent can call and binds each one to a
#   core/ report function.  Each tool is a thin wrapper: it logs the call,
#   awaits the report, and wraps the resulting text in exactly ONE text
#   content block.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name via MCP (e.g., "get-forecast")
#   2. FastMCP validates the arguments against the declared schema
#      (state must be 2 characters, latitude within [-90, 90], ...),
#      so a bad argument never reaches our code
#   3. FastMCP routes the call to the decorated coroutine below
#   4. The coroutine calls core/, which does the HTTP work and formatting
#   5. The agent receives one {"type": "text", "text": ...} block
#
# THE TOOL CATALOG:
#   get-alerts               → NWS active alerts for a US state
#   get-forecast             → NWS forecast periods for a coordinate
#   register-notification    → create a crypto price alert   (writes!)
#   get-user-notifications   → list a session's price alerts
#   get-latest-token-price   → current token price snapshot
#
#   register-notification is the only tool that changes anything upstream.
#   It is NOT idempotent: calling it twice registers two alerts.
#
# ERRORS:
#   core/ never raises out of a report function, so nothing here needs a
#   try/except.  Every failure arrives as ordinary text.
#
# RUNNING THIS SERVER:
#     a) python -m tools.mcp_server
#     b) weather-alerts-mcp            (console script, see pyproject.toml)
#     c) spawned over stdio by the demo agent in agent/
# =============================================================================

import json
import logging
import os
import sys
from typing import Annotated

from dotenv import load_dotenv
from fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from core.config import load_config
from core.notifications import (
    latest_token_price_report,
    register_notification_report,
    user_notifications_report,
)
from core.weather import get_alerts_report, get_forecast_report

# .env must be read before load_config() below
load_dotenv()

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server communicates with the agent via
# STDOUT.  A log line on stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for the returned text
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

# Responses can be long (a state with 40 alerts); the log shows the start
_LOG_PREVIEW_CHARS = 300

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> TextContent:
    """Log the response text in GREEN, then wrap it as a content block."""
    preview = text if len(text) <= _LOG_PREVIEW_CHARS else text[:_LOG_PREVIEW_CHARS] + "…"
    logging.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(preview, ensure_ascii=False)}{_RESET}")
    return TextContent(type="text", text=text)


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
# "weather" is the server identity clients see during the MCP handshake.
# CONFIG is built once; handlers read it at call time and never modify it.
mcp = FastMCP("weather")
CONFIG = load_config()


# =============================================================================
# TOOL 1: get-alerts
# =============================================================================
# The schema enforces exactly two characters.  Upper-casing happens in
# core/, so "ca" and "CA" query the same area.
# =============================================================================
@mcp.tool(name="get-alerts", description="Get weather alerts for a state")
async def get_alerts(
    state: Annotated[
        str,
        Field(min_length=2, max_length=2, description="Two-letter state code (e.g. CA, NY)"),
    ],
) -> TextContent:
    _log_request("get-alerts", state=state)
    text = await get_alerts_report(state, CONFIG)
    return _log_response("get-alerts", text)


# =============================================================================
# TOOL 2: get-forecast
# =============================================================================
# Two chained NWS calls under the hood (grid point → forecast).  Only US
# coordinates resolve; anything else comes back as a readable failure.
# =============================================================================
@mcp.tool(name="get-forecast", description="Get weather forecast for a location")
async def get_forecast(
    latitude: Annotated[
        float, Field(ge=-90, le=90, description="Latitude of the location")
    ],
    longitude: Annotated[
        float, Field(ge=-180, le=180, description="Longitude of the location")
    ],
) -> TextContent:
    _log_request("get-forecast", latitude=latitude, longitude=longitude)
    text = await get_forecast_report(latitude, longitude, CONFIG)
    return _log_response("get-forecast", text)


# =============================================================================
# TOOL 3: register-notification
# =============================================================================
# Argument names mirror the notification service's JSON body, hence the
# camelCase targetPrice.  The price stays a string end to end.
# =============================================================================
@mcp.tool(
    name="register-notification",
    description="Create a price alert for a specific token",
)
async def register_notification(
    session_id: Annotated[str, Field(description="Unique session identifier for the user")],
    token: Annotated[str, Field(description="Cryptocurrency token symbol (e.g., ETH, BTC)")],
    targetPrice: Annotated[
        str,
        Field(description="Target price at which the user wants to be alerted (e.g., '1928.23')"),
    ],
) -> TextContent:
    _log_request("register-notification", session_id=session_id, token=token, targetPrice=targetPrice)
    _log_status(f"POST {CONFIG.notification_api_base}/api/notification")
    text = await register_notification_report(session_id, token, targetPrice, CONFIG)
    return _log_response("register-notification", text)


# =============================================================================
# TOOL 4: get-user-notifications
# =============================================================================
@mcp.tool(
    name="get-user-notifications",
    description="Fetch all price alerts for a specific user session",
)
async def get_user_notifications(
    session_id: Annotated[str, Field(description="Session ID used to filter user notifications")],
) -> TextContent:
    _log_request("get-user-notifications", session_id=session_id)
    text = await user_notifications_report(session_id, CONFIG)
    return _log_response("get-user-notifications", text)


# =============================================================================
# TOOL 5: get-latest-token-price
# =============================================================================
# No arguments.  The snapshot is passed through as pretty-printed JSON; the
# agent reads the symbols and prices itself.
# =============================================================================
@mcp.tool(
    name="get-latest-token-price",
    description=(
        "Retrieve the latest token prices from the notification server. "
        "This tool fetches and returns the current prices of various tokens "
        "as maintained by the system."
    ),
)
async def get_latest_token_price() -> TextContent:
    _log_request("get-latest-token-price")
    text = await latest_token_price_report(CONFIG)
    return _log_response("get-latest-token-price", text)


# =============================================================================
# Server entry point
# =============================================================================
# mcp.run() blocks on the stdio transport until the client disconnects.
# A failure to start is the only thing that ends the process with an error.
# =============================================================================
def main() -> None:
    try:
        logging.info("Weather MCP Server running on stdio")
        mcp.run()
    except Exception:
        logging.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
