# =============================================================================
# core/notifications.py  —  Notification / Price Service Adapter & Reports
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps the local notification service (default http://localhost:3001)
#   that stores crypto price alerts and tracks the latest token prices.
#
#   POST /api/notification                    → register an alert
#   GET  /api/userNotification?session_id=ID  → list a session's alerts
#   GET  /api/latestTokenPrice                → current price snapshot
#
# FAILURE POLICY — "RAISE, THEN EXPLAIN":
#   The fetch_* / post_* functions raise (httpx errors, JSON decode errors,
#   or NotificationServiceError).  Each *_report() function catches that
#   and returns a "❌ Failed to ..." sentence embedding the error text, so
#   the agent sees WHY it failed.  A tool call never raises.
#
# STATUS CODES:
#   Only the latest-price call checks the status.  Registration embeds
#   whatever body the service sent back, even for a 4xx/5xx; the listing
#   call relies on the body decoding as JSON.
# =============================================================================

import logging
from typing import Any

import httpx

from core.config import ServiceConfig
from core.errors import NotificationServiceError
from core.formatting import format_notifications, format_token_prices
from core.models import UserNotification, as_list, as_mapping

logger = logging.getLogger(__name__)


# =============================================================================
# Request Adapter
# =============================================================================
async def post_notification(
    session_id: str, token: str, target_price: str, config: ServiceConfig
) -> str:
    """Create a price alert and return the service's raw response body."""
    payload = {"session_id": session_id, "token": token, "targetPrice": target_price}
    async with httpx.AsyncClient() as client:
        response = await client.post(
            f"{config.notification_api_base}/api/notification",
            headers=config.notification_headers,
            json=payload,
        )
    return response.text


async def fetch_user_notifications(session_id: str, config: ServiceConfig) -> list[UserNotification]:
    async with httpx.AsyncClient() as client:
        response = await client.get(
            f"{config.notification_api_base}/api/userNotification",
            params={"session_id": session_id},
        )
    # A body that is valid JSON but not an object lists nothing
    data = as_mapping(response.json())
    if data.get("message"):
        logger.info("Notification service says: %s", data["message"])
    return [UserNotification.from_dict(n) for n in as_list(data.get("userNotifications"))]


async def fetch_latest_token_prices(config: ServiceConfig) -> Any:
    """Return the opaque latestTokenPrices value from the service."""
    async with httpx.AsyncClient() as client:
        response = await client.get(
            f"{config.notification_api_base}/api/latestTokenPrice",
            headers=config.notification_headers,
        )
    if not response.is_success:
        raise NotificationServiceError("Failed to fetch latest token prices")

    data = response.json()
    if not isinstance(data, dict):
        raise NotificationServiceError("Unexpected response from notification service")
    return data.get("latestTokenPrices")


# =============================================================================
# PUBLIC API: reports used by the price-alert tools
# =============================================================================
async def register_notification_report(
    session_id: str, token: str, target_price: str, config: ServiceConfig
) -> str:
    try:
        result = await post_notification(session_id, token, target_price, config)
    except Exception as exc:
        logger.warning("Registering alert for session %s failed: %s", session_id, exc)
        return f"❌ Failed to register alert: {exc}"
    return f"✅ Price alert registered successfully:\n\n{result}"


async def user_notifications_report(session_id: str, config: ServiceConfig) -> str:
    try:
        notifications = await fetch_user_notifications(session_id, config)
    except Exception as exc:
        logger.warning("Listing alerts for session %s failed: %s", session_id, exc)
        return f"❌ Failed to fetch notifications: {str(exc) or 'Unknown error'}"
    return format_notifications(session_id, notifications)


async def latest_token_price_report(config: ServiceConfig) -> str:
    try:
        prices = await fetch_latest_token_prices(config)
    except Exception as exc:
        logger.warning("Fetching latest token prices failed: %s", exc)
        return f"Error retrieving latest token prices: {exc}"
    return format_token_prices(prices)
