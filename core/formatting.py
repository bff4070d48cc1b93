# =============================================================================
# core/formatting.py  —  Response Formatter
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns provider records into the fixed text layouts the calling agent
#   reads.  Every function here is pure and total: given any record (even
#   one with every field missing) it returns a string, never raises.
#
# PLACEHOLDERS FOR MISSING FIELDS:
#   alerts / periods       → "Unknown"
#   alert headline         → "No headline"
#   period narrative       → "No forecast available"
#   wind direction         → ""            (so the line reads "Wind: 5 mph ")
#   temperature unit       → "F"
#
# SEPARATORS:
#   Each alert and each period ends with a "---" line, and blocks are joined
#   with a single newline, so the output reads as a list of cards.
# =============================================================================

import json
import math
from decimal import Decimal
from typing import Any, Iterable, Optional

from core.models import AlertFeature, ForecastPeriod, UserNotification

UNKNOWN = "Unknown"
SEPARATOR = "---"


def format_number(value: Any) -> str:
    """Render a coordinate or temperature the way a person would type it.

    Integral floats drop the trailing ".0" (40.0 → "40").  Other floats are
    printed in fixed point, never exponent form (5e-05 → "0.00005").
    """
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        if math.isfinite(value):
            return format(Decimal(repr(value)), "f")
    return str(value)


def _or_unknown(value: Optional[str]) -> str:
    return value or UNKNOWN


# =============================================================================
# Weather alerts
# =============================================================================
def format_alert(alert: AlertFeature) -> str:
    """Five labelled lines plus a separator."""
    return "\n".join([
        f"Event: {_or_unknown(alert.event)}",
        f"Area: {_or_unknown(alert.area_desc)}",
        f"Severity: {_or_unknown(alert.severity)}",
        f"Status: {_or_unknown(alert.status)}",
        f"Headline: {alert.headline or 'No headline'}",
        SEPARATOR,
    ])


def format_alerts(state_code: str, alerts: Iterable[AlertFeature]) -> str:
    formatted = [format_alert(alert) for alert in alerts]
    return f"Active alerts for {state_code}:\n\n" + "\n".join(formatted)


# =============================================================================
# Forecast periods
# =============================================================================
def format_period(period: ForecastPeriod) -> str:
    if period.temperature is None:
        temperature = UNKNOWN
    else:
        temperature = format_number(period.temperature)
    return "\n".join([
        f"{_or_unknown(period.name)}:",
        f"Temperature: {temperature}°{period.temperature_unit or 'F'}",
        f"Wind: {_or_unknown(period.wind_speed)} {period.wind_direction or ''}",
        period.short_forecast or "No forecast available",
        SEPARATOR,
    ])


def format_forecast(
    latitude: float, longitude: float, periods: Iterable[ForecastPeriod]
) -> str:
    formatted = [format_period(period) for period in periods]
    header = f"Forecast for {format_number(latitude)}, {format_number(longitude)}:"
    return header + "\n\n" + "\n".join(formatted)


# =============================================================================
# Price alerts
# =============================================================================
def format_notification(index: int, notification: UserNotification) -> str:
    """One line per alert; index is 1-based."""
    return (
        f"#{index} - Token: {_or_unknown(notification.token)}, "
        f"Target: {_or_unknown(notification.target_price)}, "
        f"Condition: {_or_unknown(notification.condition)}"
    )


def format_notifications(
    session_id: str, notifications: Optional[list[UserNotification]]
) -> str:
    if not notifications:
        return f"ℹ️ No notifications found for session: {session_id}"

    lines = [
        format_notification(i, notification)
        for i, notification in enumerate(notifications, start=1)
    ]
    return f"📬 Notifications for session **{session_id}**:\n\n" + "\n".join(lines)


def format_token_prices(prices: Any) -> str:
    """Pretty-print the snapshot as-is; no per-token formatting."""
    return "Latest Token Prices:\n\n" + json.dumps(prices, indent=2, ensure_ascii=False)
