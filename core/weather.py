# =============================================================================
# core/weather.py  —  National Weather Service Adapter & Reports
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Talks to the public NWS API (api.weather.gov, US locations only) and
#   turns its GeoJSON into the text the get-alerts / get-forecast tools
#   return.
#
# FAILURE POLICY — "DEGRADE, DON'T RAISE":
#   make_nws_request() swallows every transport, HTTP or bad-URL error,
#   logs it, and returns None.  The report functions turn None into a short
#   "Failed to retrieve ..." sentence.  Nothing in this module raises to
#   the caller.
#   (Compare core/notifications.py, where the adapter raises and the report
#   embeds the error text.  The two services are treated differently on
#   purpose and that difference is part of the tools' contract.)
#
# THE FORECAST CHAIN:
#   1. GET /points/{lat},{lon}   → properties.forecast  (a URL)
#   2. GET <that URL>            → properties.periods   (a list)
#   Step 2 depends on step 1's output, so the calls run one after the other
#   and step 2 is skipped whenever step 1 gives us no URL.
# =============================================================================

import logging
from typing import Any, Optional

import httpx

from core.config import ServiceConfig
from core.formatting import format_alerts, format_forecast, format_number
from core.models import AlertFeature, ForecastPeriod, as_list, as_mapping

logger = logging.getLogger(__name__)


# =============================================================================
# Request Adapter
# =============================================================================
async def make_nws_request(url: str, config: ServiceConfig) -> Optional[dict[str, Any]]:
    """GET a NWS resource and decode it, or return None on any failure.

    Args:
        url: Absolute URL (built from config.nws_api_base, or taken from a
             previous response for the forecast chain).
        config: Supplies the User-Agent / Accept headers.

    Returns:
        The decoded JSON object, or None if the request failed, the status
        was not 2xx, or the body was not a JSON object.
    """
    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(url, headers=config.nws_headers)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as exc:
            logger.error("Error making NWS request: %s", exc)
            return None

    if not isinstance(data, dict):
        logger.error("Error making NWS request: expected a JSON object from %s", url)
        return None
    return data


def alerts_url(state_code: str, config: ServiceConfig) -> str:
    return str(httpx.URL(f"{config.nws_api_base}/alerts", params={"area": state_code}))


def points_url(latitude: float, longitude: float, config: ServiceConfig) -> str:
    # The points endpoint wants fixed 4-decimal coordinates
    return f"{config.nws_api_base}/points/{latitude:.4f},{longitude:.4f}"


# =============================================================================
# PUBLIC API: reports used by the get-alerts / get-forecast tools
# =============================================================================
async def get_alerts_report(state: str, config: ServiceConfig) -> str:
    """Active alerts for a two-letter US state, as display text."""
    state_code = state.upper()
    data = await make_nws_request(alerts_url(state_code, config), config)

    if data is None:
        return "Failed to retrieve alerts data"

    features = as_list(data.get("features"))
    if not features:
        return f"No active alerts for {state_code}"

    alerts = [AlertFeature.from_feature(feature) for feature in features]
    return format_alerts(state_code, alerts)


async def get_forecast_report(latitude: float, longitude: float, config: ServiceConfig) -> str:
    """Multi-period forecast for a coordinate, as display text.

    Issues at most two requests: the grid-point lookup and, only if that
    produced a forecast URL, the forecast itself.
    """
    # --- Step 1: resolve the coordinate to its forecast URL ---
    points_data = await make_nws_request(points_url(latitude, longitude, config), config)
    if points_data is None:
        return (
            "Failed to retrieve grid point data for coordinates: "
            f"{format_number(latitude)}, {format_number(longitude)}. "
            "This location may not be supported by the NWS API "
            "(only US locations are supported)."
        )

    forecast_url = as_mapping(points_data.get("properties")).get("forecast")
    if not forecast_url:
        return "Failed to get forecast URL from grid point data"

    # --- Step 2: fetch the periods ---
    forecast_data = await make_nws_request(forecast_url, config)
    if forecast_data is None:
        return "Failed to retrieve forecast data"

    periods = as_list(as_mapping(forecast_data.get("properties")).get("periods"))
    if not periods:
        return "No forecast periods available"

    return format_forecast(
        latitude, longitude, [ForecastPeriod.from_dict(p) for p in periods]
    )
