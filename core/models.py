# =============================================================================
# core/models.py  —  Data Models (typed views of provider JSON)
# =============================================================================
#
# These dataclasses describe the *shape* of the data the two upstream
# services send back.  Neither service is under our control, so EVERY
# field is Optional: a missing key becomes None here, and the formatter
# decides which placeholder string to print for it.
#
# WHY from_dict() CONSTRUCTORS?
#   Provider payloads are camelCase JSON (areaDesc, windSpeed, targetPrice).
#   The constructors translate wire names to Python names in one place and
#   tolerate absent or mistyped nested objects ("properties": missing
#   entirely, or a string where an object belongs).
#
# LIFETIME:
#   Records are built per tool invocation and discarded once the text
#   response has been produced.  Nothing here is shared or mutated.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Optional


# -----------------------------------------------------------------------------
# Shape guards
# -----------------------------------------------------------------------------
# Anything that is not the expected JSON container reads as an empty one,
# so a malformed payload renders placeholders instead of raising.
# -----------------------------------------------------------------------------
def as_mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


# -----------------------------------------------------------------------------
# AlertFeature — one active alert from GET /alerts?area=XX
# -----------------------------------------------------------------------------
# The NWS returns GeoJSON: {"features": [{"properties": {...}}, ...]}.
# Only the five properties we print are kept.
# -----------------------------------------------------------------------------
@dataclass
class AlertFeature:
    """An active weather alert, reduced to the fields we display."""

    event: Optional[str] = None        # e.g., "Wind Advisory"
    area_desc: Optional[str] = None    # e.g., "San Francisco; Marin"
    severity: Optional[str] = None     # "Minor" | "Moderate" | "Severe" | ...
    status: Optional[str] = None       # "Actual" | "Test" | ...
    headline: Optional[str] = None

    @classmethod
    def from_feature(cls, feature: dict[str, Any]) -> "AlertFeature":
        props = as_mapping(as_mapping(feature).get("properties"))
        return cls(
            event=props.get("event"),
            area_desc=props.get("areaDesc"),
            severity=props.get("severity"),
            status=props.get("status"),
            headline=props.get("headline"),
        )


# -----------------------------------------------------------------------------
# ForecastPeriod — one entry of properties.periods from the forecast URL
# -----------------------------------------------------------------------------
@dataclass
class ForecastPeriod:
    """A named forecast period ("Tonight", "Wednesday", ...)."""

    name: Optional[str] = None
    temperature: Optional[float] = None
    temperature_unit: Optional[str] = None   # "F" or "C"
    wind_speed: Optional[str] = None         # already a string: "5 to 10 mph"
    wind_direction: Optional[str] = None     # compass point: "NW"
    short_forecast: Optional[str] = None

    @classmethod
    def from_dict(cls, period: dict[str, Any]) -> "ForecastPeriod":
        period = as_mapping(period)
        return cls(
            name=period.get("name"),
            temperature=period.get("temperature"),
            temperature_unit=period.get("temperatureUnit"),
            wind_speed=period.get("windSpeed"),
            wind_direction=period.get("windDirection"),
            short_forecast=period.get("shortForecast"),
        )


# -----------------------------------------------------------------------------
# UserNotification — a price alert stored by the notification service
# -----------------------------------------------------------------------------
# The service owns this contract.  condition is "above" or "below"; we do
# not check it, we only print it.
# -----------------------------------------------------------------------------
@dataclass
class UserNotification:
    """A price alert registered for a session."""

    id: Optional[str] = None
    session_id: Optional[str] = None
    token: Optional[str] = None
    target_price: Optional[str] = None
    condition: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserNotification":
        data = as_mapping(data)
        return cls(
            id=data.get("id"),
            session_id=data.get("session_id"),
            token=data.get("token"),
            target_price=data.get("targetPrice"),
            condition=data.get("condition"),
        )
