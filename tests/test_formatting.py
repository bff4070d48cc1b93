"""Unit tests for core.formatting: placeholders, separators, headers."""
import json

from core.formatting import (
    format_alert,
    format_alerts,
    format_forecast,
    format_notifications,
    format_number,
    format_period,
    format_token_prices,
)
from core.models import AlertFeature, ForecastPeriod, UserNotification


def test_alert_with_all_fields_missing():
    text = format_alert(AlertFeature.from_feature({"properties": {}}))
    assert text == (
        "Event: Unknown\nArea: Unknown\nSeverity: Unknown\n"
        "Status: Unknown\nHeadline: No headline\n---"
    )


def test_alert_without_properties_object():
    assert format_alert(AlertFeature.from_feature({})).startswith("Event: Unknown\n")


def test_alert_full():
    alert = AlertFeature.from_feature({
        "properties": {
            "event": "Wind Advisory",
            "areaDesc": "Marin",
            "severity": "Moderate",
            "status": "Actual",
            "headline": "Wind Advisory until 6 PM",
        }
    })
    lines = format_alert(alert).split("\n")
    assert lines == [
        "Event: Wind Advisory",
        "Area: Marin",
        "Severity: Moderate",
        "Status: Actual",
        "Headline: Wind Advisory until 6 PM",
        "---",
    ]


def test_alerts_header_and_join():
    alerts = [AlertFeature(event="A"), AlertFeature(event="B")]
    text = format_alerts("CA", alerts)
    assert text.startswith("Active alerts for CA:\n\nEvent: A\n")
    assert "---\nEvent: B" in text
    assert text.count("---") == 2


def test_period_missing_wind_direction_leaves_trailing_space():
    period = ForecastPeriod.from_dict({
        "name": "Tonight",
        "temperature": 40,
        "temperatureUnit": "F",
        "windSpeed": "5 mph",
        "shortForecast": "Clear",
    })
    lines = format_period(period).split("\n")
    assert lines == ["Tonight:", "Temperature: 40°F", "Wind: 5 mph ", "Clear", "---"]


def test_period_all_missing():
    lines = format_period(ForecastPeriod()).split("\n")
    assert lines == [
        "Unknown:",
        "Temperature: Unknown°F",
        "Wind: Unknown ",
        "No forecast available",
        "---",
    ]


def test_period_zero_degrees_is_not_unknown():
    text = format_period(ForecastPeriod(name="Night", temperature=0, temperature_unit="C"))
    assert "Temperature: 0°C" in text


def test_forecast_header_uses_coordinates_as_given():
    text = format_forecast(37.7749, -122.4194, [ForecastPeriod(name="Today")])
    assert text.startswith("Forecast for 37.7749, -122.4194:\n\nToday:")


def test_format_number():
    assert format_number(40.0) == "40"
    assert format_number(-122.5) == "-122.5"
    assert format_number(7) == "7"


def test_empty_notifications_single_line():
    text = format_notifications("abc", [])
    assert "abc" in text
    assert "\n" not in text
    assert "#1" not in text


def test_absent_notifications():
    assert "No notifications found for session: xyz" in format_notifications("xyz", None)


def test_notifications_enumerated_from_one():
    notifications = [
        UserNotification.from_dict({"token": "ETH", "targetPrice": "1928.23", "condition": "above"}),
        UserNotification.from_dict({"token": "BTC", "targetPrice": "60000", "condition": "below"}),
    ]
    text = format_notifications("s1", notifications)
    assert text.startswith("📬 Notifications for session **s1**:\n\n")
    assert text.endswith(
        "#1 - Token: ETH, Target: 1928.23, Condition: above\n"
        "#2 - Token: BTC, Target: 60000, Condition: below"
    )


def test_token_prices_pretty_printed():
    prices = {"ETH": 1928.23, "BTC": 60000}
    text = format_token_prices(prices)
    header, body = text.split("\n\n", 1)
    assert header == "Latest Token Prices:"
    assert body == json.dumps(prices, indent=2)
    assert '\n  "ETH": 1928.23' in body


def test_format_number_never_uses_exponent():
    assert format_number(0.00005) == "0.00005"
    assert format_number(-0.00001) == "-0.00001"
    assert format_number(37.7749) == "37.7749"


def test_forecast_header_small_coordinates():
    text = format_forecast(0.00005, -0.00001, [ForecastPeriod(name="Today")])
    assert text.startswith("Forecast for 0.00005, -0.00001:\n\n")


def test_models_tolerate_non_object_input():
    assert AlertFeature.from_feature("x") == AlertFeature()
    assert AlertFeature.from_feature({"properties": "oops"}) == AlertFeature()
    assert ForecastPeriod.from_dict(["x"]) == ForecastPeriod()
    assert UserNotification.from_dict(7) == UserNotification()
