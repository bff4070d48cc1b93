# =============================================================================
# core/config.py  —  Service Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the base URLs and request headers for the two upstream services.
#   One ServiceConfig is built at server startup and handed to every
#   adapter call; nothing mutates it afterwards (the dataclass is frozen).
#
# ENVIRONMENT OVERRIDES (all optional):
#   NWS_API_BASE            → weather provider base URL
#   NWS_USER_AGENT          → User-Agent sent to the weather provider
#   NOTIFICATION_API_BASE   → local notification/price service base URL
#
#   With nothing set, the defaults below are used.  Entry points call
#   load_dotenv() first, so a .env file works too.
# =============================================================================

import os
from dataclasses import dataclass

NWS_API_BASE = "https://api.weather.gov"
USER_AGENT = "weather-app/1.0"
NOTIFICATION_API_BASE = "http://localhost:3001"


@dataclass(frozen=True)
class ServiceConfig:
    """Immutable settings for the outbound HTTP adapters."""

    nws_api_base: str = NWS_API_BASE
    user_agent: str = USER_AGENT
    notification_api_base: str = NOTIFICATION_API_BASE

    @property
    def nws_headers(self) -> dict[str, str]:
        # api.weather.gov rejects requests without a User-Agent
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/geo+json",
        }

    @property
    def notification_headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json"}


def load_config() -> ServiceConfig:
    """Build the ServiceConfig from the environment, falling back to defaults."""
    return ServiceConfig(
        nws_api_base=os.environ.get("NWS_API_BASE", NWS_API_BASE).rstrip("/"),
        user_agent=os.environ.get("NWS_USER_AGENT", USER_AGENT),
        notification_api_base=os.environ.get(
            "NOTIFICATION_API_BASE", NOTIFICATION_API_BASE
        ).rstrip("/"),
    )
