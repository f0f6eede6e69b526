"""Open-Meteo integration for fetching daily weather forecasts."""

from .client import OpenMeteoClient, summarize_daily
from .models import (
    Coordinates,
    GeocodingResponse,
    GeocodingResult,
    OpenMeteoForecast,
    OpenMeteoHourly,
    wmo_code_to_condition,
)

__all__ = [
    "OpenMeteoClient",
    "summarize_daily",
    "Coordinates",
    "GeocodingResponse",
    "GeocodingResult",
    "OpenMeteoForecast",
    "OpenMeteoHourly",
    "wmo_code_to_condition",
]
