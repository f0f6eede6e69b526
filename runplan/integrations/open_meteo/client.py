"""Open-Meteo forecast client.

Open-Meteo is free and needs no API key. Locations are resolved to coordinates
with its geocoding API, then an hourly forecast is fetched and summarized into
one ForecastDay per calendar day.
"""

from dataclasses import dataclass, field
from datetime import datetime
import logging
import re
import time
from typing import Any, Callable, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from runplan.config.settings import get_weather_request_timeout
from runplan.errors import WeatherProviderError
from runplan.models import ForecastDay
from .models import (
    Coordinates,
    GeocodingResponse,
    OpenMeteoForecast,
    wmo_code_to_condition,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

MAX_FORECAST_DAYS = 16
MAX_ATTEMPTS = 3
INITIAL_RETRY_DELAY_SECONDS = 1.0
HOURS_PER_DAY = 24
# The hour whose weather code and wind direction represent the whole day.
REPRESENTATIVE_HOUR = 12

HOURLY_VARIABLES = [
    "temperature_2m",
    "apparent_temperature",
    "precipitation_probability",
    "weather_code",
    "wind_speed_10m",
    "wind_direction_10m",
    "relative_humidity_2m",
]

_COORDINATES_PATTERN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*,\s*(-?\d+(?:\.\d+)?)\s*$")
_COUNTRY_SUFFIX_PATTERN = re.compile(r",\s*[A-Z]{2,3}\s*$", re.IGNORECASE)


@dataclass
class OpenMeteoClient:
    timeout: float = field(default_factory=get_weather_request_timeout)
    max_attempts: int = MAX_ATTEMPTS
    sleep: Callable[[float], None] = time.sleep

    def _get_json(self, url: str, params: dict[str, Any]) -> Any:
        """GET a JSON document, retrying server errors and transport failures.

        4xx responses fail immediately. Timeouts count as transport failures.
        A 200 response whose body is not JSON raises a 502 without retrying.
        """
        last_error = WeatherProviderError("Open-Meteo request was not attempted", 503)

        for attempt in range(1, self.max_attempts + 1):
            try:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.get(url, params=params)
            except httpx.TimeoutException as e:
                logger.warning(
                    f"Open-Meteo request to {url} timed out (attempt {attempt}/{self.max_attempts})"
                )
                last_error = WeatherProviderError(f"Request timed out: {e}", 504)
            except httpx.RequestError as e:
                logger.warning(
                    f"Open-Meteo request to {url} failed (attempt {attempt}/{self.max_attempts}): "
                    f"exception_type={type(e).__name__}, error={e}"
                )
                last_error = WeatherProviderError(f"Request failed: {e}", 503)
            else:
                if response.status_code == 200:
                    try:
                        return response.json()
                    except ValueError as e:
                        logger.error(f"Open-Meteo returned a non-JSON body for {url}: {e}")
                        raise WeatherProviderError(
                            f"Invalid JSON from Open-Meteo: {e}", 502
                        ) from e
                error = WeatherProviderError(
                    f"Open-Meteo API error: {response.status_code} {response.text}",
                    response.status_code,
                )
                if 400 <= response.status_code < 500:
                    logger.error(f"Open-Meteo rejected request to {url}: {error}")
                    raise error
                logger.warning(
                    f"Open-Meteo returned {response.status_code} for {url} "
                    f"(attempt {attempt}/{self.max_attempts})"
                )
                last_error = error

            if attempt < self.max_attempts:
                self.sleep(INITIAL_RETRY_DELAY_SECONDS * 2 ** (attempt - 1))

        logger.error(f"Giving up on Open-Meteo request to {url} after {self.max_attempts} attempts")
        raise last_error

    def geocode(self, location: str) -> tuple[Coordinates, str]:
        """Resolve a location string to coordinates and a display name.

        A "lat,lon" string is used directly. A trailing country code such as
        ", IE" is dropped before the lookup since the geocoder does not accept it.
        """
        coords_match = _COORDINATES_PATTERN.match(location)
        if coords_match:
            latitude, longitude = coords_match.groups()
            return (
                Coordinates(latitude=float(latitude), longitude=float(longitude)),
                location,
            )

        name = _COUNTRY_SUFFIX_PATTERN.sub("", location).strip()
        payload = self._get_json(
            GEOCODING_URL,
            params={"name": name, "count": 1, "language": "en", "format": "json"},
        )
        geocoding = _validate(GeocodingResponse, payload)
        if not geocoding.results:
            raise WeatherProviderError("Location not found", 404)

        result = geocoding.results[0]
        logger.debug(f"Geocoded {location!r} to {result.display_name()}")
        return (
            Coordinates(latitude=result.latitude, longitude=result.longitude),
            result.display_name(),
        )

    def fetch_forecast(self, location: str, days: int) -> list[ForecastDay]:
        """Fetch a daily forecast for `location` starting today.

        `days` is clamped to what Open-Meteo offers (1-16). Returned days keep
        the caller's `location` string so they can be used as cache keys.
        """
        forecast_days = min(max(days, 1), MAX_FORECAST_DAYS)
        coords, _ = self.geocode(location)

        logger.info(f"Fetching {forecast_days}-day forecast for {location} from Open-Meteo")
        payload = self._get_json(
            FORECAST_URL,
            params={
                "latitude": coords.latitude,
                "longitude": coords.longitude,
                "hourly": ",".join(HOURLY_VARIABLES),
                "forecast_days": forecast_days,
                "timezone": "auto",
            },
        )
        forecast = _validate(OpenMeteoForecast, payload)
        return summarize_daily(forecast, location)


def _validate(model: type[ModelT], payload: Any) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Unexpected {model.__name__} payload from Open-Meteo: {e}")
        raise WeatherProviderError(
            f"Unexpected response from Open-Meteo: {e.error_count()} validation errors",
            502,
        ) from e


def _present(values: list) -> list:
    return [value for value in values if value is not None]


def _mean(values: list[float | None]) -> float | None:
    present = _present(values)
    if not present:
        return None
    return sum(present) / len(present)


def _at(values: list | None, index: int):
    if not values or index >= len(values):
        return None
    return values[index]


def summarize_daily(forecast: OpenMeteoForecast, location: str) -> list[ForecastDay]:
    """Collapse hourly data into one ForecastDay per complete 24-hour block.

    Temperature, feels-like and humidity are averaged; precipitation probability
    and wind speed take the day's maximum; the condition and wind direction come
    from the noon hour.

    Null hours are left out of each aggregate. A day with no temperature
    readings at all is dropped, so the result can be shorter than requested.
    """
    hourly = forecast.hourly
    total_days = len(hourly.time) // HOURS_PER_DAY
    days: list[ForecastDay] = []

    for day_index in range(total_days):
        start = day_index * HOURS_PER_DAY
        hours = slice(start, start + HOURS_PER_DAY)
        noon = start + REPRESENTATIVE_HOUR
        day = datetime.fromisoformat(hourly.time[start]).date()

        temperature = _mean(hourly.temperature_2m[hours])
        if temperature is None:
            logger.warning(f"Open-Meteo has no temperatures for {location} on {day}, skipping")
            continue
        feels_like = _mean(hourly.apparent_temperature[hours])
        humidity = _mean(hourly.relative_humidity_2m[hours])
        precipitation = _present(hourly.precipitation_probability[hours])
        wind_speed = _present(hourly.wind_speed_10m[hours])
        condition = wmo_code_to_condition(_at(hourly.weather_code, noon))

        days.append(
            ForecastDay(
                location=location,
                date=day,
                condition=condition,
                description=condition,
                temperature=round(temperature, 1),
                feels_like=round(feels_like, 1) if feels_like is not None else None,
                precipitation=max(precipitation, default=0),
                humidity=round(humidity) if humidity is not None else 0,
                wind_speed=round(max(wind_speed, default=0), 1),
                wind_direction=_at(hourly.wind_direction_10m, noon),
                latitude=forecast.latitude,
                longitude=forecast.longitude,
            )
        )

    return days
