from datetime import date, datetime, timedelta

from pydantic import BaseModel, ConfigDict


class ForecastDay(BaseModel):
    """Daily weather summary for one location and calendar day."""

    model_config = ConfigDict(frozen=True)

    location: str
    date: date
    condition: str
    temperature: float  # Celsius
    precipitation: float  # 0-100 probability
    wind_speed: float  # km/h
    humidity: float  # 0-100 percentage
    description: str | None = None
    feels_like: float | None = None
    wind_direction: float | None = None  # degrees
    latitude: float | None = None
    longitude: float | None = None


class WeatherCacheEntry(BaseModel):
    """A cached ForecastDay along with when it was fetched and when it expires."""

    forecast: ForecastDay
    cached_at: datetime
    expires_at: datetime

    @property
    def key(self) -> tuple[str, date]:
        return (self.forecast.location, self.forecast.date)

    def is_fresh(self, now: datetime) -> bool:
        """An entry is usable only while `now` is strictly before its expiry."""
        return now < self.expires_at

    @classmethod
    def from_fetch(
        cls, forecast: ForecastDay, fetched_at: datetime, ttl: timedelta
    ) -> "WeatherCacheEntry":
        return cls(forecast=forecast, cached_at=fetched_at, expires_at=fetched_at + ttl)
