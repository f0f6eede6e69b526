"""Cache-first forecast lookups.

Forecasts are cached per (location, calendar day). A request is served
entirely from the cache when every day in its window has a fresh entry;
otherwise the provider is asked once for the whole window and the results
are written back. A failed write-back is logged and does not fail the read.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
import logging
from typing import Protocol

import psycopg

from runplan.config.settings import get_weather_cache_ttl_minutes
from runplan.db.weather_cache import get_fresh_cache_entries, upsert_cache_entries
from runplan.errors import WeatherProviderError, WeatherUnavailable
from runplan.models import ForecastDay, WeatherCacheEntry
from runplan.utils.timezone import local_today, utc_now

logger = logging.getLogger(__name__)


class ForecastProvider(Protocol):
    def fetch_forecast(self, location: str, days: int) -> list[ForecastDay]: ...


def _default_ttl() -> timedelta:
    return timedelta(minutes=get_weather_cache_ttl_minutes())


@dataclass
class WeatherCache:
    provider: ForecastProvider
    ttl: timedelta = field(default_factory=_default_ttl)

    def get_forecast(
        self,
        location: str,
        days: int,
        today: date | None = None,
        now: datetime | None = None,
    ) -> list[ForecastDay]:
        """Get up to `days` consecutive daily forecasts starting at `today`.

        Raises:
            WeatherUnavailable: If some days are not cached and the provider fails.
        """
        now = now or utc_now()
        today = today or local_today(now=now)
        window = [today + timedelta(days=offset) for offset in range(days)]

        hits = {
            entry.forecast.date: entry.forecast
            for entry in get_fresh_cache_entries(location, window, now)
        }
        misses = [day for day in window if day not in hits]
        if not misses:
            logger.debug(f"Weather cache hit for {location} ({days} days)")
            return [hits[day] for day in window]

        logger.info(
            f"Weather cache miss for {location}: {len(misses)} of {days} days, fetching"
        )
        try:
            fetched = self.provider.fetch_forecast(location, days)
        except WeatherProviderError as e:
            logger.warning(
                f"Forecast provider failed for {location} (status={e.status_code}): {e}"
            )
            raise WeatherUnavailable(
                f"Weather forecast unavailable for {location}"
            ) from e

        window_dates = set(window)
        in_window = [day for day in fetched if day.date in window_dates]
        if len(in_window) < len(fetched):
            logger.debug(
                f"Ignoring {len(fetched) - len(in_window)} provider days outside the window"
            )

        try:
            upsert_cache_entries(
                [WeatherCacheEntry.from_fetch(day, now, self.ttl) for day in in_window]
            )
        except psycopg.Error as e:
            # The fetch succeeded, so serve it; the next request refetches.
            logger.warning(
                f"Failed to write {len(in_window)} forecast days to the cache for {location}: "
                f"exception_type={type(e).__name__}, error={e}"
            )

        merged = dict(hits)
        merged.update({day.date: day for day in in_window})
        return [merged[day] for day in window if day in merged]
