"""Database operations for the per-day forecast cache."""

import logging
from datetime import date, datetime, timezone
from typing import Iterable

from runplan.models import ForecastDay, WeatherCacheEntry
from .connection import get_db_cursor, get_db_connection

logger = logging.getLogger(__name__)

_CACHE_COLUMNS = """
    location, forecast_date, condition, description, temperature, feels_like,
    precipitation, humidity, wind_speed, wind_direction, latitude, longitude,
    cached_at, expires_at
"""


def _ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def get_fresh_cache_entries(
    location: str, dates: Iterable[date], now: datetime
) -> list[WeatherCacheEntry]:
    """Get unexpired cache entries for a location and set of dates in one query."""
    dates = list(dates)
    if not dates:
        return []

    with get_db_cursor() as cursor:
        cursor.execute(
            f"""
            SELECT {_CACHE_COLUMNS}
            FROM weather_cache
            WHERE location = %s
              AND forecast_date = ANY(%s)
              AND expires_at > %s
            ORDER BY forecast_date
            """,
            (location, dates, _ensure_utc(now)),
        )
        rows = cursor.fetchall()

    return [_row_to_entry(row) for row in rows]


def upsert_cache_entries(entries: list[WeatherCacheEntry]) -> int:
    """Insert or refresh cache entries in a single transaction.

    The unique (location, forecast_date) constraint means concurrent refreshes
    for the same key collapse into one row; the last write wins.

    Returns:
        The number of entries written.
    """
    if not entries:
        return 0

    params = [
        (
            entry.forecast.location,
            entry.forecast.date,
            entry.forecast.condition,
            entry.forecast.description,
            entry.forecast.temperature,
            entry.forecast.feels_like,
            entry.forecast.precipitation,
            entry.forecast.humidity,
            entry.forecast.wind_speed,
            entry.forecast.wind_direction,
            entry.forecast.latitude,
            entry.forecast.longitude,
            _ensure_utc(entry.cached_at),
            _ensure_utc(entry.expires_at),
        )
        for entry in entries
    ]

    with get_db_connection() as conn:
        with conn.transaction():
            with conn.cursor() as cursor:
                cursor.executemany(
                    f"""
                    INSERT INTO weather_cache ({_CACHE_COLUMNS})
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                    ON CONFLICT (location, forecast_date)
                    DO UPDATE SET
                        condition = EXCLUDED.condition,
                        description = EXCLUDED.description,
                        temperature = EXCLUDED.temperature,
                        feels_like = EXCLUDED.feels_like,
                        precipitation = EXCLUDED.precipitation,
                        humidity = EXCLUDED.humidity,
                        wind_speed = EXCLUDED.wind_speed,
                        wind_direction = EXCLUDED.wind_direction,
                        latitude = EXCLUDED.latitude,
                        longitude = EXCLUDED.longitude,
                        cached_at = EXCLUDED.cached_at,
                        expires_at = EXCLUDED.expires_at
                    """,
                    params,
                )

    logger.info(f"Upserted {len(entries)} weather cache entries")
    return len(entries)


def _row_to_entry(row) -> WeatherCacheEntry:
    (
        location,
        forecast_date,
        condition,
        description,
        temperature,
        feels_like,
        precipitation,
        humidity,
        wind_speed,
        wind_direction,
        latitude,
        longitude,
        cached_at,
        expires_at,
    ) = row
    return WeatherCacheEntry(
        forecast=ForecastDay(
            location=location,
            date=forecast_date,
            condition=condition,
            description=description,
            temperature=temperature,
            feels_like=feels_like,
            precipitation=precipitation,
            humidity=humidity,
            wind_speed=wind_speed,
            wind_direction=wind_direction,
            latitude=latitude,
            longitude=longitude,
        ),
        cached_at=_ensure_utc(cached_at),
        expires_at=_ensure_utc(expires_at),
    )
