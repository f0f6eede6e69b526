"""Database operations for per-run-type weather tolerance profiles."""

import logging

from runplan.models import RunType, RunTypeToleranceProfile
from .connection import get_db_cursor

logger = logging.getLogger(__name__)


def get_tolerance_profiles() -> dict[RunType, RunTypeToleranceProfile]:
    """Get the stored tolerance profiles keyed by run type.

    Run types without a stored row are absent; callers fill them in with
    `resolve_profiles`. NULL limits are read as "no limit".
    """
    with get_db_cursor() as cursor:
        cursor.execute(
            """
            SELECT run_type, max_precipitation, max_wind_speed,
                   min_temperature, max_temperature, avoid_conditions
            FROM weather_preferences
            """
        )
        rows = cursor.fetchall()

    profiles: dict[RunType, RunTypeToleranceProfile] = {}
    for (
        run_type,
        max_precipitation,
        max_wind_speed,
        min_temperature,
        max_temperature,
        avoid_conditions,
    ) in rows:
        profiles[run_type] = RunTypeToleranceProfile.from_stored(
            run_type=run_type,
            max_precipitation=max_precipitation,
            max_wind_speed=max_wind_speed,
            min_temperature=min_temperature,
            max_temperature=max_temperature,
            avoid_conditions=avoid_conditions,
        )
    logger.debug(f"Loaded {len(profiles)} stored tolerance profiles")
    return profiles
