import math
from typing import Mapping

from pydantic import BaseModel

from .run import RunType, ALL_RUN_TYPES


class RunTypeToleranceProfile(BaseModel):
    """Weather thresholds for one run type.

    Limits are always concrete numbers here; "no limit" is represented with
    +/- infinity rather than None.
    """

    run_type: RunType
    max_precipitation: float  # 0-100
    max_wind_speed: float = math.inf  # km/h
    min_temperature: float = -math.inf  # Celsius
    max_temperature: float = math.inf  # Celsius
    avoid_conditions: tuple[str, ...] = ()

    @classmethod
    def from_stored(
        cls,
        run_type: RunType,
        max_precipitation: float,
        max_wind_speed: float | None,
        min_temperature: float | None,
        max_temperature: float | None,
        avoid_conditions: list[str] | None,
    ) -> "RunTypeToleranceProfile":
        """Build a profile from a stored row, where NULL limits mean "no limit"."""
        return cls(
            run_type=run_type,
            max_precipitation=max_precipitation,
            max_wind_speed=math.inf if max_wind_speed is None else max_wind_speed,
            min_temperature=-math.inf if min_temperature is None else min_temperature,
            max_temperature=math.inf if max_temperature is None else max_temperature,
            avoid_conditions=tuple(avoid_conditions or ()),
        )


DEFAULT_TOLERANCE_PROFILES: dict[RunType, RunTypeToleranceProfile] = {
    "LONG_RUN": RunTypeToleranceProfile(
        run_type="LONG_RUN",
        max_precipitation=20,
        max_wind_speed=25,
        min_temperature=0,
        max_temperature=25,
        avoid_conditions=("Heavy Rain", "Thunderstorm", "Heavy Snow"),
    ),
    "EASY_RUN": RunTypeToleranceProfile(
        run_type="EASY_RUN",
        max_precipitation=50,
        max_wind_speed=35,
        min_temperature=-5,
        max_temperature=30,
        avoid_conditions=("Thunderstorm", "Heavy Snow"),
    ),
    "TEMPO_RUN": RunTypeToleranceProfile(
        run_type="TEMPO_RUN",
        max_precipitation=30,
        max_wind_speed=25,
        min_temperature=5,
        max_temperature=25,
        avoid_conditions=("Heavy Rain", "Thunderstorm", "Heavy Snow"),
    ),
    "INTERVAL_RUN": RunTypeToleranceProfile(
        run_type="INTERVAL_RUN",
        max_precipitation=30,
        max_wind_speed=25,
        min_temperature=5,
        max_temperature=25,
        avoid_conditions=("Heavy Rain", "Thunderstorm", "Heavy Snow"),
    ),
    "RECOVERY_RUN": RunTypeToleranceProfile(
        run_type="RECOVERY_RUN",
        max_precipitation=60,
        max_wind_speed=40,
        min_temperature=-5,
        max_temperature=30,
        avoid_conditions=("Thunderstorm",),
    ),
    "RACE": RunTypeToleranceProfile(run_type="RACE", max_precipitation=100),
}


def resolve_profiles(
    stored: Mapping[RunType, RunTypeToleranceProfile] | None = None,
) -> dict[RunType, RunTypeToleranceProfile]:
    """Return a profile for every run type, using defaults where none is stored."""
    stored = stored or {}
    return {
        run_type: stored.get(run_type, DEFAULT_TOLERANCE_PROFILES[run_type])
        for run_type in ALL_RUN_TYPES
    }
