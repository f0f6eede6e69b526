"""Weather suitability scoring for a single forecast day and run type.

score = 100 - precipitation penalty - wind penalty - temperature penalty

- Precipitation costs up to 60 points, fully applied at the profile's maximum.
- Wind costs up to 30 points, fully applied at the profile's maximum.
- A temperature outside the profile's range costs 15 points.
- An avoided condition caps the final score at 30. The day is still scored so
  callers can decide whether to use it.
"""

import math
from typing import NamedTuple

from runplan.models import ForecastDay, RunTypeToleranceProfile

PRECIPITATION_WEIGHT = 60
WIND_WEIGHT = 30
TEMPERATURE_PENALTY = 15
DISQUALIFIED_SCORE_CAP = 30


class WeatherScore(NamedTuple):
    score: int
    reason: str


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def has_avoided_condition(day: ForecastDay, profile: RunTypeToleranceProfile) -> bool:
    """Check whether the day's condition matches any avoided label (case-insensitive)."""
    condition = day.condition.lower()
    return any(avoided.lower() in condition for avoided in profile.avoid_conditions)


def precipitation_penalty(day: ForecastDay, profile: RunTypeToleranceProfile) -> float:
    limit = max(profile.max_precipitation, 1)
    return min(PRECIPITATION_WEIGHT, PRECIPITATION_WEIGHT * day.precipitation / limit)


def wind_penalty(day: ForecastDay, profile: RunTypeToleranceProfile) -> float:
    limit = max(profile.max_wind_speed, 1)
    return min(WIND_WEIGHT, WIND_WEIGHT * day.wind_speed / limit)


def temperature_penalty(day: ForecastDay, profile: RunTypeToleranceProfile) -> float:
    if profile.min_temperature <= day.temperature <= profile.max_temperature:
        return 0
    return TEMPERATURE_PENALTY


def quality_label(score: int) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Fair"
    return "Challenging"


def describe(day: ForecastDay, score: int) -> str:
    return (
        f"{quality_label(score)} conditions ({score}/100). "
        f"{day.condition}, {_round_half_up(day.temperature)}°C."
    )


def score_day(day: ForecastDay, profile: RunTypeToleranceProfile) -> WeatherScore:
    """Score a forecast day from 0 to 100 against a tolerance profile."""
    raw = (
        100
        - precipitation_penalty(day, profile)
        - wind_penalty(day, profile)
        - temperature_penalty(day, profile)
    )
    score = max(0, min(100, _round_half_up(raw)))
    if has_avoided_condition(day, profile):
        score = min(score, DISQUALIFIED_SCORE_CAP)
    return WeatherScore(score=score, reason=describe(day, score))


def rejection_reasons(
    day: ForecastDay, profile: RunTypeToleranceProfile
) -> list[str]:
    """Explain each threshold the day violates. Empty if the day is acceptable."""
    reasons: list[str] = []
    if day.precipitation > profile.max_precipitation:
        reasons.append(
            f"Precipitation too high ({round(day.precipitation)}% vs "
            f"{round(profile.max_precipitation)}% max)"
        )
    if day.wind_speed > profile.max_wind_speed:
        reasons.append(
            f"Wind speed exceeds limit ({round(day.wind_speed)} km/h vs "
            f"{round(profile.max_wind_speed)} km/h max)"
        )
    if day.temperature < profile.min_temperature:
        reasons.append(
            f"Temperature below minimum ({round(day.temperature)}°C vs "
            f"{round(profile.min_temperature)}°C min)"
        )
    if day.temperature > profile.max_temperature:
        reasons.append(
            f"Temperature above maximum ({round(day.temperature)}°C vs "
            f"{round(profile.max_temperature)}°C max)"
        )
    condition = day.condition.lower()
    for avoided in profile.avoid_conditions:
        if avoided.lower() in condition:
            reasons.append(f"Conditions include {avoided} which should be avoided")
            break
    return reasons
