from datetime import date
from typing import Self

from pydantic import BaseModel

from .forecast import ForecastDay
from .run import RunType

OPTIMAL_SCORE = 80


class RunSuggestion(BaseModel):
    """A proposed run. Built fresh for each planning request and never stored."""

    date: date
    run_type: RunType
    distance: float  # km
    weather_score: int
    is_optimal: bool
    reason: str
    weather: ForecastDay
    # Tolerance thresholds the day breaks, or other cautions about the run.
    warnings: list[str] = []

    @classmethod
    def build(
        cls,
        day: ForecastDay,
        run_type: RunType,
        distance: float,
        weather_score: int,
        reason: str,
        warnings: list[str] | None = None,
    ) -> Self:
        return cls(
            date=day.date,
            run_type=run_type,
            distance=distance,
            weather_score=weather_score,
            is_optimal=weather_score >= OPTIMAL_SCORE,
            reason=reason,
            weather=day,
            warnings=warnings or [],
        )

    def __lt__(self, other: Self) -> bool:
        return self.date < other.date
