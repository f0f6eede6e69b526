from datetime import date

from pydantic import BaseModel

from .training import Phase


class WeeklyMileage(BaseModel):
    week_number: int
    label: str  # "Week N" or "Pre N"
    week_start: date
    mileage: float  # km, completed runs only
    target: float  # km, 0 for pre-training weeks
    is_current_week: bool


class WeeklyPace(BaseModel):
    week_number: int
    label: str
    avg_pace_seconds: int | None  # seconds per km
    avg_pace: str | None  # "M:SS"
    run_count: int


class LongRunWeek(BaseModel):
    week_number: int
    label: str
    distance: float  # km, 0 when no long run was completed
    target: float  # km


class PhaseCompletion(BaseModel):
    phase: Phase
    total: int
    completed: int
    rate: int  # integer percent


class CompletionRate(BaseModel):
    total: int
    completed: int
    rate: int  # integer percent
    by_phase: list[PhaseCompletion]


class ProgressSummary(BaseModel):
    total_runs: int
    total_distance: float  # km
    avg_pace: str  # "" when unknown
    streak: int  # consecutive weeks above the mileage threshold
    longest_run: float  # km


class ProgressStats(BaseModel):
    longest_run_distance: float  # km
    best_long_run_pace: str | None
