from .run import ScheduledRun, RunType, ALL_RUN_TYPES
from .forecast import ForecastDay, WeatherCacheEntry
from .tolerance import (
    RunTypeToleranceProfile,
    DEFAULT_TOLERANCE_PROFILES,
    resolve_profiles,
)
from .training import (
    Phase,
    ALL_PHASES,
    TrainingWeek,
    TrainingWeekTarget,
    PhaseWindow,
    CurrentWeek,
)
from .suggestion import RunSuggestion, OPTIMAL_SCORE
from .stats import (
    WeeklyMileage,
    WeeklyPace,
    LongRunWeek,
    PhaseCompletion,
    CompletionRate,
    ProgressSummary,
    ProgressStats,
)

__all__ = [
    "ScheduledRun",
    "RunType",
    "ALL_RUN_TYPES",
    "ForecastDay",
    "WeatherCacheEntry",
    "RunTypeToleranceProfile",
    "DEFAULT_TOLERANCE_PROFILES",
    "resolve_profiles",
    "Phase",
    "ALL_PHASES",
    "TrainingWeek",
    "TrainingWeekTarget",
    "PhaseWindow",
    "CurrentWeek",
    "RunSuggestion",
    "OPTIMAL_SCORE",
    "WeeklyMileage",
    "WeeklyPace",
    "LongRunWeek",
    "PhaseCompletion",
    "CompletionRate",
    "ProgressSummary",
    "ProgressStats",
]
