from .mileage import weekly_mileage, mileage_by_week
from .pace import pace_progression
from .long_run import long_run_progression
from .completion import completion_rate
from .streak import consistency_streak
from .summary import summary, progress_stats

__all__ = [
    "weekly_mileage",
    "mileage_by_week",
    "pace_progression",
    "long_run_progression",
    "completion_rate",
    "consistency_streak",
    "summary",
    "progress_stats",
]
