from datetime import date

from runplan.config.settings import get_training_start
from runplan.models import ScheduledRun
from runplan.plan.week import week_number
from .mileage import mileage_by_week

STREAK_THRESHOLD_KM = 10.0


def consistency_streak(
    runs: list[ScheduledRun],
    today: date,
    threshold_km: float = STREAK_THRESHOLD_KM,
    anchor: date | None = None,
) -> int:
    """Count consecutive weeks, ending with the current one, above `threshold_km`.

    A week must strictly exceed the threshold to count. The first week that
    doesn't ends the streak, so an in-progress current week below the
    threshold gives a streak of 0.
    """
    anchor = anchor or get_training_start()
    totals = mileage_by_week(runs, anchor)
    if not totals:
        return 0

    streak = 0
    number = week_number(today, anchor)
    earliest = min(totals)
    while number >= earliest and totals.get(number, 0.0) > threshold_km:
        streak += 1
        number -= 1
    return streak
