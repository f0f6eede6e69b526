from collections import defaultdict
from datetime import date

from runplan.config.settings import get_training_start
from runplan.errors import InvalidInput
from runplan.models import ScheduledRun, TrainingWeek, WeeklyMileage
from runplan.plan.week import week_number, weekly_mileage_target

MAX_WEEKS = 52


def completed_runs(runs: list[ScheduledRun]) -> list[ScheduledRun]:
    return [run for run in runs if run.completed]


def mileage_by_week(runs: list[ScheduledRun], anchor: date) -> dict[int, float]:
    """Sum completed distance per training week number."""
    totals: dict[int, float] = defaultdict(float)
    for run in completed_runs(runs):
        totals[week_number(run.date, anchor)] += run.distance
    return dict(totals)


def weekly_mileage(
    runs: list[ScheduledRun],
    today: date,
    weeks: int = 12,
    anchor: date | None = None,
) -> list[WeeklyMileage]:
    """
    Completed mileage for each week from the first run's week through the current week.

    Weeks without runs are included with zero mileage. Only the last `weeks`
    entries are returned.

    Args:
        runs: All scheduled runs; only completed ones count.
        today: The current local date.
        weeks: How many of the most recent weeks to return (1-52).
        anchor: Start of week 1. Defaults to the configured training start.
    """
    if not 1 <= weeks <= MAX_WEEKS:
        raise InvalidInput(f"weeks must be between 1 and {MAX_WEEKS}, got {weeks}")
    anchor = anchor or get_training_start()

    totals = mileage_by_week(runs, anchor)
    if not totals:
        return []

    current = week_number(today, anchor)
    first = min(totals)
    series = []
    for number in range(first, current + 1):
        week = TrainingWeek(number)
        series.append(
            WeeklyMileage(
                week_number=number,
                label=week.label,
                week_start=week.start(anchor),
                mileage=round(totals.get(number, 0.0), 2),
                target=weekly_mileage_target(number),
                is_current_week=number == current,
            )
        )
    return series[-weeks:]
