from datetime import date

from runplan.config.settings import get_training_start
from runplan.models import RunType, ScheduledRun, TrainingWeek, WeeklyPace
from runplan.plan.week import week_number
from runplan.utils.pace import pace_to_seconds, seconds_to_pace


def weighted_pace_seconds(runs: list[ScheduledRun]) -> tuple[float | None, int]:
    """Distance-weighted mean pace in seconds per km, and how many runs it used.

    Runs with a missing or malformed pace (or no distance) are left out.
    """
    weighted_seconds = 0.0
    total_distance = 0.0
    used = 0
    for run in runs:
        seconds = pace_to_seconds(run.pace)
        if seconds is None or run.distance <= 0:
            continue
        weighted_seconds += seconds * run.distance
        total_distance += run.distance
        used += 1
    if total_distance == 0:
        return None, 0
    return weighted_seconds / total_distance, used


def pace_progression(
    runs: list[ScheduledRun],
    today: date,
    run_type: RunType | None = None,
    anchor: date | None = None,
) -> list[WeeklyPace]:
    """Average pace of completed runs for each week from week 1 to the current week."""
    anchor = anchor or get_training_start()
    current = week_number(today, anchor)

    by_week: dict[int, list[ScheduledRun]] = {}
    for run in runs:
        if not run.completed or (run_type is not None and run.type != run_type):
            continue
        by_week.setdefault(week_number(run.date, anchor), []).append(run)

    progression = []
    for number in range(1, current + 1):
        average, used = weighted_pace_seconds(by_week.get(number, []))
        progression.append(
            WeeklyPace(
                week_number=number,
                label=TrainingWeek(number).label,
                avg_pace_seconds=None if average is None else round(average),
                avg_pace=None if average is None else seconds_to_pace(average),
                run_count=used,
            )
        )
    return progression
