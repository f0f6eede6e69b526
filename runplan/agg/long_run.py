from datetime import date

from runplan.config.settings import get_training_start
from runplan.models import LongRunWeek, ScheduledRun, TrainingWeek
from runplan.plan.week import long_run_target, week_number


def long_run_progression(
    runs: list[ScheduledRun], today: date, anchor: date | None = None
) -> list[LongRunWeek]:
    """Longest completed long run per week against that week's target."""
    anchor = anchor or get_training_start()
    current = week_number(today, anchor)

    longest: dict[int, float] = {}
    for run in runs:
        if not run.completed or run.type != "LONG_RUN":
            continue
        number = week_number(run.date, anchor)
        longest[number] = max(longest.get(number, 0.0), run.distance)

    return [
        LongRunWeek(
            week_number=number,
            label=TrainingWeek(number).label,
            distance=round(longest.get(number, 0.0), 2),
            target=long_run_target(number),
        )
        for number in range(1, current + 1)
    ]
