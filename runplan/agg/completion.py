from datetime import date

from runplan.config.settings import get_training_start
from runplan.models import (
    ALL_PHASES,
    CompletionRate,
    Phase,
    PhaseCompletion,
    ScheduledRun,
)
from runplan.plan.week import phase_for_week, week_number


def _rate(completed: int, total: int) -> int:
    """Completed share as a whole percent, rounding halves up."""
    if total == 0:
        return 0
    return int(completed * 100 / total + 0.5)


def completion_rate(
    runs: list[ScheduledRun],
    today: date,
    phase: Phase | None = None,
    anchor: date | None = None,
) -> CompletionRate:
    """How many runs scheduled up to today were completed, overall and by phase.

    Future runs are not counted. Runs outside the plan appear only in the
    overall totals. Passing `phase` restricts everything to that phase.
    """
    anchor = anchor or get_training_start()

    due: list[tuple[ScheduledRun, Phase | None]] = []
    for run in runs:
        if run.date > today:
            continue
        run_phase = phase_for_week(week_number(run.date, anchor))
        if phase is not None and run_phase != phase:
            continue
        due.append((run, run_phase))

    total = len(due)
    completed = sum(1 for run, _ in due if run.completed)

    by_phase = []
    for each_phase in ALL_PHASES:
        phase_runs = [run for run, run_phase in due if run_phase == each_phase]
        if not phase_runs:
            continue
        phase_completed = sum(1 for run in phase_runs if run.completed)
        by_phase.append(
            PhaseCompletion(
                phase=each_phase,
                total=len(phase_runs),
                completed=phase_completed,
                rate=_rate(phase_completed, len(phase_runs)),
            )
        )

    return CompletionRate(
        total=total,
        completed=completed,
        rate=_rate(completed, total),
        by_phase=by_phase,
    )
