from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from runplan.agg import (
    completion_rate,
    long_run_progression,
    pace_progression,
    progress_stats,
    summary,
    weekly_mileage,
)
from runplan.app.dependencies import all_runs, today
from runplan.errors import InvalidInput
from runplan.models import (
    CompletionRate,
    LongRunWeek,
    Phase,
    ProgressStats,
    ProgressSummary,
    RunType,
    ScheduledRun,
    WeeklyMileage,
    WeeklyPace,
)

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/weekly-mileage", response_model=list[WeeklyMileage])
def get_weekly_mileage(
    weeks: int = 12,
    runs: list[ScheduledRun] = Depends(all_runs),
    current_day: date = Depends(today),
) -> list[WeeklyMileage]:
    """Completed distance per training week, most recent `weeks` weeks."""
    try:
        return weekly_mileage(runs, current_day, weeks=weeks)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/pace-progression", response_model=list[WeeklyPace])
def get_pace_progression(
    run_type: RunType | None = None,
    runs: list[ScheduledRun] = Depends(all_runs),
    current_day: date = Depends(today),
) -> list[WeeklyPace]:
    return pace_progression(runs, current_day, run_type=run_type)


@router.get("/long-run-progression", response_model=list[LongRunWeek])
def get_long_run_progression(
    runs: list[ScheduledRun] = Depends(all_runs),
    current_day: date = Depends(today),
) -> list[LongRunWeek]:
    return long_run_progression(runs, current_day)


@router.get("/completion-rate", response_model=CompletionRate)
def get_completion_rate(
    phase: Phase | None = None,
    runs: list[ScheduledRun] = Depends(all_runs),
    current_day: date = Depends(today),
) -> CompletionRate:
    """Share of runs scheduled up to today that were completed."""
    return completion_rate(runs, current_day, phase=phase)


@router.get("/summary", response_model=ProgressSummary)
def get_summary(
    runs: list[ScheduledRun] = Depends(all_runs),
    current_day: date = Depends(today),
) -> ProgressSummary:
    return summary(runs, current_day)


@router.get("/progress", response_model=ProgressStats)
def get_progress(runs: list[ScheduledRun] = Depends(all_runs)) -> ProgressStats:
    return progress_stats(runs)
