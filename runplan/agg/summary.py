from datetime import date

from runplan.models import ProgressStats, ProgressSummary, ScheduledRun
from runplan.utils.pace import pace_to_seconds, seconds_to_pace
from .mileage import completed_runs
from .pace import weighted_pace_seconds
from .streak import consistency_streak


def summary(
    runs: list[ScheduledRun], today: date, anchor: date | None = None
) -> ProgressSummary:
    """Headline numbers over all completed runs."""
    done = completed_runs(runs)
    if not done:
        return ProgressSummary(
            total_runs=0, total_distance=0, avg_pace="", streak=0, longest_run=0
        )

    average, _ = weighted_pace_seconds(done)
    return ProgressSummary(
        total_runs=len(done),
        total_distance=round(sum(run.distance for run in done), 2),
        avg_pace="" if average is None else seconds_to_pace(average),
        streak=consistency_streak(runs, today, anchor=anchor),
        longest_run=max(run.distance for run in done),
    )


def progress_stats(runs: list[ScheduledRun]) -> ProgressStats:
    """Longest completed run and the fastest pace recorded on a completed long run."""
    done = completed_runs(runs)
    longest = max((run.distance for run in done), default=0.0)

    long_run_paces = [
        seconds
        for run in done
        if run.type == "LONG_RUN"
        and (seconds := pace_to_seconds(run.pace)) is not None
    ]
    best = min(long_run_paces) if long_run_paces else None

    return ProgressStats(
        longest_run_distance=longest,
        best_long_run_pace=None if best is None else seconds_to_pace(best),
    )
