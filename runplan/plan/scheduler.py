"""Assign suggested runs to days of a forecast window.

The scheduler is a pure function of its inputs: the same forecast, target,
profiles and existing runs always produce the same suggestions.

1. Drop days on or before today and days that already have a run. Block the
   rest days after the last completed run.
2. Put the long run on the best-scoring weekend day (earliest wins ties),
   skipping days next to an existing hard run.
3. Block the rest days after the long run.
4. Fill the remaining weekly distance with easy runs on the best-scoring
   weekdays, blocking a rest day after each one.
5. Break up any stretch of more than `max_gap_days` between runs with extra
   easy runs, even on poor-weather days, and re-split the easy budget evenly.
6. Return the suggestions in date order.
"""

from dataclasses import dataclass
from datetime import date, timedelta
import logging
import math
from typing import Collection, Iterable, Mapping, Sequence

from runplan.models import (
    ForecastDay,
    RunSuggestion,
    RunType,
    RunTypeToleranceProfile,
    ScheduledRun,
    TrainingWeekTarget,
    resolve_profiles,
)
from .scoring import WeatherScore, rejection_reasons, score_day

logger = logging.getLogger(__name__)

SATURDAY = 5
SUNDAY = 6
# Budgets below this are treated as already met.
DISTANCE_STEP_KM = 0.1
HARD_RUN_TYPES: frozenset[RunType] = frozenset({"LONG_RUN", "TEMPO_RUN", "INTERVAL_RUN"})
# A long run more than this multiple of the longest logged run gets a warning.
LONG_RUN_GROWTH_LIMIT = 1.1


@dataclass(frozen=True)
class SchedulerConfig:
    long_run_rest_days: int = 2
    easy_run_rest_days: int = 1
    max_gap_days: int = 3


@dataclass(frozen=True)
class _ScoredDay:
    day: ForecastDay
    weather: WeatherScore
    warnings: tuple[str, ...] = ()

    @property
    def date(self) -> date:
        return self.day.date

    def sort_key(self) -> tuple[int, date]:
        """Best score first, then earliest date."""
        return (-self.weather.score, self.day.date)


def _is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def _following_days(day: date, count: int) -> set[date]:
    return {day + timedelta(days=offset) for offset in range(1, count + 1)}


def _floor_to_step(distance: float) -> float:
    # Flooring keeps the running total at or below the weekly budget.
    steps = math.floor(round(distance / DISTANCE_STEP_KM, 6))
    return round(steps * DISTANCE_STEP_KM, 1)


def _score_all(
    days: Iterable[ForecastDay], profile: RunTypeToleranceProfile
) -> list[_ScoredDay]:
    return [
        _ScoredDay(
            day=day,
            weather=score_day(day, profile),
            warnings=tuple(rejection_reasons(day, profile)),
        )
        for day in days
    ]


def _suggest(
    scored: _ScoredDay,
    run_type: RunType,
    distance: float,
    extra_warnings: Sequence[str] = (),
) -> RunSuggestion:
    return RunSuggestion.build(
        day=scored.day,
        run_type=run_type,
        distance=distance,
        weather_score=scored.weather.score,
        reason=scored.weather.reason,
        warnings=[*scored.warnings, *extra_warnings],
    )


def _rest_days_after(run_type: RunType, config: SchedulerConfig) -> int:
    if run_type == "LONG_RUN":
        return config.long_run_rest_days
    return config.easy_run_rest_days


def has_large_gaps(run_dates: Iterable[date], max_gap_days: int) -> bool:
    """Check whether two consecutive runs are more than `max_gap_days` apart."""
    ordered = sorted(set(run_dates))
    return any(
        (later - earlier).days > max_gap_days
        for earlier, later in zip(ordered, ordered[1:])
    )


def hard_run_neighbours(runs: Iterable[ScheduledRun]) -> set[date]:
    """Dates directly before or after a hard run, where another hard run can't go."""
    neighbours: set[date] = set()
    for run in runs:
        if run.type in HARD_RUN_TYPES:
            neighbours.add(run.date - timedelta(days=1))
            neighbours.add(run.date + timedelta(days=1))
    return neighbours


def long_run_warnings(distance: float, longest_distance: float | None) -> list[str]:
    if not longest_distance or distance <= longest_distance * LONG_RUN_GROWTH_LIMIT:
        return []
    return [
        f"Long run of {distance:g} km is more than "
        f"{round((LONG_RUN_GROWTH_LIMIT - 1) * 100)}% beyond your longest run "
        f"({longest_distance:g} km)"
    ]


def place_long_run(
    candidates: list[ForecastDay],
    target: TrainingWeekTarget,
    profile: RunTypeToleranceProfile,
    unavailable: Collection[date] = frozenset(),
    longest_distance: float | None = None,
) -> RunSuggestion | None:
    """Pick the best weekend day for the long run, or None if there isn't one."""
    if target.long_run_target <= 0:
        return None
    weekend = _score_all(
        (d for d in candidates if _is_weekend(d.date) and d.date not in unavailable),
        profile,
    )
    if not weekend:
        logger.debug("No eligible weekend day in the window; skipping long run")
        return None
    best = min(weekend, key=_ScoredDay.sort_key)
    return _suggest(
        best,
        "LONG_RUN",
        target.long_run_target,
        long_run_warnings(target.long_run_target, longest_distance),
    )


def fill_easy_runs(
    candidates: list[ForecastDay],
    budget: float,
    profile: RunTypeToleranceProfile,
    unavailable: set[date],
    rest_days: int,
) -> list[RunSuggestion]:
    """Greedily assign easy runs to the best weekdays until the budget is used.

    Each pick gets an equal share of what is left of the budget, divided over the
    slots still eligible at that moment. `unavailable` is updated in place with
    the days picked and their rest days.
    """
    suggestions: list[RunSuggestion] = []
    if budget < DISTANCE_STEP_KM:
        return suggestions

    weekdays = [
        d for d in candidates if not _is_weekend(d.date) and d.date not in unavailable
    ]
    ranked = sorted(_score_all(weekdays, profile), key=_ScoredDay.sort_key)

    remaining = budget
    for index, scored in enumerate(ranked):
        if remaining < DISTANCE_STEP_KM:
            break
        if scored.date in unavailable:
            continue
        open_slots = sum(1 for s in ranked[index:] if s.date not in unavailable)
        distance = _floor_to_step(remaining / open_slots)
        if distance <= 0:
            break
        suggestions.append(_suggest(scored, "EASY_RUN", distance))
        remaining = round(remaining - distance, 6)
        unavailable.add(scored.date)
        unavailable.update(_following_days(scored.date, rest_days))

    return suggestions


def _pick_gap_filler(
    start: date, end: date, options: list[_ScoredDay], max_gap_days: int
) -> _ScoredDay | None:
    """Choose a day inside (start, end), preferring one that closes the gap outright."""
    inside = [s for s in options if start < s.date < end]
    if not inside:
        return None
    bridging = [
        s
        for s in inside
        if (s.date - start).days <= max_gap_days and (end - s.date).days <= max_gap_days
    ]
    reachable = [s for s in inside if (s.date - start).days <= max_gap_days]
    return min(bridging or reachable or inside, key=_ScoredDay.sort_key)


def fill_gaps(
    candidates: list[ForecastDay],
    run_dates: Collection[date],
    profile: RunTypeToleranceProfile,
    blocked: Collection[date],
    max_gap_days: int,
) -> list[RunSuggestion]:
    """Add easy runs until no two consecutive runs are more than `max_gap_days` apart.

    Weather only ranks the options; a poor day is still used when it is the
    only way to break a gap. Easy-run spacing is ignored here but `blocked`
    days are not. Distances are left at 0 for the caller to assign.
    """
    dates = set(run_dates)
    options = _score_all((d for d in candidates if d.date not in blocked), profile)
    fillers: list[RunSuggestion] = []

    while True:
        open_options = [s for s in options if s.date not in dates]
        ordered = sorted(dates)
        filler = None
        for start, end in zip(ordered, ordered[1:]):
            if (end - start).days > max_gap_days:
                filler = _pick_gap_filler(start, end, open_options, max_gap_days)
                if filler is not None:
                    break
        if filler is None:
            return fillers

        logger.debug(f"Adding an easy run on {filler.date} to break a gap between runs")
        fillers.append(_suggest(filler, "EASY_RUN", 0.0))
        dates.add(filler.date)


def _split_budget(runs: list[RunSuggestion], budget: float) -> list[RunSuggestion]:
    distance = _floor_to_step(budget / len(runs))
    return [run.model_copy(update={"distance": distance}) for run in runs]


def generate_suggestions(
    forecast: list[ForecastDay],
    today: date,
    target: TrainingWeekTarget | None,
    profiles: Mapping[RunType, RunTypeToleranceProfile] | None = None,
    occupied_dates: Collection[date] = (),
    config: SchedulerConfig = SchedulerConfig(),
    existing_runs: Sequence[ScheduledRun] = (),
    last_completed_run: ScheduledRun | None = None,
    longest_distance: float | None = None,
) -> list[RunSuggestion]:
    """Propose runs for the forecast window.

    Args:
        forecast: Daily forecasts, one per date (1-21 days).
        today: The current local date. Only later days are considered.
        target: The current week's target. None means no active plan.
        profiles: Tolerance profiles by run type; missing types use defaults.
        occupied_dates: Dates that already have a scheduled run.
        config: Rest-day spacing and the longest allowed gap between runs.
        existing_runs: Runs around the window, completed or not. Used to keep
            hard runs apart and to measure gaps.
        last_completed_run: The most recent completed run. Its rest days are
            blocked and, if recent, it counts when measuring gaps.
        longest_distance: The longest completed run, for the long-run warning.
    """
    if target is None:
        logger.info("No active training week; returning no suggestions")
        return []

    resolved = resolve_profiles(profiles)
    occupied = set(occupied_dates)
    candidates = [d for d in forecast if d.date > today and d.date not in occupied]

    suggestions: list[RunSuggestion] = []
    # Rest days after a long run or the last completed run. Nothing goes here.
    blocked: set[date] = set()
    run_dates = occupied | {run.date for run in existing_runs}
    hard_neighbours = hard_run_neighbours(existing_runs)
    if last_completed_run is not None:
        # An old last run starts a fresh block rather than an unfixable gap.
        if (today - last_completed_run.date).days <= config.max_gap_days:
            run_dates.add(last_completed_run.date)
        hard_neighbours |= hard_run_neighbours([last_completed_run])
        blocked.update(
            _following_days(
                last_completed_run.date, _rest_days_after(last_completed_run.type, config)
            )
        )

    long_run = place_long_run(
        candidates,
        target,
        resolved["LONG_RUN"],
        unavailable=blocked | hard_neighbours,
        longest_distance=longest_distance,
    )
    if long_run is not None:
        suggestions.append(long_run)
        blocked.add(long_run.date)
        blocked.update(_following_days(long_run.date, config.long_run_rest_days))

    budget = max(0.0, target.weekly_mileage_target - target.long_run_target)

    easy_runs = fill_easy_runs(
        candidates,
        budget,
        resolved["EASY_RUN"],
        set(blocked),
        config.easy_run_rest_days,
    )

    if budget >= DISTANCE_STEP_KM:
        fillers = fill_gaps(
            candidates,
            run_dates | {s.date for s in suggestions} | {s.date for s in easy_runs},
            resolved["EASY_RUN"],
            blocked,
            config.max_gap_days,
        )
        if fillers:
            easy_runs = _split_budget(easy_runs + fillers, budget)
    suggestions.extend(easy_runs)

    if has_large_gaps(run_dates | {s.date for s in suggestions}, config.max_gap_days):
        logger.warning(
            f"Could not keep runs within {config.max_gap_days} days of each other "
            f"in week {target.week_number}"
        )

    logger.debug(
        f"Generated {len(suggestions)} suggestions from {len(candidates)} candidate days "
        f"for week {target.week_number}"
    )
    return sorted(suggestions)
