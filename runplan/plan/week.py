"""Training week arithmetic and target progression.

Weeks run Sunday-Saturday and are numbered from a fixed anchor date (week 1).
Everything here works on calendar dates, never datetimes, so week boundaries
are not affected by timezones or DST.
"""

from datetime import date

from runplan.config.settings import get_training_start, get_training_plan_weeks
from runplan.models import (
    Phase,
    PhaseWindow,
    TrainingWeek,
    TrainingWeekTarget,
    CurrentWeek,
)

# Segment boundaries for the mileage progression.
BASE_BUILDING_LAST_WEEK = 11
EXTENSION_LAST_WEEK = 26
# Long runs build linearly until this week, then hold at a reduced taper value.
LONG_RUN_PEAK_WEEK = 30
LONG_RUN_START_KM = 7.0
LONG_RUN_PEAK_KM = 21.1
LONG_RUN_TAPER_FACTOR = 0.8

# Phase boundaries (last week of each phase, inclusive).
PHASE_LAST_WEEKS: tuple[tuple[Phase, int], ...] = (
    ("BASE_BUILDING", 11),
    ("BASE_EXTENSION", 20),
    ("SPEED_DEVELOPMENT", 26),
)


def week_number(day: date, anchor: date | None = None) -> int:
    """Get the training week number for a date. Dates before the anchor give <= 0."""
    anchor = anchor or get_training_start()
    return TrainingWeek.from_date(day, anchor).number


def weekly_mileage_target(week: int) -> float:
    """Weekly distance target (km) for a week number.

    Three segments: base building (weeks 1-11), extension (12-26) and a taper
    that drops 3 km/week but never below 25 km.
    """
    if week <= 0:
        return 0.0
    if week <= BASE_BUILDING_LAST_WEEK:
        target = 10 + 1.5 * (week - 1)
    elif week <= EXTENSION_LAST_WEEK:
        target = 25 + 1.33 * (week - BASE_BUILDING_LAST_WEEK)
    else:
        target = max(25.0, 45 - 3 * (week - EXTENSION_LAST_WEEK))
    return round(target, 2)


def long_run_target(week: int) -> float:
    """Long run distance target (km) for a week number."""
    if week <= 0:
        return 0.0
    if week <= LONG_RUN_PEAK_WEEK:
        step = (LONG_RUN_PEAK_KM - LONG_RUN_START_KM) / (LONG_RUN_PEAK_WEEK - 1)
        return round(LONG_RUN_START_KM + step * (week - 1), 2)
    return round(LONG_RUN_PEAK_KM * LONG_RUN_TAPER_FACTOR, 2)


def phase_for_week(week: int, plan_weeks: int | None = None) -> Phase | None:
    """Get the phase a week belongs to, or None if the week is outside the plan."""
    plan_weeks = plan_weeks or get_training_plan_weeks()
    if week < 1 or week > plan_weeks:
        return None
    for phase, last_week in PHASE_LAST_WEEKS:
        if week <= last_week:
            return phase
    return "PEAK_TAPER"


def target_for_week(
    week: int, anchor: date | None = None, plan_weeks: int | None = None
) -> TrainingWeekTarget | None:
    """Build the formula-derived target for a week, or None outside the plan."""
    anchor = anchor or get_training_start()
    phase = phase_for_week(week, plan_weeks)
    if phase is None:
        return None
    training_week = TrainingWeek(week)
    return TrainingWeekTarget(
        week_number=week,
        phase=phase,
        weekly_mileage_target=weekly_mileage_target(week),
        long_run_target=long_run_target(week),
        week_start=training_week.start(anchor),
        week_end=training_week.end(anchor),
    )


def resolve_current_week(
    today: date,
    override: TrainingWeekTarget | None = None,
    anchor: date | None = None,
    plan_weeks: int | None = None,
) -> TrainingWeekTarget | None:
    """Get the target for the week containing `today`.

    An explicit override stored for the current week wins over the formulas.
    Returns None when there is no active training week.
    """
    if override is not None:
        return override
    return target_for_week(week_number(today, anchor), anchor, plan_weeks)


def upcoming_phases(
    week: int,
    limit: int = 2,
    anchor: date | None = None,
    plan_weeks: int | None = None,
) -> list[PhaseWindow]:
    """Get the next distinct phases after the one `week` is in, with their dates."""
    anchor = anchor or get_training_start()
    plan_weeks = plan_weeks or get_training_plan_weeks()
    current_phase = phase_for_week(week, plan_weeks)

    windows: dict[Phase, PhaseWindow] = {}
    for later_week in range(max(week, 0) + 1, plan_weeks + 1):
        phase = phase_for_week(later_week, plan_weeks)
        if phase is None or phase == current_phase:
            continue
        training_week = TrainingWeek(later_week)
        existing = windows.get(phase)
        if existing is None:
            windows[phase] = PhaseWindow(
                phase=phase,
                start_date=training_week.start(anchor),
                end_date=training_week.end(anchor),
            )
        else:
            existing.end_date = training_week.end(anchor)
    return list(windows.values())[:limit]


def current_week_info(
    today: date,
    override: TrainingWeekTarget | None = None,
    anchor: date | None = None,
    plan_weeks: int | None = None,
) -> CurrentWeek | None:
    """Describe the current training week, or None if no plan covers today."""
    target = resolve_current_week(today, override, anchor, plan_weeks)
    if target is None:
        return None
    return CurrentWeek(
        phase=target.phase,
        week_number=target.week_number,
        week_start=target.week_start,
        week_end=target.week_end,
        next_phases=upcoming_phases(
            target.week_number, anchor=anchor, plan_weeks=plan_weeks
        ),
    )
