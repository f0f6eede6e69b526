from datetime import date

import pytest

from runplan.models import TrainingWeek, TrainingWeekTarget
from runplan.plan.week import (
    current_week_info,
    long_run_target,
    phase_for_week,
    resolve_current_week,
    target_for_week,
    upcoming_phases,
    week_number,
    weekly_mileage_target,
)

ANCHOR = date(2025, 9, 21)  # Sunday


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2025, 9, 21), 1),
        (date(2025, 9, 27), 1),
        (date(2025, 9, 28), 2),
        (date(2025, 9, 20), 0),
        (date(2025, 9, 14), 0),
        (date(2025, 9, 13), -1),
    ],
)
def test_week_number(day: date, expected: int):
    assert week_number(day, ANCHOR) == expected


def test_week_number_defaults_to_configured_anchor(monkeypatch):
    monkeypatch.setenv("TRAINING_START", "2026-01-04")
    assert week_number(date(2026, 1, 11)) == 2


def test_training_week_bounds_are_sunday_to_saturday():
    week = TrainingWeek(3)
    assert week.start(ANCHOR) == date(2025, 10, 5)
    assert week.start(ANCHOR).weekday() == 6
    assert week.end(ANCHOR) == date(2025, 10, 11)
    assert week.end(ANCHOR).weekday() == 5
    assert week.contains(date(2025, 10, 8), ANCHOR)
    assert not week.contains(date(2025, 10, 12), ANCHOR)


def test_training_week_labels():
    assert TrainingWeek(5).label == "Week 5"
    assert TrainingWeek(0).label == "Pre 1"
    assert TrainingWeek(-2).label == "Pre 3"
    assert TrainingWeek(0).is_pre_training
    assert not TrainingWeek(1).is_pre_training


@pytest.mark.parametrize("week", [0, -1, -10])
def test_targets_are_zero_before_the_plan(week: int):
    assert weekly_mileage_target(week) == 0
    assert long_run_target(week) == 0


@pytest.mark.parametrize(
    "week, expected",
    [(1, 10.0), (11, 25.0), (12, 26.33), (26, 44.95), (27, 42.0), (30, 33.0), (34, 25.0)],
)
def test_weekly_mileage_target(week: int, expected: float):
    assert weekly_mileage_target(week) == expected


@pytest.mark.parametrize(
    "week, expected", [(1, 7.0), (30, 21.1), (31, 16.88), (34, 16.88)]
)
def test_long_run_target(week: int, expected: float):
    assert long_run_target(week) == expected


def test_targets_never_decrease_while_building():
    weekly = [weekly_mileage_target(w) for w in range(1, 27)]
    assert weekly == sorted(weekly)
    long_runs = [long_run_target(w) for w in range(1, 31)]
    assert long_runs == sorted(long_runs)


@pytest.mark.parametrize(
    "week, expected",
    [
        (0, None),
        (1, "BASE_BUILDING"),
        (11, "BASE_BUILDING"),
        (12, "BASE_EXTENSION"),
        (20, "BASE_EXTENSION"),
        (21, "SPEED_DEVELOPMENT"),
        (26, "SPEED_DEVELOPMENT"),
        (27, "PEAK_TAPER"),
        (34, "PEAK_TAPER"),
        (35, None),
    ],
)
def test_phase_for_week(week: int, expected):
    assert phase_for_week(week, plan_weeks=34) == expected


def test_target_for_week_includes_dates():
    target = target_for_week(2, anchor=ANCHOR, plan_weeks=34)
    assert target is not None
    assert target.week_start == date(2025, 9, 28)
    assert target.week_end == date(2025, 10, 4)
    assert target.phase == "BASE_BUILDING"
    assert target.weekly_mileage_target == 11.5


def test_no_current_week_outside_the_plan():
    assert resolve_current_week(date(2025, 9, 1), anchor=ANCHOR, plan_weeks=34) is None
    assert resolve_current_week(date(2026, 6, 1), anchor=ANCHOR, plan_weeks=34) is None
    assert current_week_info(date(2025, 9, 1), anchor=ANCHOR, plan_weeks=34) is None


def test_stored_override_wins_over_formulas():
    override = TrainingWeekTarget(
        week_number=1,
        phase="BASE_BUILDING",
        weekly_mileage_target=18,
        long_run_target=8,
        week_start=date(2025, 9, 21),
        week_end=date(2025, 9, 27),
        notes="Holiday week",
    )
    resolved = resolve_current_week(date(2025, 9, 23), override, ANCHOR, 34)
    assert resolved == override


def test_upcoming_phases_lists_next_two_with_dates():
    phases = upcoming_phases(5, anchor=ANCHOR, plan_weeks=34)
    assert [p.phase for p in phases] == ["BASE_EXTENSION", "SPEED_DEVELOPMENT"]
    assert phases[0].start_date == TrainingWeek(12).start(ANCHOR)
    assert phases[0].end_date == TrainingWeek(20).end(ANCHOR)


def test_current_week_info_in_last_phase_has_no_next_phase():
    info = current_week_info(TrainingWeek(30).start(ANCHOR), anchor=ANCHOR, plan_weeks=34)
    assert info is not None
    assert info.phase == "PEAK_TAPER"
    assert info.week_number == 30
    assert info.next_phases == []
