from datetime import date, datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from runplan.errors import InvalidInput
from runplan.plan.service import PlanningService, resolve_location

# 09:00 in Dublin on Sunday of week 1
NOW = datetime(2025, 9, 21, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def weather() -> MagicMock:
    return MagicMock()


@pytest.mark.parametrize("days", [0, 22, -3])
def test_days_out_of_range(weather, days: int):
    with pytest.raises(InvalidInput):
        PlanningService(weather=weather).generate_suggestions(days=days, now=NOW)
    weather.get_forecast.assert_not_called()


@patch("runplan.plan.service.get_current_week_override", return_value=None)
def test_no_active_week_skips_forecast(mock_override, weather, monkeypatch):
    monkeypatch.setenv("TRAINING_START", "2026-03-01")

    result = PlanningService(weather=weather).generate_suggestions(now=NOW)

    assert result == []
    weather.get_forecast.assert_not_called()


@patch("runplan.plan.service.get_longest_completed_distance", return_value=None)
@patch("runplan.plan.service.get_last_completed_run", return_value=None)
@patch("runplan.plan.service.list_runs", return_value=[])
@patch("runplan.plan.service.get_tolerance_profiles", return_value={})
@patch("runplan.plan.service.get_occupied_dates", return_value={date(2025, 9, 22)})
@patch("runplan.plan.service.get_current_week_override", return_value=None)
@patch("runplan.plan.service.get_saved_location", return_value="Skerries, IE")
def test_generate_suggestions(
    mock_saved,
    mock_override,
    mock_occupied,
    mock_profiles,
    mock_list_runs,
    mock_last_run,
    mock_longest,
    weather,
    forecast_day_factory,
    monkeypatch,
):
    monkeypatch.setenv("TRAINING_START", "2025-09-21")
    weather.get_forecast.return_value = forecast_day_factory.make_window(date(2025, 9, 21), 7)

    suggestions = PlanningService(weather=weather).generate_suggestions(days=7, now=NOW)

    weather.get_forecast.assert_called_once_with(
        "Skerries, IE", 7, today=date(2025, 9, 21), now=NOW
    )
    mock_occupied.assert_called_once_with(date(2025, 9, 21), date(2025, 9, 27))
    mock_list_runs.assert_called_once_with(start=date(2025, 9, 18), end=date(2025, 9, 28))
    mock_last_run.assert_called_once_with(date(2025, 9, 21))
    assert date(2025, 9, 22) not in {s.date for s in suggestions}
    # Week 1: 10 km total with a 7 km long run
    assert sum(s.distance for s in suggestions) <= 10
    assert any(s.run_type == "LONG_RUN" and s.distance == 7.0 for s in suggestions)


@patch("runplan.plan.service.get_saved_location", return_value=None)
def test_location_fallbacks(mock_saved, monkeypatch):
    monkeypatch.delenv("DEFAULT_LOCATION", raising=False)
    assert resolve_location("  Dublin, IE ") == "Dublin, IE"
    assert resolve_location(None) == "Balbriggan, IE"
    monkeypatch.setenv("DEFAULT_LOCATION", "Cork, IE")
    assert resolve_location("") == "Cork, IE"


@patch("runplan.plan.service.get_current_week_override", return_value=None)
def test_get_current_week(mock_override, monkeypatch):
    monkeypatch.setenv("TRAINING_START", "2025-09-21")

    week = PlanningService(weather=MagicMock()).get_current_week(date(2025, 10, 1))

    assert week is not None
    assert week.week_number == 2
    assert week.phase == "BASE_BUILDING"
    assert [p.phase for p in week.next_phases] == ["BASE_EXTENSION", "SPEED_DEVELOPMENT"]


@patch("runplan.plan.service.get_longest_completed_distance", return_value=5.0)
@patch("runplan.plan.service.get_last_completed_run")
@patch("runplan.plan.service.list_runs")
@patch("runplan.plan.service.get_tolerance_profiles", return_value={})
@patch("runplan.plan.service.get_occupied_dates", return_value=set())
@patch("runplan.plan.service.get_current_week_override", return_value=None)
@patch("runplan.plan.service.get_saved_location", return_value=None)
def test_generate_suggestions_uses_run_history(
    mock_saved,
    mock_override,
    mock_occupied,
    mock_profiles,
    mock_list_runs,
    mock_last_run,
    mock_longest,
    weather,
    forecast_day_factory,
    run_factory,
    monkeypatch,
):
    monkeypatch.setenv("TRAINING_START", "2025-09-21")
    # Sunday's completed run means no run on Monday
    sunday_run = run_factory.make({"date": date(2025, 9, 21)})
    mock_last_run.return_value = sunday_run
    mock_list_runs.return_value = [sunday_run]
    weather.get_forecast.return_value = forecast_day_factory.make_window(date(2025, 9, 21), 7)

    suggestions = PlanningService(weather=weather).generate_suggestions(days=7, now=NOW)

    assert date(2025, 9, 22) not in {s.date for s in suggestions}
    long_run = next(s for s in suggestions if s.run_type == "LONG_RUN")
    assert long_run.warnings == [
        "Long run of 7 km is more than 10% beyond your longest run (5 km)"
    ]
