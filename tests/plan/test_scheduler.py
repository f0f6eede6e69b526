from datetime import date, timedelta

from runplan.models import TrainingWeekTarget
from runplan.plan.scheduler import SchedulerConfig, generate_suggestions, has_large_gaps


def _target(weekly: float = 24, long_run: float = 12) -> TrainingWeekTarget:
    return TrainingWeekTarget(
        week_number=1,
        phase="BASE_BUILDING",
        weekly_mileage_target=weekly,
        long_run_target=long_run,
        week_start=date(2025, 9, 21),
        week_end=date(2025, 9, 27),
    )


def test_returns_nothing_without_an_active_week(forecast_day_factory):
    forecast = forecast_day_factory.make_window(date(2025, 9, 21), 7)
    assert generate_suggestions(forecast, date(2025, 9, 21), None) == []


def test_week_of_24_with_12_km_long_run(forecast_day_factory):
    today = date(2025, 9, 25)  # Thursday
    forecast = forecast_day_factory.make_window(today, 7)

    suggestions = generate_suggestions(forecast, today, _target())

    long_runs = [s for s in suggestions if s.run_type == "LONG_RUN"]
    assert len(long_runs) == 1
    long_run = long_runs[0]
    assert long_run.date.weekday() in (5, 6)
    assert long_run.distance == 12

    rest_days = {long_run.date + timedelta(days=1), long_run.date + timedelta(days=2)}
    assert not rest_days & {s.date for s in suggestions}

    assert sum(s.distance for s in suggestions) <= 24
    assert [s.date for s in suggestions] == sorted(s.date for s in suggestions)
    assert all(s.date > today for s in suggestions)


def test_easy_runs_split_remaining_budget(forecast_day_factory):
    today = date(2025, 9, 21)  # Sunday; window runs to Saturday
    forecast = forecast_day_factory.make_window(today, 7)

    suggestions = generate_suggestions(forecast, today, _target())

    assert [(s.date, s.run_type, s.distance) for s in suggestions] == [
        (date(2025, 9, 22), "EASY_RUN", 2.4),
        (date(2025, 9, 24), "EASY_RUN", 3.2),
        (date(2025, 9, 26), "EASY_RUN", 6.4),
        (date(2025, 9, 27), "LONG_RUN", 12),
    ]
    assert round(sum(s.distance for s in suggestions), 6) == 24


def test_long_run_goes_to_the_better_weekend_day(forecast_day_factory):
    today = date(2025, 9, 25)
    forecast = [
        forecast_day_factory.make(
            {"date": day.date, "precipitation": 15, "condition": "Slight Rain"}
        )
        if day.date == date(2025, 9, 27)
        else day
        for day in forecast_day_factory.make_window(today, 7)
    ]

    suggestions = generate_suggestions(forecast, today, _target())

    long_run = next(s for s in suggestions if s.run_type == "LONG_RUN")
    assert long_run.date == date(2025, 9, 28)


def test_weekend_tie_goes_to_the_earliest_day(forecast_day_factory):
    today = date(2025, 9, 25)
    forecast = forecast_day_factory.make_window(today, 7)

    suggestions = generate_suggestions(forecast, today, _target())

    long_run = next(s for s in suggestions if s.run_type == "LONG_RUN")
    assert long_run.date == date(2025, 9, 27)


def test_occupied_dates_are_skipped(forecast_day_factory):
    today = date(2025, 9, 21)
    forecast = forecast_day_factory.make_window(today, 7)

    suggestions = generate_suggestions(
        forecast, today, _target(), occupied_dates={date(2025, 9, 27), date(2025, 9, 22)}
    )

    dates = {s.date for s in suggestions}
    assert date(2025, 9, 27) not in dates
    assert date(2025, 9, 22) not in dates
    assert all(s.run_type == "EASY_RUN" for s in suggestions)
    assert sum(s.distance for s in suggestions) <= 12


def test_no_weekend_in_window_still_budgets_for_long_run(forecast_day_factory):
    today = date(2025, 9, 21)
    forecast = forecast_day_factory.make_window(today, 4)  # Sun-Wed

    suggestions = generate_suggestions(forecast, today, _target())

    assert all(s.run_type == "EASY_RUN" for s in suggestions)
    assert sum(s.distance for s in suggestions) <= 12


def test_is_deterministic(forecast_day_factory):
    today = date(2025, 9, 21)
    forecast = [
        forecast_day_factory.make({"date": day.date, "precipitation": (i * 13) % 50})
        for i, day in enumerate(forecast_day_factory.make_window(today, 14))
    ]

    first = generate_suggestions(forecast, today, _target())
    second = generate_suggestions(list(reversed(forecast)), today, _target())

    assert first == second


def test_optimal_flag_follows_score(forecast_day_factory):
    today = date(2025, 9, 21)
    forecast = forecast_day_factory.make_window(today, 7, {"wind_speed": 0})

    suggestions = generate_suggestions(forecast, today, _target())

    assert all(s.weather_score == 100 and s.is_optimal for s in suggestions)


def test_rest_day_spacing_is_configurable(forecast_day_factory):
    today = date(2025, 9, 21)
    forecast = forecast_day_factory.make_window(today, 7)

    suggestions = generate_suggestions(
        forecast, today, _target(), config=SchedulerConfig(easy_run_rest_days=0)
    )

    easy_dates = [s.date for s in suggestions if s.run_type == "EASY_RUN"]
    assert easy_dates == [date(2025, 9, d) for d in (22, 23, 24, 25, 26)]
    assert round(sum(s.distance for s in suggestions), 6) <= 24


def test_suggestions_carry_threshold_warnings(forecast_day_factory):
    today = date(2025, 9, 25)
    forecast = forecast_day_factory.make_window(today, 7, {"precipitation": 30})

    suggestions = generate_suggestions(forecast, today, _target())

    long_run = next(s for s in suggestions if s.run_type == "LONG_RUN")
    assert long_run.warnings == ["Precipitation too high (30% vs 20% max)"]
    assert all(s.warnings == [] for s in suggestions if s.run_type == "EASY_RUN")


def test_gap_is_filled_even_in_poor_weather(forecast_day_factory):
    today = date(2025, 9, 21)
    stormy = {date(2025, 9, 23), date(2025, 9, 24), date(2025, 9, 25)}
    forecast = [
        forecast_day_factory.make(
            {"date": day.date, "precipitation": 80, "condition": "Thunderstorm"}
        )
        if day.date in stormy
        else day
        for day in forecast_day_factory.make_window(today, 7)
    ]

    # Three rest days after each easy run would leave Monday to Friday empty
    suggestions = generate_suggestions(
        forecast, today, _target(), config=SchedulerConfig(easy_run_rest_days=3)
    )

    assert [(s.date, s.run_type, s.distance) for s in suggestions] == [
        (date(2025, 9, 22), "EASY_RUN", 4.0),
        (date(2025, 9, 23), "EASY_RUN", 4.0),
        (date(2025, 9, 26), "EASY_RUN", 4.0),
        (date(2025, 9, 27), "LONG_RUN", 12),
    ]
    filler = suggestions[1]
    assert filler.weather_score <= 30
    assert "Conditions include Thunderstorm which should be avoided" in filler.warnings
    assert not has_large_gaps([s.date for s in suggestions], 3)


def test_long_run_avoids_days_next_to_hard_runs(forecast_day_factory, run_factory):
    today = date(2025, 9, 25)
    forecast = forecast_day_factory.make_window(today, 7)
    tempo = run_factory.make(
        {"date": date(2025, 9, 26), "type": "TEMPO_RUN", "completed": False}
    )

    suggestions = generate_suggestions(
        forecast,
        today,
        _target(),
        occupied_dates={tempo.date},
        existing_runs=[tempo],
    )

    long_run = next(s for s in suggestions if s.run_type == "LONG_RUN")
    assert long_run.date == date(2025, 9, 28)


def test_no_long_run_when_every_weekend_day_touches_a_hard_run(
    forecast_day_factory, run_factory
):
    today = date(2025, 9, 25)
    forecast = forecast_day_factory.make_window(today, 4)  # Thu-Sun
    intervals = run_factory.make(
        {"date": date(2025, 9, 28), "type": "INTERVAL_RUN", "completed": False}
    )

    suggestions = generate_suggestions(
        forecast,
        today,
        _target(),
        occupied_dates={intervals.date},
        existing_runs=[intervals],
    )

    assert all(s.run_type == "EASY_RUN" for s in suggestions)


def test_rest_day_after_last_completed_run(forecast_day_factory, run_factory):
    today = date(2025, 9, 25)
    forecast = forecast_day_factory.make_window(today, 7)
    todays_run = run_factory.make({"date": today})

    suggestions = generate_suggestions(
        forecast, today, _target(), last_completed_run=todays_run
    )

    assert date(2025, 9, 26) not in {s.date for s in suggestions}
    assert any(s.run_type == "LONG_RUN" for s in suggestions)


def test_long_run_well_beyond_longest_run_is_flagged(forecast_day_factory):
    today = date(2025, 9, 25)
    forecast = forecast_day_factory.make_window(today, 7)

    flagged = generate_suggestions(forecast, today, _target(), longest_distance=8)
    within = generate_suggestions(forecast, today, _target(), longest_distance=11)

    long_run = next(s for s in flagged if s.run_type == "LONG_RUN")
    assert long_run.distance == 12
    assert long_run.warnings == [
        "Long run of 12 km is more than 10% beyond your longest run (8 km)"
    ]
    assert all(s.warnings == [] for s in within)


def test_has_large_gaps():
    assert has_large_gaps([date(2025, 12, 1), date(2025, 12, 8)], 3)
    assert not has_large_gaps([date(2025, 12, 1), date(2025, 12, 3), date(2025, 12, 6)], 3)
    assert not has_large_gaps([], 3)
