"""Entry points that wire the planner to its stores and the weather cache."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
import logging

from runplan.config.settings import get_default_location as get_configured_location
from runplan.db.runs import (
    get_last_completed_run,
    get_longest_completed_distance,
    get_occupied_dates,
    list_runs,
)
from runplan.db.training_plan import get_current_week_override
from runplan.db.user_settings import get_default_location as get_saved_location
from runplan.db.weather_preferences import get_tolerance_profiles
from runplan.errors import InvalidInput
from runplan.integrations.open_meteo import OpenMeteoClient
from runplan.models import CurrentWeek, ForecastDay, RunSuggestion
from runplan.utils.timezone import local_today, utc_now
from runplan.weather import WeatherCache
from .scheduler import SchedulerConfig, generate_suggestions
from .week import current_week_info, resolve_current_week

logger = logging.getLogger(__name__)

MIN_FORECAST_DAYS = 1
MAX_FORECAST_DAYS = 21


def _validate_days(days: int) -> None:
    if not MIN_FORECAST_DAYS <= days <= MAX_FORECAST_DAYS:
        raise InvalidInput(
            f"days must be between {MIN_FORECAST_DAYS} and {MAX_FORECAST_DAYS}, got {days}"
        )


def resolve_location(location: str | None) -> str:
    """Use the given location, else the saved default, else the configured one."""
    if location and location.strip():
        return location.strip()
    return get_saved_location() or get_configured_location()


@dataclass
class PlanningService:
    weather: WeatherCache = field(
        default_factory=lambda: WeatherCache(provider=OpenMeteoClient())
    )
    scheduler_config: SchedulerConfig = field(default_factory=SchedulerConfig)

    def get_forecast(
        self, location: str | None = None, days: int = 7, now: datetime | None = None
    ) -> list[ForecastDay]:
        _validate_days(days)
        now = now or utc_now()
        return self.weather.get_forecast(
            resolve_location(location), days, today=local_today(now=now), now=now
        )

    def generate_suggestions(
        self, location: str | None = None, days: int = 7, now: datetime | None = None
    ) -> list[RunSuggestion]:
        """Suggest runs for the next `days` days.

        Returns [] without touching the forecast when no training week is active.

        Raises:
            InvalidInput: If `days` is outside 1-21.
            WeatherUnavailable: If the forecast can't be loaded.
        """
        _validate_days(days)
        now = now or utc_now()
        today = local_today(now=now)

        target = resolve_current_week(today, get_current_week_override(today))
        if target is None:
            logger.info(f"No active training week on {today}; no suggestions")
            return []

        resolved_location = resolve_location(location)
        forecast = self.weather.get_forecast(
            resolved_location, days, today=today, now=now
        )
        window_end = today + timedelta(days=days - 1)
        occupied = get_occupied_dates(today, window_end)
        # Runs just outside the window still count for gaps and hard-day spacing.
        nearby_runs = list_runs(
            start=today - timedelta(days=self.scheduler_config.max_gap_days),
            end=window_end + timedelta(days=1),
        )

        suggestions = generate_suggestions(
            forecast,
            today,
            target,
            profiles=get_tolerance_profiles(),
            occupied_dates=occupied,
            config=self.scheduler_config,
            existing_runs=nearby_runs,
            last_completed_run=get_last_completed_run(today),
            longest_distance=get_longest_completed_distance(),
        )
        logger.info(
            f"Suggested {len(suggestions)} runs for {resolved_location} "
            f"in week {target.week_number}"
        )
        return suggestions

    def get_current_week(self, today: date | None = None) -> CurrentWeek | None:
        today = today or local_today()
        return current_week_info(today, get_current_week_override(today))
