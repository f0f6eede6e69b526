"""Runtime settings for the planner, read from environment variables.

Values are read on every call so tests (and a long-running process after a
config reload) always see the current environment.
"""

import os
from datetime import date

DEFAULT_TRAINING_START = date(2025, 9, 21)  # A Sunday; week 1 of the plan.
DEFAULT_TRAINING_PLAN_WEEKS = 34
DEFAULT_TRAINING_TIMEZONE = "Europe/Dublin"
DEFAULT_LOCATION = "Balbriggan, IE"
DEFAULT_WEATHER_CACHE_TTL_MINUTES = 60
DEFAULT_WEATHER_REQUEST_TIMEOUT = 10.0


def get_training_start() -> date:
    """Get the anchor date that defines week 1 of the training plan."""
    raw = os.environ.get("TRAINING_START")
    if not raw:
        return DEFAULT_TRAINING_START
    return date.fromisoformat(raw)


def get_training_plan_weeks() -> int:
    """Get the number of weeks covered by the training plan."""
    return int(os.environ.get("TRAINING_PLAN_WEEKS", DEFAULT_TRAINING_PLAN_WEEKS))


def get_training_timezone() -> str:
    """Get the IANA timezone used to decide what "today" is."""
    return os.environ.get("TRAINING_TIMEZONE", DEFAULT_TRAINING_TIMEZONE)


def get_default_location() -> str:
    return os.environ.get("DEFAULT_LOCATION", DEFAULT_LOCATION)


def get_weather_cache_ttl_minutes() -> int:
    return int(
        os.environ.get("WEATHER_CACHE_TTL_MINUTES", DEFAULT_WEATHER_CACHE_TTL_MINUTES)
    )


def get_weather_request_timeout() -> float:
    """Get the per-request timeout (seconds) for the forecast provider."""
    return float(
        os.environ.get("WEATHER_REQUEST_TIMEOUT", DEFAULT_WEATHER_REQUEST_TIMEOUT)
    )
