"""Cache-first access to daily weather forecasts."""

from .cache import WeatherCache, ForecastProvider

__all__ = ["WeatherCache", "ForecastProvider"]
