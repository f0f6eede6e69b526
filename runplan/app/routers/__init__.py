from .planning import router as planning_router
from .weather import router as weather_router
from .stats import router as stats_router

__all__ = [
    "planning_router",
    "weather_router",
    "stats_router",
]
