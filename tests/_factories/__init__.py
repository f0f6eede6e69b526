from .scheduled_run import ScheduledRunFactory
from .forecast import ForecastDayFactory
from .tolerance import ToleranceProfileFactory

__all__ = [
    "ScheduledRunFactory",
    "ForecastDayFactory",
    "ToleranceProfileFactory",
]
