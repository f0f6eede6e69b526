from datetime import date
from typing import Literal

from pydantic import BaseModel

RunType = Literal[
    "LONG_RUN",
    "EASY_RUN",
    "TEMPO_RUN",
    "INTERVAL_RUN",
    "RECOVERY_RUN",
    "RACE",
]

ALL_RUN_TYPES: tuple[RunType, ...] = (
    "LONG_RUN",
    "EASY_RUN",
    "TEMPO_RUN",
    "INTERVAL_RUN",
    "RECOVERY_RUN",
    "RACE",
)


class ScheduledRun(BaseModel):
    """A planned or completed run. At most one run exists per calendar date."""

    id: str
    date: date
    distance: float  # in km
    pace: str  # "M:SS" per km; may be malformed for hand-entered runs
    duration: str  # "MMM:SS"
    type: RunType
    completed: bool = False
    notes: str | None = None
