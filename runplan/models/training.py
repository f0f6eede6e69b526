from datetime import date, timedelta
from typing import Literal, NamedTuple, Self

from pydantic import BaseModel

Phase = Literal[
    "BASE_BUILDING",
    "BASE_EXTENSION",
    "SPEED_DEVELOPMENT",
    "PEAK_TAPER",
]

ALL_PHASES: tuple[Phase, ...] = (
    "BASE_BUILDING",
    "BASE_EXTENSION",
    "SPEED_DEVELOPMENT",
    "PEAK_TAPER",
)


class TrainingWeek(NamedTuple):
    """A Sunday-Saturday training week, numbered relative to the plan anchor.

    Week 1 starts on the anchor date. Weeks before it have numbers <= 0.
    """

    number: int

    @classmethod
    def from_date(cls, day: date, anchor: date) -> Self:
        # Floor division keeps dates before the anchor in the right week.
        return cls((day - anchor).days // 7 + 1)

    def start(self, anchor: date) -> date:
        return anchor + timedelta(weeks=self.number - 1)

    def end(self, anchor: date) -> date:
        return self.start(anchor) + timedelta(days=6)

    def contains(self, day: date, anchor: date) -> bool:
        return self.start(anchor) <= day <= self.end(anchor)

    @property
    def is_pre_training(self) -> bool:
        return self.number <= 0

    @property
    def label(self) -> str:
        if self.is_pre_training:
            return f"Pre {1 - self.number}"
        return f"Week {self.number}"


class TrainingWeekTarget(BaseModel):
    week_number: int
    phase: Phase
    weekly_mileage_target: float  # km
    long_run_target: float  # km
    week_start: date
    week_end: date
    notes: str | None = None


class PhaseWindow(BaseModel):
    """The calendar span of one phase of the plan."""

    phase: Phase
    start_date: date
    end_date: date


class CurrentWeek(BaseModel):
    phase: Phase
    week_number: int
    week_start: date
    week_end: date
    next_phases: list[PhaseWindow] = []
