"""Database operations for explicit per-week training plan entries."""

import logging
from datetime import date

from runplan.models import TrainingWeekTarget
from .connection import get_db_cursor

logger = logging.getLogger(__name__)


def get_current_week_override(today: date) -> TrainingWeekTarget | None:
    """Get the stored plan entry whose week contains `today`, if any."""
    with get_db_cursor() as cursor:
        cursor.execute(
            """
            SELECT week_number, phase, weekly_mileage_target, long_run_target,
                   week_start, week_end, notes
            FROM training_plan
            WHERE week_start <= %s AND week_end >= %s
            ORDER BY week_number
            LIMIT 1
            """,
            (today, today),
        )
        row = cursor.fetchone()

    if row is None:
        return None
    logger.debug(f"Using stored training plan entry for week {row[0]}")
    return _row_to_target(row)


def _row_to_target(row) -> TrainingWeekTarget:
    week_number, phase, weekly, long_run, week_start, week_end, notes = row
    return TrainingWeekTarget(
        week_number=week_number,
        phase=phase,
        weekly_mileage_target=weekly,
        long_run_target=long_run,
        week_start=week_start,
        week_end=week_end,
        notes=notes,
    )
