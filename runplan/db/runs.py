import logging
from datetime import date

from psycopg import sql

from runplan.models import ScheduledRun
from .connection import get_db_cursor

logger = logging.getLogger(__name__)


def _build_run_filters(
    start: date | None = None,
    end: date | None = None,
    completed: bool | None = None,
) -> tuple[list[sql.Composable], list]:
    """Build WHERE conditions (joined with AND) and their parameters."""
    conditions: list[sql.Composable] = []
    params: list = []
    if start is not None:
        conditions.append(sql.SQL("date >= %s"))
        params.append(start)
    if end is not None:
        conditions.append(sql.SQL("date <= %s"))
        params.append(end)
    if completed is not None:
        conditions.append(sql.SQL("completed = %s"))
        params.append(completed)
    return conditions, params


def list_runs(
    start: date | None = None,
    end: date | None = None,
    completed: bool | None = None,
) -> list[ScheduledRun]:
    """Get scheduled runs ordered by date, optionally within [start, end]."""
    conditions, params = _build_run_filters(start, end, completed)
    query = sql.SQL(
        "SELECT id, date, distance, pace, duration, type, completed, notes FROM runs"
    )
    if conditions:
        query = query + sql.SQL(" WHERE ") + sql.SQL(" AND ").join(conditions)
    query = query + sql.SQL(" ORDER BY date")

    with get_db_cursor() as cursor:
        cursor.execute(query, params)
        rows = cursor.fetchall()
    return [_row_to_run(row) for row in rows]


def get_all_runs() -> list[ScheduledRun]:
    return list_runs()


def get_occupied_dates(start: date, end: date) -> set[date]:
    """Get the dates in [start, end] that already have a run, completed or not."""
    with get_db_cursor() as cursor:
        cursor.execute(
            "SELECT date FROM runs WHERE date >= %s AND date <= %s",
            (start, end),
        )
        rows = cursor.fetchall()
    return {row[0] for row in rows}


def get_last_completed_run(on_or_before: date) -> ScheduledRun | None:
    """Get the most recent completed run dated on or before `on_or_before`."""
    with get_db_cursor() as cursor:
        cursor.execute(
            """
            SELECT id, date, distance, pace, duration, type, completed, notes
            FROM runs
            WHERE completed = TRUE AND date <= %s
            ORDER BY date DESC
            LIMIT 1
            """,
            (on_or_before,),
        )
        row = cursor.fetchone()
    return _row_to_run(row) if row is not None else None


def get_longest_completed_distance() -> float | None:
    with get_db_cursor() as cursor:
        cursor.execute("SELECT MAX(distance) FROM runs WHERE completed = TRUE")
        row = cursor.fetchone()
    return row[0] if row is not None else None


def _row_to_run(row) -> ScheduledRun:
    id, run_date, distance, pace, duration, type, completed, notes = row
    return ScheduledRun(
        id=id,
        date=run_date,
        distance=distance,
        pace=pace,
        duration=duration,
        type=type,
        completed=completed,
        notes=notes,
    )
