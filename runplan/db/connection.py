import os
from contextlib import contextmanager
from typing import Iterator

import psycopg


def get_database_url() -> str:
    return os.environ["DATABASE_URL"]


def get_sqlalchemy_database_url() -> str:
    """Get the database URL in the form Alembic/SQLAlchemy expects.

    A plain postgresql:// URL is rewritten to postgresql+psycopg:// so the
    migrations run on psycopg 3 like the rest of the app.
    """
    url = get_database_url()
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


@contextmanager
def get_db_connection() -> Iterator[psycopg.Connection]:
    """Open a connection for the duration of the block and always close it."""
    conn = psycopg.connect(get_database_url())
    try:
        yield conn
    finally:
        conn.close()


@contextmanager
def get_db_cursor() -> Iterator[psycopg.Cursor]:
    """Yield a cursor whose work is committed if the block exits cleanly.

    Any exception rolls the transaction back and is re-raised.
    """
    with get_db_connection() as conn:
        with conn.cursor() as cursor:
            try:
                yield cursor
                conn.commit()
            except Exception:
                conn.rollback()
                raise
