import os
from pathlib import Path
from typing import Iterator

import psycopg
import pytest
from testcontainers.postgres import PostgresContainer
from alembic.config import Config
from alembic import command

os.environ.setdefault("ENV", "dev")


@pytest.fixture(scope="session")
def db_url() -> Iterator[str]:
    """Start a Postgres container, run migrations, and return the DB URL."""
    with PostgresContainer("postgres:16") as pg:
        raw_url = pg.get_connection_url()
        url = raw_url.replace("postgresql+psycopg2://", "postgresql://")
        os.environ["DATABASE_URL"] = url

        repo_root = Path(__file__).resolve().parents[2]
        alembic_cfg = Config(str(repo_root / "alembic.ini"))
        command.upgrade(alembic_cfg, "head")

        yield url


@pytest.fixture
def clean_weather_cache(db_url: str) -> Iterator[None]:
    yield
    with psycopg.connect(db_url) as conn:
        conn.execute("TRUNCATE weather_cache")
