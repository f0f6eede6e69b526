"""Add weather_cache table.

Revision ID: 0003
Revises: 0002
Create Date: 2025-09-20 18:12:44.000000+00:00

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "0003"
down_revision: Union[str, Sequence[str], None] = "0002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create weather_cache with one row per (location, forecast_date)."""
    op.execute("""
        CREATE TABLE weather_cache (
            id SERIAL PRIMARY KEY,
            location VARCHAR(255) NOT NULL,
            forecast_date DATE NOT NULL,
            condition VARCHAR(100) NOT NULL,
            description VARCHAR(255),
            temperature DOUBLE PRECISION NOT NULL,
            feels_like DOUBLE PRECISION,
            precipitation DOUBLE PRECISION NOT NULL,
            humidity DOUBLE PRECISION NOT NULL,
            wind_speed DOUBLE PRECISION NOT NULL,
            wind_direction DOUBLE PRECISION,
            latitude DOUBLE PRECISION,
            longitude DOUBLE PRECISION,
            cached_at TIMESTAMP WITH TIME ZONE NOT NULL,
            expires_at TIMESTAMP WITH TIME ZONE NOT NULL,
            CONSTRAINT uq_weather_cache_location_date UNIQUE (location, forecast_date)
        )
    """)
    op.execute("CREATE INDEX idx_weather_cache_expires_at ON weather_cache(expires_at)")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS weather_cache")
