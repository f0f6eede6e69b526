"""Add training_plan, weather_preferences and user_settings tables.

Revision ID: 0002
Revises: 0001
Create Date: 2025-09-14 09:30:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "0002"
down_revision: Union[str, Sequence[str], None] = "0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the tables for plan overrides, tolerances and user settings."""
    op.execute("""
        CREATE TABLE training_plan (
            week_number INTEGER PRIMARY KEY,
            phase VARCHAR(20) NOT NULL CHECK (
                phase IN ('BASE_BUILDING', 'BASE_EXTENSION', 'SPEED_DEVELOPMENT', 'PEAK_TAPER')
            ),
            weekly_mileage_target DOUBLE PRECISION NOT NULL,
            long_run_target DOUBLE PRECISION NOT NULL,
            week_start DATE NOT NULL UNIQUE,
            week_end DATE NOT NULL,
            notes TEXT,
            CHECK (week_end >= week_start)
        )
    """)

    # NULL limits mean "no limit".
    op.execute("""
        CREATE TABLE weather_preferences (
            run_type VARCHAR(20) PRIMARY KEY CHECK (
                run_type IN ('LONG_RUN', 'EASY_RUN', 'TEMPO_RUN', 'INTERVAL_RUN', 'RECOVERY_RUN', 'RACE')
            ),
            max_precipitation DOUBLE PRECISION NOT NULL,
            max_wind_speed DOUBLE PRECISION,
            min_temperature DOUBLE PRECISION,
            max_temperature DOUBLE PRECISION,
            avoid_conditions TEXT[] NOT NULL DEFAULT '{}',
            updated_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP
        )
    """)

    op.execute("""
        CREATE TABLE user_settings (
            id SERIAL PRIMARY KEY,
            default_location VARCHAR(255) NOT NULL,
            updated_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP
        )
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS user_settings")
    op.execute("DROP TABLE IF EXISTS weather_preferences")
    op.execute("DROP TABLE IF EXISTS training_plan")
