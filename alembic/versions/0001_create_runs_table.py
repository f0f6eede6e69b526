"""Create runs table.

Revision ID: 0001
Revises:
Create Date: 2025-09-14 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the runs table with at most one run per calendar date."""
    op.execute("""
        CREATE TABLE runs (
            id VARCHAR(64) PRIMARY KEY,
            date DATE NOT NULL UNIQUE,
            distance DOUBLE PRECISION NOT NULL CHECK (distance >= 0),
            pace VARCHAR(16) NOT NULL DEFAULT '',
            duration VARCHAR(16) NOT NULL DEFAULT '',
            type VARCHAR(20) NOT NULL CHECK (
                type IN ('LONG_RUN', 'EASY_RUN', 'TEMPO_RUN', 'INTERVAL_RUN', 'RECOVERY_RUN', 'RACE')
            ),
            completed BOOLEAN NOT NULL DEFAULT FALSE,
            notes TEXT,
            created_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP
        )
    """)
    op.execute("CREATE INDEX idx_runs_completed ON runs(completed)")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS runs")
