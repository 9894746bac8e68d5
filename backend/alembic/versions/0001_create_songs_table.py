"""create songs table

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Idempotent: fresh databases already have the table from init_raw_db
    op.execute("CREATE SEQUENCE IF NOT EXISTS seq_songs_id START 1")
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS songs (
            id INTEGER PRIMARY KEY DEFAULT nextval('seq_songs_id'),
            group_name VARCHAR NOT NULL,
            song_name VARCHAR NOT NULL,
            release_date DATE,
            lyrics VARCHAR DEFAULT '',
            link VARCHAR DEFAULT '',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
        """
    )


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS songs")
    op.execute("DROP SEQUENCE IF EXISTS seq_songs_id")
