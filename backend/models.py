# Table models, re-exported so Alembic sees them on SQLModel.metadata
from domain.models.song import Song
