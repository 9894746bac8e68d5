from typing import Optional
from datetime import date, datetime
from sqlmodel import Field, SQLModel
from sqlalchemy import Column, DateTime

class Song(SQLModel, table=True):
    """
    Catalog entry: song metadata plus the full lyrics blob
    """
    __tablename__ = "songs"

    id: Optional[int] = Field(default=None, primary_key=True)

    # Metadata
    group_name: str = Field(nullable=False)
    song_name: str = Field(nullable=False)
    release_date: date
    lyrics: str = Field(default="")
    link: str = Field(default="")

    # Store-managed local timestamps, stored without a zone to match the
    # TIMESTAMP columns; updated_at is refreshed on every UPDATE
    created_at: datetime = Field(
        default_factory=datetime.now,
        sa_column=Column(DateTime(timezone=False), nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=datetime.now,
        sa_column=Column(DateTime(timezone=False), nullable=False, onupdate=datetime.now),
    )
