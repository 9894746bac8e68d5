from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime

from domain.models.song import Song

class SongCreate(BaseModel):
    group: str
    song: str

class SongUpdate(BaseModel):
    """Fields left out of the request body are not touched."""
    group: Optional[str] = None
    song: Optional[str] = None
    release_date: Optional[str] = None  # YYYY-MM-DD
    lyrics: Optional[str] = None
    link: Optional[str] = None

class SongRead(BaseModel):
    id: int
    group: str
    song: str
    release_date: date
    lyrics: str
    link: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, song: Song) -> "SongRead":
        return cls(
            id=song.id,
            group=song.group_name,
            song=song.song_name,
            release_date=song.release_date,
            lyrics=song.lyrics,
            link=song.link,
            created_at=song.created_at,
            updated_at=song.updated_at,
        )
