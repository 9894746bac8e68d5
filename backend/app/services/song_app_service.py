from typing import List, Optional
from sqlmodel import Session
from sqlalchemy.exc import SQLAlchemyError

from domain.models.song import Song
from domain.exceptions import NotFoundError, StoreError, ValidationError
from domain.services.song_patch import SongPatch, parse_release_date
from domain.services.song_details import PlaceholderDetailsProvider, SongDetailsProvider
from domain.services.verse_paginator import paginate_verses
from infra.repositories.song_repository import SongRepository
from utils.logger import get_logger

logger = get_logger(__name__)

class SongAppService:
    def __init__(self, session: Session, details_provider: Optional[SongDetailsProvider] = None):
        self.session = session
        self.repository = SongRepository(session)
        self.details_provider = details_provider or PlaceholderDetailsProvider()

    def get_song(self, song_id: int) -> Song:
        try:
            song = self.repository.get_by_id(song_id)
        except SQLAlchemyError as e:
            raise self._store_error(f"fetching song {song_id}", e) from e
        if not song:
            raise NotFoundError(f"song {song_id} not found")
        return song

    def get_songs(
        self,
        group: Optional[str] = None,
        song_name: Optional[str] = None,
        page: int = 1,
        limit: int = 10
    ) -> List[Song]:
        offset = (page - 1) * limit
        try:
            return self.repository.find_all(group=group, song_name=song_name, offset=offset, limit=limit)
        except SQLAlchemyError as e:
            raise self._store_error("listing songs", e) from e

    def get_lyrics(self, song_id: int, page: int, limit: int) -> List[str]:
        song = self.get_song(song_id)
        return paginate_verses(song.lyrics or "", page, limit)

    def create_song(self, group: str, song_name: str) -> Song:
        if not group or not song_name:
            raise ValidationError("group and song names cannot be empty")

        logger.info(f"Creating song {group} - {song_name}")
        details = self.details_provider.get_details(group, song_name)
        release_date = parse_release_date(details.release_date)

        song = Song(
            group_name=group,
            song_name=song_name,
            release_date=release_date,
            lyrics=details.lyrics,
            link=details.link,
        )
        try:
            created = self.repository.create(song)
        except SQLAlchemyError as e:
            raise self._store_error(f"creating song {group} - {song_name}", e) from e

        logger.info(f"Created song {created.id}")
        return created

    def update_song(self, song_id: int, patch: SongPatch) -> Song:
        """
        Apply a sparse patch and return the updated row.

        An empty patch returns the current row without issuing a write.
        """
        current = self.get_song(song_id)
        if patch.is_empty():
            return current

        values = patch.assignments()
        try:
            updated = self.repository.update_fields(song_id, values)
        except SQLAlchemyError as e:
            raise self._store_error(f"updating song {song_id}", e) from e

        if updated is None:
            raise NotFoundError(f"song {song_id} not found")

        logger.info(f"Updated song {song_id}: {', '.join(values)}")
        return updated

    def delete_song(self, song_id: int) -> None:
        song = self.get_song(song_id)
        try:
            self.repository.delete(song)
        except SQLAlchemyError as e:
            raise self._store_error(f"deleting song {song_id}", e) from e
        logger.info(f"Deleted song {song_id}")

    def _store_error(self, action: str, error: Exception) -> StoreError:
        logger.error(f"Database error while {action}: {error}")
        try:
            self.repository.rollback()
        except SQLAlchemyError as rollback_error:
            logger.error(f"Rollback after {action} failed: {rollback_error}")
        return StoreError(f"database failure while {action}")
