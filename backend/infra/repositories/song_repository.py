from typing import Any, Dict, List, Optional
from sqlmodel import Session, select, col
from sqlalchemy import update

from domain.models.song import Song

class SongRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, song_id: int) -> Optional[Song]:
        return self.session.get(Song, song_id)

    def find_all(
        self,
        group: Optional[str] = None,
        song_name: Optional[str] = None,
        offset: int = 0,
        limit: int = 10
    ) -> List[Song]:
        """Exact-match filters; empty values act as wildcards. Ordered by id."""
        query = select(Song)
        if group: query = query.where(Song.group_name == group)
        if song_name: query = query.where(Song.song_name == song_name)
        query = query.order_by(col(Song.id)).offset(offset).limit(limit)
        return self.session.exec(query).all()

    def create(self, song: Song) -> Song:
        self.session.add(song)
        self.session.commit()
        self.session.refresh(song)
        return song

    def update_fields(self, song_id: int, values: Dict[str, Any]) -> Optional[Song]:
        """
        Apply column values in one UPDATE ... RETURNING statement.

        Returns the post-update row, or None when no row matched. updated_at
        is filled in by the column's onupdate default.
        """
        table = Song.__table__
        stmt = (
            update(table)
            .where(table.c.id == song_id)
            .values(**values)
            .returning(*table.columns)
        )
        row = self.session.connection().execute(stmt).mappings().first()
        self.session.commit()
        if row is None:
            return None
        return Song.model_validate(dict(row))

    def delete(self, song: Song):
        self.session.delete(song)
        self.session.commit()

    def rollback(self):
        self.session.rollback()
