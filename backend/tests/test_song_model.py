from datetime import date, datetime
from sqlalchemy import DateTime
from sqlmodel import Session
from models import Song

def test_timestamp_columns_are_plain_naive_datetimes():
    for name in ("created_at", "updated_at"):
        column = Song.__table__.c[name]
        # A plain DateTime, not a wrapping type that insists on tz-aware values
        assert type(column.type) is DateTime
        assert column.type.timezone is False
        assert column.nullable is False
    assert Song.__table__.c.updated_at.onupdate is not None
    assert Song.__table__.c.created_at.onupdate is None

def test_naive_timestamps_round_trip(session: Session):
    song = Song(group_name="Björk", song_name="Hyperballad", release_date=date(1996, 2, 12))
    session.add(song)
    session.commit()
    session.refresh(song)

    assert isinstance(song.created_at, datetime)
    assert song.created_at.tzinfo is None
    assert song.updated_at.tzinfo is None
