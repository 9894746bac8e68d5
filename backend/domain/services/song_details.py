from abc import ABC, abstractmethod
from datetime import date
from typing import Callable

from pydantic import BaseModel

from domain.constants import DATE_FORMAT


class SongDetails(BaseModel):
    release_date: str
    lyrics: str
    link: str


class SongDetailsProvider(ABC):
    @abstractmethod
    def get_details(self, group: str, song: str) -> SongDetails:
        """
        Supplies the metadata a new song is stored with.

        :param group: Performing group name
        :param song: Song name
        :return: SongDetails with release_date in YYYY-MM-DD
        """
        pass


class PlaceholderDetailsProvider(SongDetailsProvider):
    """Default enrichment: generated placeholders, no network access."""

    def __init__(self, today: Callable[[], date] = date.today):
        self.today = today

    def get_details(self, group: str, song: str) -> SongDetails:
        return SongDetails(
            release_date=self.today().strftime(DATE_FORMAT),
            lyrics=f"Lyrics placeholder for {song}",
            link=f"https://example.com/{group}/{song}",
        )
