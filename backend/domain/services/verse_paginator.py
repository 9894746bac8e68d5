from typing import List

from domain.constants import VERSE_DELIMITER


def split_verses(lyrics: str) -> List[str]:
    return lyrics.split(VERSE_DELIMITER)


def paginate_verses(lyrics: str, page: int, limit: int) -> List[str]:
    """
    Return the verses on a 1-based page.

    page and limit are assumed already clamped by the caller. A page
    starting past the last verse yields an empty list, never an error.
    """
    verses = split_verses(lyrics)
    start = (page - 1) * limit
    if start > len(verses):
        return []
    end = min(start + limit, len(verses))
    return verses[start:end]
