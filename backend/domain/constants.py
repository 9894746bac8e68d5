from config import settings

# Calendar format for release dates on the wire and in patches
DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = r"[0-9]{4}-[0-9]{2}-[0-9]{2}"

# Lyrics are paged by verse; verses are separated by one blank line
VERSE_DELIMITER = "\n\n"

DEFAULT_PAGE = 1
# Keeps (page - 1) * MAX_PAGE_LIMIT well inside the store's BIGINT offset
MAX_PAGE = 1_000_000_000
DEFAULT_PAGE_LIMIT = settings.DEFAULT_PAGE_LIMIT
MIN_PAGE_LIMIT = 1
MAX_PAGE_LIMIT = settings.MAX_PAGE_LIMIT

# Fixed column order used when building partial updates
PATCHABLE_COLUMNS = (
    ("group", "group_name"),
    ("song", "song_name"),
    ("release_date", "release_date"),
    ("lyrics", "lyrics"),
    ("link", "link"),
)
