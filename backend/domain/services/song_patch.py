import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Tuple

from domain.constants import DATE_FORMAT, DATE_PATTERN, PATCHABLE_COLUMNS
from domain.exceptions import ValidationError

_UNSET: Any = object()


def parse_release_date(value: str) -> date:
    """Parse a YYYY-MM-DD string, raising ValidationError on anything else."""
    # strptime alone accepts unpadded months and days such as 2024-1-5
    if not isinstance(value, str) or not re.fullmatch(DATE_PATTERN, value):
        raise ValidationError(f"invalid release date format: {value!r}")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise ValidationError(f"invalid release date format: {value!r}") from e


@dataclass(frozen=True)
class SongPatch:
    """
    Sparse update for a song.

    Every field defaults to a private sentinel, so "not supplied" stays
    distinct from any real value. Only supplied fields reach the UPDATE.
    """
    group: Any = _UNSET
    song: Any = _UNSET
    release_date: Any = _UNSET
    lyrics: Any = _UNSET
    link: Any = _UNSET

    @classmethod
    def from_fields(cls, fields: Dict[str, Any]) -> "SongPatch":
        known = {name for name, _ in PATCHABLE_COLUMNS}
        return cls(**{k: v for k, v in fields.items() if k in known})

    def supplied(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in PATCHABLE_COLUMNS if getattr(self, name) is not _UNSET)

    def is_empty(self) -> bool:
        return not self.supplied()

    def assignments(self) -> Dict[str, Any]:
        """
        Map each supplied field to its column and bound value.

        Keys follow the fixed column order (group, song, release_date,
        lyrics, link). The release date is parsed here, so an invalid date
        fails before any statement is built.
        """
        values: Dict[str, Any] = {}
        for name, column in PATCHABLE_COLUMNS:
            value = getattr(self, name)
            if value is _UNSET:
                continue
            if name == "release_date":
                value = parse_release_date(value)
            values[column] = value
        return values
