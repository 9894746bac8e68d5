import pytest
from datetime import date
from domain.exceptions import ValidationError
from domain.services.song_patch import SongPatch, parse_release_date

def test_parse_release_date():
    assert parse_release_date("2024-01-15") == date(2024, 1, 15)

@pytest.mark.parametrize("value", [
    "2024-13-40", "15.01.2024", "", "2024/01/15",
    "2024-1-5", "2024-01-5", "2024-1-15", "2024-01-15T00:00", " 2024-01-15",
])
def test_parse_release_date_invalid(value):
    with pytest.raises(ValidationError):
        parse_release_date(value)

def test_empty_patch():
    patch = SongPatch()
    assert patch.is_empty()
    assert patch.assignments() == {}

def test_assignments_only_supplied_fields():
    patch = SongPatch(song="Bohemian Rhapsody", link="https://example.com/q/br")
    assert patch.supplied() == ("song", "link")
    assert patch.assignments() == {
        "song_name": "Bohemian Rhapsody",
        "link": "https://example.com/q/br",
    }

def test_assignments_follow_fixed_column_order():
    patch = SongPatch(link="l", lyrics="x", release_date="2020-02-29", song="s", group="g")
    assert list(patch.assignments()) == ["group_name", "song_name", "release_date", "lyrics", "link"]
    assert patch.assignments()["release_date"] == date(2020, 2, 29)

def test_empty_string_is_a_supplied_value():
    # Only absence means "leave unchanged"
    patch = SongPatch(lyrics="")
    assert not patch.is_empty()
    assert patch.assignments() == {"lyrics": ""}

def test_invalid_date_fails_before_building():
    patch = SongPatch(group="Queen", release_date="2024-13-40")
    with pytest.raises(ValidationError):
        patch.assignments()

def test_from_fields_ignores_unknown_keys():
    patch = SongPatch.from_fields({"group": "Queen", "id": 99, "created_at": "x"})
    assert patch.supplied() == ("group",)
    assert patch.assignments() == {"group_name": "Queen"}
