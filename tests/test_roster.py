import pytest

from conftest import sequential_ids
from courtpairing.constants import COMMON_PLAYER_NAMES
from courtpairing.controllers import Roster
from courtpairing.exceptions import (
    DuplicatePlayerException,
    InvalidRosterException,
    PlayerNameValidationException,
    PlayerNotFoundException,
)
from courtpairing.models import SessionConfig


def test_add_player_trims_name():
    roster = Roster(id_factory=sequential_ids("p"))
    player = roster.add_player("  Ray  ")

    assert player.name == "Ray"
    assert player.id == "p1"
    assert roster.names == ["Ray"]
    assert len(roster) == 1


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_names_rejected(name):
    roster = Roster()
    with pytest.raises(PlayerNameValidationException, match="required"):
        roster.add_player(name)
    assert len(roster) == 0


def test_duplicate_names_rejected_case_insensitively():
    roster = Roster()
    roster.add_player("Selin")
    with pytest.raises(DuplicatePlayerException, match="already in the list"):
        roster.add_player("selin ")
    assert roster.names == ["Selin"]


def test_remove_player():
    roster = Roster()
    ray = roster.add_player("Ray")
    roster.add_player("Long")

    removed = roster.remove_player(ray.id)
    assert removed == ray
    assert roster.names == ["Long"]
    with pytest.raises(PlayerNotFoundException):
        roster.remove_player(ray.id)


def test_common_players_available_hides_added_names():
    roster = Roster()
    assert roster.common_players_available() == COMMON_PLAYER_NAMES

    roster.add_player(COMMON_PLAYER_NAMES[0].upper())
    available = roster.common_players_available()
    assert COMMON_PLAYER_NAMES[0] not in available
    assert len(available) == len(COMMON_PLAYER_NAMES) - 1


def test_iterates_in_entry_order():
    roster = Roster()
    for name in ("Ray", "Selin", "Long"):
        roster.add_player(name)
    assert [p.name for p in roster] == ["Ray", "Selin", "Long"]


def test_blank_name_checked_before_duplicates():
    roster = Roster()
    roster.add_player("Ray")
    with pytest.raises(PlayerNameValidationException, match="required"):
        roster.add_player("  ")
    with pytest.raises(DuplicatePlayerException) as excinfo:
        roster.add_player(" ray ")
    assert not isinstance(excinfo.value, PlayerNameValidationException)
    assert roster.names == ["Ray"]


def test_build_session_from_roster():
    roster = Roster()
    for name in COMMON_PLAYER_NAMES[:6]:
        roster.add_player(name)

    session = roster.build_session(
        SessionConfig(number_of_courts=2, scheduling_system="fixed")
    )
    doubles, singles = session.matches
    assert [p.name for p in doubles.players] == COMMON_PLAYER_NAMES[:4]
    assert [p.name for p in singles.players] == COMMON_PLAYER_NAMES[4:6]


def test_build_session_needs_four_players():
    roster = Roster()
    roster.add_player("Ray")
    with pytest.raises(InvalidRosterException):
        roster.build_session(SessionConfig())
