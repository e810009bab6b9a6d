import pytest

from conftest import make_players
from courtpairing.exceptions import InvalidRosterException, PlayerNameValidationException
from courtpairing.utils.validation import (
    validate_number_of_courts,
    validate_player_name,
    validate_player_name_strict,
    validate_roster,
    validate_roster_strict,
)


def test_player_name_trimmed():
    result = validate_player_name("  Ankita ", ["Rajat"])
    assert result
    assert result.sanitized_value == "Ankita"


def test_player_name_duplicate_message():
    result = validate_player_name("RAJAT", ["Rajat"])
    assert not result
    assert result.error_message == "RAJAT is already in the list"


def test_player_name_strict_raises_on_blank():
    with pytest.raises(PlayerNameValidationException):
        validate_player_name_strict("   ")
    assert validate_player_name_strict(" Vivaan") == "Vivaan"


@pytest.mark.parametrize("value,valid", [(1, True), (5, True), (0, False), ("x", False)])
def test_number_of_courts(value, valid):
    assert bool(validate_number_of_courts(value)) is valid


def test_roster_minimum_size():
    result = validate_roster(make_players("A", "B", "C"), 1, "rotation")
    assert not result
    assert result.error_message == "Need at least 4 players to generate matches"


def test_fixed_roster_limits():
    assert validate_roster(make_players(*"ABCDEFGH"), 2, "fixed")
    assert not validate_roster(make_players(*"ABCDEFGHI"), 2, "fixed")
    assert not validate_roster(make_players(*"ABCD"), 3, "fixed")
    assert validate_roster(make_players(*"ABCDEFGHI"), 3, "rotation")


def test_roster_strict_raises():
    with pytest.raises(InvalidRosterException):
        validate_roster_strict(make_players("A", "A", "B", "C"), 1, "rotation")
