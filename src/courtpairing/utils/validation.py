"""Validation utilities for Court Pairing.

This module provides reusable validation functions with consistent error handling.
"""

# Court Pairing
# Copyright (C) 2025  Court Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Iterable, Optional, Sequence

from courtpairing.constants import (
    MAX_FIXED_COURTS,
    MAX_FIXED_PLAYERS,
    MIN_PLAYERS,
    SCHEDULING_FIXED,
)
from courtpairing.exceptions import (
    InvalidRosterException,
    PlayerNameValidationException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player Name Validation ==========


def validate_player_name(
    name: Optional[str], existing_names: Iterable[str] = ()
) -> ValidationResult:
    """Validate a player name for entry on the roster.

    Names are trimmed; duplicates are detected case-insensitively.

    Args:
        name: Name as typed by the user
        existing_names: Names already on the roster

    Returns:
        ValidationResult with the trimmed name as sanitized value

    Example:
        >>> result = validate_player_name("  Ray ", ["Selin"])
        >>> result.sanitized_value
        'Ray'
    """
    if not name or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Player name is required",
        )

    name = name.strip()
    taken = {existing.lower() for existing in existing_names}
    if name.lower() in taken:
        return ValidationResult(
            is_valid=False,
            error_message=f"{name} is already in the list",
        )

    return ValidationResult(is_valid=True, sanitized_value=name)


def validate_player_name_strict(
    name: Optional[str], existing_names: Iterable[str] = ()
) -> str:
    """Validate a player name and return it trimmed or raise exception.

    Duplicates raise the same exception as blank names; callers that need
    to tell them apart pass no ``existing_names`` and check duplicates with
    :func:`validate_player_name`.

    Raises:
        PlayerNameValidationException: If the name is invalid
    """
    result = validate_player_name(name, existing_names)
    if not result.is_valid:
        raise PlayerNameValidationException(result.error_message)
    return result.sanitized_value or ""


# ========== Session Validation ==========


def validate_number_of_courts(number_of_courts: int) -> ValidationResult:
    """Validate a court count (any positive integer)."""
    try:
        courts = int(number_of_courts)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Number of courts must be a number: {number_of_courts}",
        )

    if courts < 1:
        return ValidationResult(
            is_valid=False,
            error_message=f"Number of courts must be at least 1: {courts}",
        )

    return ValidationResult(is_valid=True, sanitized_value=str(courts))


def validate_roster(
    players: Sequence, number_of_courts: int, scheduling_system: str
) -> ValidationResult:
    """Check that a roster can start a session.

    Args:
        players: Roster (objects with an ``id`` attribute)
        number_of_courts: Courts available for the session
        scheduling_system: Scheduling system the session will use

    Returns:
        ValidationResult with validation status
    """
    if len(players) < MIN_PLAYERS:
        return ValidationResult(
            is_valid=False,
            error_message=f"Need at least {MIN_PLAYERS} players to generate matches",
        )

    ids = [p.id for p in players]
    if len(set(ids)) != len(ids):
        return ValidationResult(
            is_valid=False,
            error_message="Roster contains the same player more than once",
        )

    courts = validate_number_of_courts(number_of_courts)
    if not courts:
        return courts

    if scheduling_system == SCHEDULING_FIXED:
        if len(players) > MAX_FIXED_PLAYERS:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Fixed court scheduling supports at most {MAX_FIXED_PLAYERS} "
                    f"players, got {len(players)}"
                ),
            )
        if int(number_of_courts) > MAX_FIXED_COURTS:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Fixed court scheduling supports at most {MAX_FIXED_COURTS} "
                    f"courts, got {number_of_courts}"
                ),
            )

    return ValidationResult(is_valid=True)


def validate_roster_strict(
    players: Sequence, number_of_courts: int, scheduling_system: str
) -> None:
    """Validate a roster or raise exception.

    Raises:
        InvalidRosterException: If the roster cannot start a session
    """
    result = validate_roster(players, number_of_courts, scheduling_system)
    if not result.is_valid:
        raise InvalidRosterException(result.error_message)
