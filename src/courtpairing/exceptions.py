"""Exceptions for use in Court Pairing"""

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


# ========== Base Application Exception ==========


class CourtPairingException(Exception):
    """Base exception for all Court Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Scheduling Exceptions ==========


class SchedulingException(CourtPairingException):
    """Base exception for round scheduling errors."""

    pass


# ========== Ledger Exceptions ==========


class LedgerException(CourtPairingException):
    """Base exception for participation ledger errors."""

    pass


class LedgerConsistencyException(LedgerException):
    """Raised when unrecording a match would drive a ledger counter below zero.

    This means the match was never recorded (or was already unrecorded),
    which is a caller error such as a double undo.
    """

    pass


# ========== Session Exceptions ==========


class SessionException(CourtPairingException):
    """Base exception for session-related errors."""

    pass


class RoundNotCompleteException(SessionException):
    """Raised when advancing while the current round still has pending matches."""

    pass


class MatchNotFoundException(SessionException):
    """Raised when a requested match does not exist in the session."""

    pass


# ========== Player Exceptions ==========


class PlayerException(CourtPairingException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player cannot be found."""

    pass


class DuplicatePlayerException(PlayerException):
    """Raised when attempting to add a player that already exists."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(CourtPairingException):
    """Base exception for validation errors."""

    pass


class InvalidRosterException(ValidationException):
    """Raised when a roster cannot start a session (e.g. too few players)."""

    pass


class PlayerNameValidationException(ValidationException):
    """Raised when a player name is blank or otherwise unusable."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(CourtPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
