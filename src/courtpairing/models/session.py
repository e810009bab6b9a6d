"""Session and session configuration data classes."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from courtpairing.constants import (
    DEFAULT_NUMBER_OF_COURTS,
    DEFAULT_SCHEDULING_SYSTEM,
    MAX_ARRANGEMENT_TRIALS,
    REPEAT_PAIR_WEIGHT,
    SCHEDULING_SYSTEMS,
)
from courtpairing.exceptions import InvalidConfigurationException
from courtpairing.models.match import Match
from courtpairing.models.participation_ledger import ParticipationLedger
from courtpairing.models.player import Player


@dataclass
class SessionConfig:
    """Session configuration settings.

    Attributes
    ----------
    number_of_courts : int
        Courts available; one match per court per round.
    scheduling_system : str
        ``"rotation"`` (any roster size, randomized partner search) or
        ``"fixed"`` (case table for 4 to 8 players on 1 or 2 courts).
    seed : int or None
        Seed for the scheduler's random source. ``None`` gives a
        non-reproducible session.
    max_arrangement_trials : int
        Upper bound on shuffles tried when arranging one court.
    repeat_pair_weight : int
        Weight of a repeated pairing in the fairness score.
    """

    number_of_courts: int = DEFAULT_NUMBER_OF_COURTS
    scheduling_system: str = DEFAULT_SCHEDULING_SYSTEM
    seed: Optional[int] = None
    max_arrangement_trials: int = MAX_ARRANGEMENT_TRIALS
    repeat_pair_weight: int = REPEAT_PAIR_WEIGHT

    def __post_init__(self):
        """Validate configuration after initialization"""
        if self.number_of_courts < 1:
            raise InvalidConfigurationException(
                f"Number of courts must be at least 1, got {self.number_of_courts}"
            )
        if self.scheduling_system not in SCHEDULING_SYSTEMS:
            raise InvalidConfigurationException(
                f"Unknown scheduling system {self.scheduling_system!r}; "
                f"expected one of {SCHEDULING_SYSTEMS}"
            )
        if self.max_arrangement_trials < 1:
            raise InvalidConfigurationException(
                "At least one arrangement trial is required"
            )
        if self.repeat_pair_weight < 0:
            raise InvalidConfigurationException(
                "Repeat pair weight must not be negative"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "number_of_courts": self.number_of_courts,
            "scheduling_system": self.scheduling_system,
            "seed": self.seed,
            "max_arrangement_trials": self.max_arrangement_trials,
            "repeat_pair_weight": self.repeat_pair_weight,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            number_of_courts=int(
                data.get("number_of_courts", DEFAULT_NUMBER_OF_COURTS)
            ),
            scheduling_system=data.get("scheduling_system", DEFAULT_SCHEDULING_SYSTEM),
            seed=data.get("seed"),
            max_arrangement_trials=int(
                data.get("max_arrangement_trials", MAX_ARRANGEMENT_TRIALS)
            ),
            repeat_pair_weight=int(data.get("repeat_pair_weight", REPEAT_PAIR_WEIGHT)),
        )


@dataclass
class Session:
    """A playing session.

    Attributes
    ----------
    players : tuple of Player
        Roster snapshot taken when the session was built.
    number_of_courts : int
        Courts in use.
    matches : list of Match
        Every match generated so far, across all rounds. Round numbers are
        tracked by the caller.
    ledger : ParticipationLedger
        Participation history owned by this session.
    """

    players: Tuple[Player, ...]
    number_of_courts: int
    matches: List[Match] = field(default_factory=list)
    ledger: ParticipationLedger = field(default=None, repr=False, compare=False)  # type: ignore[assignment]

    def __post_init__(self):
        self.players = tuple(self.players)
        if self.ledger is None:
            self.ledger = ParticipationLedger(self.players)

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get_match(self, match_id: str) -> Optional[Match]:
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize session (without ledger) to dictionary."""
        return {
            "players": [p.to_dict() for p in self.players],
            "number_of_courts": self.number_of_courts,
            "matches": [m.to_dict() for m in self.matches],
        }
