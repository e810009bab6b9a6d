"""Roster controller for managing player entry before a session starts."""

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

from typing import Iterable, List, Optional, Tuple

from courtpairing.constants import COMMON_PLAYER_NAMES
from courtpairing.exceptions import (
    DuplicatePlayerException,
    PlayerNotFoundException,
)
from courtpairing.controllers.session import RoundScheduler, SessionBuilder
from courtpairing.models import Player, Session, SessionConfig
from courtpairing.type_hints import Clock, IdFactory
from courtpairing.utils import setup_logger
from courtpairing.utils.validation import (
    validate_player_name,
    validate_player_name_strict,
)

logger = setup_logger(__name__)


class Roster:
    """Ordered list of players being entered for a session."""

    def __init__(
        self,
        players: Iterable[Player] = (),
        id_factory: Optional[IdFactory] = None,
        common_names: Iterable[str] = COMMON_PLAYER_NAMES,
    ):
        self._players: List[Player] = list(players)
        self.id_factory = id_factory
        self.common_names = list(common_names)

    @property
    def players(self) -> Tuple[Player, ...]:
        return tuple(self._players)

    @property
    def names(self) -> List[str]:
        return [p.name for p in self._players]

    def add_player(self, name: str) -> Player:
        """Add a player by name.

        Raises:
            PlayerNameValidationException: If the name is blank
            DuplicatePlayerException: If the name is already taken
                (case-insensitive)
        """
        name = validate_player_name_strict(name)
        result = validate_player_name(name, self.names)
        if not result.is_valid:
            raise DuplicatePlayerException(result.error_message)

        player = Player.create(name, self.id_factory)
        self._players.append(player)
        logger.info("Added player %s", player.name)
        return player

    def remove_player(self, player_id: str) -> Player:
        """Remove a player by id.

        Raises:
            PlayerNotFoundException: If no player has this id
        """
        for index, player in enumerate(self._players):
            if player.id == player_id:
                del self._players[index]
                logger.info("Removed player %s", player.name)
                return player
        raise PlayerNotFoundException(f"Unknown player id: {player_id}")

    def build_session(
        self, config: SessionConfig, clock: Optional[Clock] = None
    ) -> Session:
        """Start a session with the current roster.

        Raises:
            InvalidRosterException: If the roster cannot start a session
        """
        scheduler = RoundScheduler.from_config(config)
        return SessionBuilder(scheduler, clock=clock).build_session(
            self.players, config.number_of_courts
        )

    def common_players_available(self) -> List[str]:
        """Quick-add names not yet on the roster."""
        taken = {name.lower() for name in self.names}
        return [name for name in self.common_names if name.lower() not in taken]

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self):
        return iter(self._players)
