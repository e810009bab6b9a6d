"""Round progression for sessions."""

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

from typing import Iterable, List, Optional, Sequence

from courtpairing.controllers.session.round_scheduler import RoundScheduler
from courtpairing.exceptions import PlayerNotFoundException
from courtpairing.models import Match, Player, Session
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundAdvancer:
    """Moves a session from one round to the next.

    Each advancer keeps its own round counter, so independent sessions never
    share state. The advancer does not touch ``session.matches``; the caller
    appends the returned matches and tags them with
    :attr:`current_round_number`.
    """

    def __init__(self, scheduler: RoundScheduler):
        self.scheduler = scheduler
        self._round_number = 1

    @property
    def current_round_number(self) -> int:
        """The round currently being played (1-indexed)."""
        return self._round_number

    def advance_round(
        self,
        session: Session,
        completed_matches: Iterable[Match],
        available_players: Optional[Sequence[Player]] = None,
    ) -> List[Match]:
        """Fold the finished round into the ledger and schedule the next one.

        Args:
            session: The session being played
            completed_matches: Matches of the current round that were played
            available_players: Players who may be scheduled next; defaults to
                the full roster

        Returns:
            The next round's matches (possibly empty)

        Raises:
            PlayerNotFoundException: If a match names a player outside the
                session
        """
        completed = list(completed_matches)
        # Check every match first so a bad one leaves the ledger untouched
        for match in completed:
            unknown = [p.name for p in match.players if p.id not in session.ledger]
            if unknown:
                raise PlayerNotFoundException(
                    f"Match {match.id} names players outside the session: {unknown}"
                )
        for match in completed:
            session.ledger.record(match)

        self._round_number += 1
        players = (
            list(available_players)
            if available_players is not None
            else list(session.players)
        )
        logger.info(
            f"Advancing to round {self._round_number} after "
            f"{len(completed)} completed match(es)"
        )
        return self.scheduler.next_round(
            players, session.number_of_courts, session.ledger
        )
