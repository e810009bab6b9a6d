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

"""
Matches business logic controller.

This module separates the match-tracking logic of a running session from
the UI. The MatchesController handles:
- Grouping the session's matches by round
- Marking matches complete and undoing the last completion
- Starting the next round once every match of the current one is done
- Live per-player doubles/singles counts
"""

from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from courtpairing.controllers.session import (
    RoundAdvancer,
    RoundScheduler,
    SessionBuilder,
)
from courtpairing.exceptions import MatchNotFoundException, RoundNotCompleteException
from courtpairing.models import Match, ParticipationLedger, Player, Session, SessionConfig
from courtpairing.type_hints import Clock, IdFactory
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class MatchState:
    """Completion status of one match, tagged with its round."""

    match: Match
    round_number: int
    completed: bool = False
    completed_at: Optional[datetime] = None


@dataclass
class PlayerStats:
    """Matches a player has completed so far."""

    player: Player
    doubles_played: int = 0
    singles_played: int = 0

    @property
    def total_played(self) -> int:
        return self.doubles_played + self.singles_played


class MatchesController:
    """
    Controller for a running session.

    Completing a match records it in a statistics ledger right away, so the
    player counts update live, and undoing it calls ``unrecord`` on that
    ledger. The session's own ledger, which drives scheduling, only receives
    a round's matches when :meth:`start_next_round` hands them to the
    :class:`RoundAdvancer`.

    Parameters
    ----------
    session : Session
        Session whose first round has been scheduled.
    advancer : RoundAdvancer
        Advancer sharing the scheduler that built the session.
    clock : callable, optional
        Timestamp source for completions.
    """

    def __init__(
        self,
        session: Session,
        advancer: RoundAdvancer,
        clock: Optional[Clock] = None,
    ):
        self.session = session
        self.advancer = advancer
        self._clock: Clock = clock or datetime.now
        self._stats_ledger = ParticipationLedger(session.players, clock=self._clock)
        self._states: List[MatchState] = [
            MatchState(match=m, round_number=advancer.current_round_number)
            for m in session.matches
        ]
        # Match ids completed in the current round, oldest first
        self._completion_order: List[str] = []

    @classmethod
    def start_session(
        cls,
        players: Sequence[Player],
        config: SessionConfig,
        id_factory: Optional[IdFactory] = None,
        clock: Optional[Clock] = None,
    ) -> "MatchesController":
        """Build a session from a roster and wrap it in a controller.

        Raises:
            InvalidRosterException: If the roster cannot start a session
        """
        scheduler = RoundScheduler.from_config(config, id_factory=id_factory)
        session = SessionBuilder(scheduler, clock=clock).build_session(
            players, config.number_of_courts
        )
        return cls(session, RoundAdvancer(scheduler), clock=clock)

    # ========== Queries ==========

    @property
    def current_round_number(self) -> int:
        return self.advancer.current_round_number

    @property
    def match_states(self) -> List[MatchState]:
        return list(self._states)

    def matches_by_round(self) -> Dict[int, List[MatchState]]:
        """Match states grouped by round, in round order."""
        grouped: Dict[int, List[MatchState]] = OrderedDict()
        for state in self._states:
            grouped.setdefault(state.round_number, []).append(state)
        return grouped

    def current_round_states(self) -> List[MatchState]:
        return [s for s in self._states if s.round_number == self.current_round_number]

    def get_state(self, match_id: str) -> MatchState:
        for state in self._states:
            if state.match.id == match_id:
                return state
        raise MatchNotFoundException(f"No match with id {match_id} in this session")

    @property
    def last_completed(self) -> Optional[MatchState]:
        """The most recent completion that can still be undone."""
        if not self._completion_order:
            return None
        return self.get_state(self._completion_order[-1])

    def can_start_next_round(self) -> bool:
        states = self.current_round_states()
        return bool(states) and all(s.completed for s in states)

    def player_stats(self) -> List[PlayerStats]:
        """Completed doubles/singles per player, in roster order."""
        return [
            PlayerStats(
                player=record.player,
                doubles_played=record.doubles_played,
                singles_played=record.singles_played,
            )
            for record in self._stats_ledger.records()
        ]

    # ========== Commands ==========

    def complete_match(self, match_id: str) -> bool:
        """Mark a match as played.

        Returns:
            True if the match was marked, False if it was already completed

        Raises:
            MatchNotFoundException: If the match is not part of the session
        """
        state = self.get_state(match_id)
        if state.completed:
            logger.warning(f"Match {match_id} is already completed")
            return False

        self._stats_ledger.record(state.match)
        state.completed = True
        state.completed_at = self._clock()
        if state.round_number == self.current_round_number:
            self._completion_order.append(match_id)
        logger.info(f"Round {state.round_number}: completed {state.match}")
        return True

    def undo_last_completed(self) -> Optional[MatchState]:
        """Revert the most recent completion of the current round.

        Returns:
            The reverted match state, or None if there is nothing to undo
        """
        if not self._completion_order:
            logger.warning("Cannot undo: no completed match in the current round")
            return None

        state = self.get_state(self._completion_order.pop())
        self._stats_ledger.unrecord(state.match)
        state.completed = False
        state.completed_at = None
        logger.info(f"Undid completion of {state.match}")
        return state

    def start_next_round(self) -> List[Match]:
        """Advance once every match of the current round is completed.

        Returns:
            The new round's matches (empty if the roster cannot fill a court)

        Raises:
            RoundNotCompleteException: If a current-round match is pending
        """
        current = self.current_round_states()
        pending = [s for s in current if not s.completed]
        if pending:
            raise RoundNotCompleteException(
                f"Round {self.current_round_number} still has "
                f"{len(pending)} match(es) to play"
            )

        new_matches = self.advancer.advance_round(
            self.session, [s.match for s in current]
        )
        self.session.matches.extend(new_matches)
        self._states.extend(
            MatchState(match=m, round_number=self.current_round_number)
            for m in new_matches
        )
        self._completion_order.clear()
        return new_matches
