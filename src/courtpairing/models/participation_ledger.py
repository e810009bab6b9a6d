"""Participation tracking for a session.

The ledger counts how often each player has played, who they partnered and
who they faced, and how often every pair of players has shared a court.
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

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from courtpairing.exceptions import LedgerConsistencyException, PlayerNotFoundException
from courtpairing.models.match import Match
from courtpairing.models.player import Player
from courtpairing.type_hints import Clock, PairKey
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


def pair_key(player1_id: str, player2_id: str) -> PairKey:
    """Order-independent key for a pair of players."""
    return frozenset({player1_id, player2_id})


@dataclass(frozen=True)
class ParticipationRecord:
    """Snapshot of one player's participation.

    Attributes
    ----------
    player : Player
        The player this record describes.
    doubles_played : int
        Completed 4-player matches.
    singles_played : int
        Completed 2- or 3-player matches.
    last_played_at : datetime or None
        When the player's most recent recorded match was recorded.
    partners : frozenset of str
        Ids of players who have been on the same side.
    opponents : frozenset of str
        Ids of players who have been on the other side.
    """

    player: Player
    doubles_played: int = 0
    singles_played: int = 0
    last_played_at: Optional[datetime] = None
    partners: FrozenSet[str] = frozenset()
    opponents: FrozenSet[str] = frozenset()

    @property
    def total_matches(self) -> int:
        return self.doubles_played + self.singles_played


class ParticipationLedger:
    """Per-session record of who played, with whom and against whom.

    Teammate and opponent encounters are counted separately per unordered
    pair; :meth:`pair_frequency` is their sum. Partner and opponent sets are
    derived from the positive counters, which keeps :meth:`unrecord` an exact
    inverse of :meth:`record`.

    Parameters
    ----------
    players : iterable of Player
        The session roster. Order is preserved by :meth:`records`.
    clock : callable, optional
        Returns the timestamp stored as ``last_played_at``. Defaults to
        :meth:`datetime.now`.
    """

    def __init__(self, players: Iterable[Player], clock: Optional[Clock] = None):
        self._clock: Clock = clock or datetime.now
        self._players: Dict[str, Player] = {}
        for player in players:
            self._players[player.id] = player

        self._doubles: Dict[str, int] = {pid: 0 for pid in self._players}
        self._singles: Dict[str, int] = {pid: 0 for pid in self._players}
        # (match id, timestamp) per player, oldest first
        self._played: Dict[str, List[Tuple[str, datetime]]] = {
            pid: [] for pid in self._players
        }
        self._teammates: Dict[PairKey, int] = {}
        self._opponents: Dict[PairKey, int] = {}

    # ========== Mutation ==========

    def record(self, match: Match) -> None:
        """Fold a completed match into the ledger."""
        self._require_known(match)
        now = self._clock()

        for player in match.players:
            if match.is_doubles:
                self._doubles[player.id] += 1
            else:
                self._singles[player.id] += 1
            self._played[player.id].append((match.id, now))

        for a, b in match.teammate_pairs():
            key = pair_key(a.id, b.id)
            self._teammates[key] = self._teammates.get(key, 0) + 1
        for a, b in match.opponent_pairs():
            key = pair_key(a.id, b.id)
            self._opponents[key] = self._opponents.get(key, 0) + 1

        logger.debug("Recorded match %s (%s)", match.id, match)

    def unrecord(self, match: Match) -> None:
        """Remove a previously recorded match from the ledger.

        Raises
        ------
        LedgerConsistencyException
            If the match was never recorded, so that a counter would drop
            below zero. The ledger is left unchanged.
        """
        self._require_known(match)
        self._check_can_unrecord(match)

        for player in match.players:
            if match.is_doubles:
                self._doubles[player.id] -= 1
            else:
                self._singles[player.id] -= 1
            history = self._played[player.id]
            for index in range(len(history) - 1, -1, -1):
                if history[index][0] == match.id:
                    del history[index]
                    break

        for a, b in match.teammate_pairs():
            self._decrement(self._teammates, pair_key(a.id, b.id))
        for a, b in match.opponent_pairs():
            self._decrement(self._opponents, pair_key(a.id, b.id))

        logger.debug("Unrecorded match %s (%s)", match.id, match)

    def _require_known(self, match: Match) -> None:
        unknown = [p.id for p in match.players if p.id not in self._players]
        if unknown:
            raise PlayerNotFoundException(
                f"Match {match.id} contains players not in this session: {unknown}"
            )

    def _check_can_unrecord(self, match: Match) -> None:
        counts = self._doubles if match.is_doubles else self._singles
        problems = []
        for player in match.players:
            if counts[player.id] < 1:
                problems.append(f"{player.name} has no recorded matches of this kind")
            elif not any(mid == match.id for mid, _ in self._played[player.id]):
                problems.append(f"{player.name} never played match {match.id}")
        for a, b in match.teammate_pairs():
            if self._teammates.get(pair_key(a.id, b.id), 0) < 1:
                problems.append(f"{a.name} and {b.name} were never teammates")
        for a, b in match.opponent_pairs():
            if self._opponents.get(pair_key(a.id, b.id), 0) < 1:
                problems.append(f"{a.name} and {b.name} were never opponents")

        if problems:
            logger.error("Refusing to unrecord match %s: %s", match.id, problems)
            raise LedgerConsistencyException(
                f"Cannot unrecord match {match.id}, it was not recorded: "
                + "; ".join(problems)
            )

    @staticmethod
    def _decrement(counter: Dict[PairKey, int], key: PairKey) -> None:
        remaining = counter[key] - 1
        if remaining:
            counter[key] = remaining
        else:
            del counter[key]

    # ========== Accessors ==========

    @property
    def player_ids(self) -> List[str]:
        """Player ids in roster order."""
        return list(self._players)

    def get_player(self, player_id: str) -> Player:
        self._require_player(player_id)
        return self._players[player_id]

    def _require_player(self, player_id: str) -> None:
        if player_id not in self._players:
            raise PlayerNotFoundException(f"Unknown player id: {player_id}")

    def doubles_played(self, player_id: str) -> int:
        self._require_player(player_id)
        return self._doubles[player_id]

    def singles_played(self, player_id: str) -> int:
        self._require_player(player_id)
        return self._singles[player_id]

    def total_matches(self, player_id: str) -> int:
        self._require_player(player_id)
        return self._doubles[player_id] + self._singles[player_id]

    def last_played_at(self, player_id: str) -> Optional[datetime]:
        self._require_player(player_id)
        history = self._played[player_id]
        return history[-1][1] if history else None

    def teammate_count(self, player1_id: str, player2_id: str) -> int:
        return self._teammates.get(pair_key(player1_id, player2_id), 0)

    def opponent_count(self, player1_id: str, player2_id: str) -> int:
        return self._opponents.get(pair_key(player1_id, player2_id), 0)

    def pair_frequency(self, player1_id: str, player2_id: str) -> int:
        """Times two players shared a court, as teammates or opponents."""
        return self.teammate_count(player1_id, player2_id) + self.opponent_count(
            player1_id, player2_id
        )

    def partners_of(self, player_id: str) -> FrozenSet[str]:
        self._require_player(player_id)
        return self._others_in(self._teammates, player_id)

    def opponents_of(self, player_id: str) -> FrozenSet[str]:
        self._require_player(player_id)
        return self._others_in(self._opponents, player_id)

    @staticmethod
    def _others_in(counter: Dict[PairKey, int], player_id: str) -> FrozenSet[str]:
        return frozenset(
            other for key in counter if player_id in key for other in key - {player_id}
        )

    def have_partnered(self, player1_id: str, player2_id: str) -> bool:
        return self.teammate_count(player1_id, player2_id) > 0

    def record_for(self, player_id: str) -> ParticipationRecord:
        """Snapshot of one player's participation."""
        return ParticipationRecord(
            player=self.get_player(player_id),
            doubles_played=self._doubles[player_id],
            singles_played=self._singles[player_id],
            last_played_at=self.last_played_at(player_id),
            partners=self.partners_of(player_id),
            opponents=self.opponents_of(player_id),
        )

    def records(self) -> List[ParticipationRecord]:
        """Snapshots for every player, in roster order."""
        return [self.record_for(pid) for pid in self._players]

    def snapshot(self) -> Dict[str, Any]:
        """Comparable copy of the complete ledger state."""
        return {
            "doubles": dict(self._doubles),
            "singles": dict(self._singles),
            "played": {pid: tuple(h) for pid, h in self._played.items()},
            "teammates": dict(self._teammates),
            "opponents": dict(self._opponents),
        }

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def __len__(self) -> int:
        return len(self._players)
