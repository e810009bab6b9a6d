"""Fairness score for putting two players on a court together."""

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

from itertools import combinations
from typing import List, Sequence, Tuple

from courtpairing.constants import REPEAT_PAIR_WEIGHT
from courtpairing.models.participation_ledger import ParticipationLedger
from courtpairing.models.player import Player
from courtpairing.type_hints import PlayerPair


def score(
    player_a: Player,
    player_b: Player,
    ledger: ParticipationLedger,
    repeat_weight: int = REPEAT_PAIR_WEIGHT,
) -> int:
    """
    Score how fair it is to put two players together. Lower is fairer.

    ``repeat_weight * pair_frequency + total_matches(a) + total_matches(b)``

    The pair frequency term dominates so that repeat pairings are avoided
    first; among equally fresh pairs, players who have played less come
    first. The same score serves for teammates and for opponents.
    """
    return (
        repeat_weight * ledger.pair_frequency(player_a.id, player_b.id)
        + ledger.total_matches(player_a.id)
        + ledger.total_matches(player_b.id)
    )


class PairScorer:
    """Callable wrapper around :func:`score` with a configurable weight."""

    def __init__(self, repeat_weight: int = REPEAT_PAIR_WEIGHT):
        self.repeat_weight = repeat_weight

    def score(
        self, player_a: Player, player_b: Player, ledger: ParticipationLedger
    ) -> int:
        return score(player_a, player_b, ledger, self.repeat_weight)

    __call__ = score

    def rank_pairs(
        self, players: Sequence[Player], ledger: ParticipationLedger
    ) -> List[Tuple[int, PlayerPair]]:
        """All unordered pairs with their scores, lowest first.

        The sort is stable, so equal scores keep the order in which
        ``itertools.combinations`` produces the pairs.
        """
        scored = [(self.score(a, b, ledger), (a, b)) for a, b in combinations(players, 2)]
        scored.sort(key=lambda item: item[0])
        return scored

    def cross_score(
        self,
        side_a: Sequence[Player],
        side_b: Sequence[Player],
        ledger: ParticipationLedger,
    ) -> int:
        """Sum of scores over every (side A player, side B player) pair."""
        return sum(self.score(a, b, ledger) for a in side_a for b in side_b)
