"""Fixed court scheduling.

A lookup table for 4 to 8 players on one or two courts, mirroring how club
sessions are usually run: a doubles match for the four least-played players,
leftover players absorbed by a singles or 2-vs-1 match on the second court,
and a scored pairing optimization when eight players fill two doubles
courts.
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

import random
from typing import List, Optional, Sequence, Tuple

from courtpairing.constants import DEFAULT_SIDE, DOUBLES_SIZE, MAX_FIXED_PLAYERS
from courtpairing.models.match import Match
from courtpairing.models.participation_ledger import ParticipationLedger
from courtpairing.models.player import Player
from courtpairing.pairing.pair_scorer import PairScorer
from courtpairing.type_hints import IdFactory, PlayerPair
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)

# Ways to split four pairs P1..P4 into two matches, in evaluation order
PAIR_GROUPINGS = (
    ((0, 1), (2, 3)),
    ((0, 2), (1, 3)),
    ((0, 3), (1, 2)),
)


def rank_by_total(players: Sequence[Player], ledger: ParticipationLedger) -> List[Player]:
    """Ascending total matches; ties keep roster order."""
    return sorted(players, key=lambda p: ledger.total_matches(p.id))


def rank_by_singles(
    players: Sequence[Player], ledger: ParticipationLedger
) -> List[Player]:
    """Ascending singles played; ties keep roster order."""
    return sorted(players, key=lambda p: ledger.singles_played(p.id))


def choose_disjoint_pairs(
    players: Sequence[Player],
    ledger: ParticipationLedger,
    rng: random.Random,
    scorer: PairScorer,
) -> List[PlayerPair]:
    """Pick ``len(players) // 2`` pairs sharing no player, lowest scores first.

    Greedy first-fit over the pairs ranked by ``scorer``. Players the
    ranking leaves unpaired are shuffled and paired in order.
    """
    needed = len(players) // 2
    chosen: List[PlayerPair] = []
    used = set()

    for _, (a, b) in scorer.rank_pairs(players, ledger):
        if a.id in used or b.id in used:
            continue
        chosen.append((a, b))
        used.update((a.id, b.id))
        if len(chosen) == needed:
            return chosen

    logger.warning(
        "Only %s disjoint pair(s) found greedily, pairing the rest at random",
        len(chosen),
    )
    unused = [p for p in players if p.id not in used]
    rng.shuffle(unused)
    for i in range(0, (needed - len(chosen)) * 2, 2):
        chosen.append((unused[i], unused[i + 1]))
    return chosen


def best_grouping(
    pairs: Sequence[PlayerPair], ledger: ParticipationLedger, scorer: PairScorer
) -> Tuple[Tuple[PlayerPair, PlayerPair], Tuple[PlayerPair, PlayerPair]]:
    """Split four pairs into two matches with the lowest opponent score.

    The cost of a grouping is the sum, over both matches, of the scores of
    every player of one pair against every player of the other pair. Ties
    go to the earlier grouping in :data:`PAIR_GROUPINGS`.
    """
    best = None
    best_cost = None
    for (w, x), (y, z) in PAIR_GROUPINGS:
        cost = scorer.cross_score(pairs[w], pairs[x], ledger) + scorer.cross_score(
            pairs[y], pairs[z], ledger
        )
        if best_cost is None or cost < best_cost:
            best_cost = cost
            best = ((pairs[w], pairs[x]), (pairs[y], pairs[z]))
    logger.debug("Chose pair grouping with cost %s", best_cost)
    return best  # type: ignore[return-value]


def create_eight_player_round(
    players: Sequence[Player],
    number_of_courts: int,
    ledger: ParticipationLedger,
    rng: random.Random,
    scorer: PairScorer,
    id_factory: Optional[IdFactory] = None,
) -> List[Match]:
    """Two doubles matches for exactly eight players."""
    pairs = choose_disjoint_pairs(players, ledger, rng, scorer)
    groups = best_grouping(pairs, ledger, scorer)
    second_court = 2 if number_of_courts >= 2 else 1
    matches = []
    for court, (pair_a, pair_b) in zip((1, second_court), groups):
        matches.append(
            Match.create(
                pair_a + pair_b, court=court, side=DEFAULT_SIDE, id_factory=id_factory
            )
        )
    return matches


def create_fixed_round(
    players: Sequence[Player],
    number_of_courts: int,
    ledger: ParticipationLedger,
    rng: random.Random,
    scorer: Optional[PairScorer] = None,
    id_factory: Optional[IdFactory] = None,
) -> List[Match]:
    """Build one round from the fixed court table.

    ===  =====  ==============================================================
    N    courts policy
    ===  =====  ==============================================================
    4    any    one doubles match
    5    any    four least-played play doubles, one sits out
    6    1      four least-played play doubles, two sit out
    6    2      four least-played play doubles, the other two play singles
    7    1      four least-played play doubles, three sit out
    7    2      four least-played play doubles, the other three play 2-vs-1
    8    any    pairing optimization over two doubles matches
    ===  =====  ==============================================================

    Fewer than four players give an empty round; more than eight are cut to
    the eight least-played.
    """
    scorer = scorer or PairScorer()
    count = len(players)

    if count < DOUBLES_SIZE:
        logger.warning("Only %s players available, no match can be formed", count)
        return []

    if count >= MAX_FIXED_PLAYERS:
        if count > MAX_FIXED_PLAYERS:
            logger.info(
                "%s players available, scheduling the %s least played",
                count,
                MAX_FIXED_PLAYERS,
            )
        group = rank_by_total(players, ledger)[:MAX_FIXED_PLAYERS]
        return create_eight_player_round(
            group, number_of_courts, ledger, rng, scorer, id_factory
        )

    ranked = rank_by_total(players, ledger)
    doubles_players, rest = ranked[:DOUBLES_SIZE], ranked[DOUBLES_SIZE:]
    matches = [
        Match.create(doubles_players, court=1, side=DEFAULT_SIDE, id_factory=id_factory)
    ]

    if number_of_courts >= 2 and len(rest) >= 2:
        if len(rest) == 3:
            rest = rank_by_singles(rest, ledger)
        matches.append(
            Match.create(rest, court=2, side=DEFAULT_SIDE, id_factory=id_factory)
        )
    elif rest:
        logger.debug("Sitting out: %s", ", ".join(p.name for p in rest))

    return matches
