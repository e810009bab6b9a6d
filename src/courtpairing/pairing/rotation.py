"""Rotation scheduling.

Works for any roster size and court count: the least-played players are
picked for the round, spread over the courts at random, and each court's
four players are split into sides by a bounded randomized search that
avoids repeating earlier partnerships.
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
from itertools import combinations
from typing import List, Optional, Sequence, Tuple

from courtpairing.constants import (
    DOUBLES_SIZE,
    MAX_ARRANGEMENT_TRIALS,
    SIDE_LEFT,
    SIDE_RIGHT,
)
from courtpairing.models.match import Match
from courtpairing.models.participation_ledger import ParticipationLedger
from courtpairing.models.player import Player
from courtpairing.type_hints import IdFactory, Side
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


def select_least_played(
    players: Sequence[Player], ledger: ParticipationLedger, count: int
) -> List[Player]:
    """Pick ``count`` players with the fewest matches.

    Ties keep the order of ``players`` (``sorted`` is stable).
    """
    return sorted(players, key=lambda p: ledger.total_matches(p.id))[:count]


def count_shared_partnerships(
    arrangement: Sequence[Player], ledger: ParticipationLedger
) -> int:
    """Count same-side pairs in ``arrangement`` who have partnered before."""
    mid = len(arrangement) // 2
    violations = 0
    for side in (arrangement[:mid], arrangement[mid:]):
        for a, b in combinations(side, 2):
            if b.id in ledger.partners_of(a.id):
                violations += 1
    return violations


def find_best_arrangement(
    players: Sequence[Player],
    ledger: ParticipationLedger,
    rng: random.Random,
    max_trials: int = MAX_ARRANGEMENT_TRIALS,
) -> Tuple[List[Player], int]:
    """Search for a split into two sides that repeats no partnership.

    Shuffles the players up to ``max_trials`` times, keeping the first
    arrangement with the fewest shared partnerships, and stops as soon as
    an arrangement without any is found.

    Returns
    -------
    tuple
        ``(arrangement, violations)`` where the first half of
        ``arrangement`` is side A.
    """
    best = list(players)
    best_violations: Optional[int] = None

    for trial in range(1, max_trials + 1):
        shuffled = list(players)
        rng.shuffle(shuffled)
        violations = count_shared_partnerships(shuffled, ledger)

        if best_violations is None or violations < best_violations:
            best, best_violations = shuffled, violations
            if violations == 0:
                logger.debug("Found arrangement without repeats after %s trials", trial)
                break

    if best_violations is None:
        best_violations = count_shared_partnerships(best, ledger)
    elif best_violations:
        logger.debug(
            "Best arrangement after %s trials still repeats %s partnership(s)",
            max_trials,
            best_violations,
        )
    return best, best_violations


def _random_side(rng: random.Random) -> Side:
    return SIDE_LEFT if rng.random() < 0.5 else SIDE_RIGHT


def create_rotation_round(
    players: Sequence[Player],
    number_of_courts: int,
    ledger: ParticipationLedger,
    rng: random.Random,
    id_factory: Optional[IdFactory] = None,
    max_trials: int = MAX_ARRANGEMENT_TRIALS,
) -> List[Match]:
    """Build one round of doubles matches.

    Fills as many courts as the available players allow; returns an empty
    list when not even one court can be filled.
    """
    courts = min(number_of_courts, len(players) // DOUBLES_SIZE)
    if courts < number_of_courts:
        logger.warning(
            "%s players can fill only %s of %s court(s)",
            len(players),
            courts,
            number_of_courts,
        )
    if courts == 0:
        return []

    selected = select_least_played(players, ledger, courts * DOUBLES_SIZE)
    rng.shuffle(selected)

    matches: List[Match] = []
    for court in range(1, courts + 1):
        court_players = selected[(court - 1) * DOUBLES_SIZE : court * DOUBLES_SIZE]
        arrangement, _ = find_best_arrangement(court_players, ledger, rng, max_trials)
        matches.append(
            Match.create(
                arrangement, court=court, side=_random_side(rng), id_factory=id_factory
            )
        )
    return matches
