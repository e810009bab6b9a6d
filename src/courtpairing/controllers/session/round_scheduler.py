"""Round scheduling for sessions.

This module turns a pool of available players and a court count into the
matches of one round, delegating to the configured scheduling system.
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
from typing import List, Optional, Sequence

from courtpairing.constants import (
    DEFAULT_SCHEDULING_SYSTEM,
    MAX_ARRANGEMENT_TRIALS,
    SCHEDULING_ROTATION,
    SCHEDULING_SYSTEMS,
)
from courtpairing.exceptions import (
    DuplicatePlayerException,
    InvalidConfigurationException,
)
from courtpairing.models import Match, ParticipationLedger, Player, SessionConfig
from courtpairing.pairing import PairScorer, create_fixed_round, create_rotation_round
from courtpairing.type_hints import IdFactory, SchedulingSystem
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundScheduler:
    """Produces the next round of matches.

    The scheduler only reads the ledger; folding completed matches into it
    is the job of :class:`~courtpairing.controllers.session.RoundAdvancer`.

    Parameters
    ----------
    scheduling_system : str
        ``"rotation"`` or ``"fixed"``.
    rng : random.Random, optional
        Random source. Takes precedence over ``seed``.
    seed : int, optional
        Seed for a private ``random.Random`` when ``rng`` is not given.
    id_factory : callable, optional
        Returns ids for new matches.
    max_arrangement_trials : int
        Bound on the rotation system's partner search per court.
    pair_scorer : PairScorer, optional
        Fairness score used by the fixed system.
    """

    def __init__(
        self,
        scheduling_system: SchedulingSystem = DEFAULT_SCHEDULING_SYSTEM,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        id_factory: Optional[IdFactory] = None,
        max_arrangement_trials: int = MAX_ARRANGEMENT_TRIALS,
        pair_scorer: Optional[PairScorer] = None,
    ):
        if scheduling_system not in SCHEDULING_SYSTEMS:
            raise InvalidConfigurationException(
                f"Scheduling system '{scheduling_system}' is not implemented"
            )
        self.scheduling_system = scheduling_system
        self.rng = rng if rng is not None else random.Random(seed)
        self.id_factory = id_factory
        self.max_arrangement_trials = max_arrangement_trials
        self.pair_scorer = pair_scorer or PairScorer()

    @classmethod
    def from_config(
        cls, config: SessionConfig, id_factory: Optional[IdFactory] = None
    ) -> "RoundScheduler":
        """Build a scheduler from session settings."""
        return cls(
            scheduling_system=config.scheduling_system,
            seed=config.seed,
            id_factory=id_factory,
            max_arrangement_trials=config.max_arrangement_trials,
            pair_scorer=PairScorer(config.repeat_pair_weight),
        )

    def next_round(
        self,
        available_players: Sequence[Player],
        number_of_courts: int,
        ledger: ParticipationLedger,
    ) -> List[Match]:
        """Generate the matches of the next round.

        Args:
            available_players: Players who may be scheduled this round
            number_of_courts: Courts available
            ledger: Participation history of the session

        Returns:
            The round's matches, one per court. May be shorter than
            ``number_of_courts`` or empty when there are too few players;
            that is not an error.

        Raises:
            InvalidConfigurationException: If ``number_of_courts`` is below 1
            DuplicatePlayerException: If a player is listed twice
        """
        if number_of_courts < 1:
            raise InvalidConfigurationException(
                f"Number of courts must be at least 1, got {number_of_courts}"
            )
        ids = [p.id for p in available_players]
        if len(set(ids)) != len(ids):
            raise DuplicatePlayerException(
                "The same player is listed more than once for this round"
            )

        logger.info(
            f"Scheduling round with {len(available_players)} players on "
            f"{number_of_courts} court(s) using {self.scheduling_system}"
        )

        if self.scheduling_system == SCHEDULING_ROTATION:
            matches = create_rotation_round(
                available_players,
                number_of_courts,
                ledger,
                self.rng,
                id_factory=self.id_factory,
                max_trials=self.max_arrangement_trials,
            )
        else:
            matches = create_fixed_round(
                available_players,
                number_of_courts,
                ledger,
                self.rng,
                scorer=self.pair_scorer,
                id_factory=self.id_factory,
            )

        if not matches:
            logger.warning("Round cannot proceed: not enough players for one court")
        for match in matches:
            logger.debug(str(match))
        return matches


def next_round(
    available_players: Sequence[Player],
    number_of_courts: int,
    ledger: ParticipationLedger,
    rng_seed: Optional[int] = None,
    scheduling_system: SchedulingSystem = DEFAULT_SCHEDULING_SYSTEM,
) -> List[Match]:
    """One-shot scheduling with a freshly seeded scheduler."""
    scheduler = RoundScheduler(scheduling_system=scheduling_system, seed=rng_seed)
    return scheduler.next_round(available_players, number_of_courts, ledger)
