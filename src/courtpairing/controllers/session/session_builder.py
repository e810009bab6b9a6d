"""Session creation: validate the roster and schedule the first round."""

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

from typing import Optional, Sequence

from courtpairing.constants import DEFAULT_SCHEDULING_SYSTEM
from courtpairing.controllers.session.round_scheduler import RoundScheduler
from courtpairing.models import ParticipationLedger, Player, Session
from courtpairing.type_hints import Clock
from courtpairing.utils import setup_logger
from courtpairing.utils.validation import validate_roster_strict

logger = setup_logger(__name__)


class SessionBuilder:
    """Builds sessions with a given scheduler.

    Parameters
    ----------
    scheduler : RoundScheduler, optional
        Scheduler for round 1. A default rotation scheduler is created if
        omitted.
    clock : callable, optional
        Clock handed to each new session's ledger.
    """

    def __init__(
        self, scheduler: Optional[RoundScheduler] = None, clock: Optional[Clock] = None
    ):
        self.scheduler = scheduler or RoundScheduler()
        self.clock = clock

    def build_session(self, players: Sequence[Player], number_of_courts: int) -> Session:
        """Create a session and schedule its first round.

        Raises:
            InvalidRosterException: If the roster has fewer than four
                players, repeats a player, or exceeds what the fixed court
                table supports.
        """
        validate_roster_strict(
            players, number_of_courts, self.scheduler.scheduling_system
        )

        ledger = ParticipationLedger(players, clock=self.clock)
        first_round = self.scheduler.next_round(players, number_of_courts, ledger)
        session = Session(
            players=tuple(players),
            number_of_courts=number_of_courts,
            matches=list(first_round),
            ledger=ledger,
        )
        logger.info(
            f"Built session with {len(players)} players on {number_of_courts} "
            f"court(s); round 1 has {len(first_round)} match(es)"
        )
        return session


def build_session(
    players: Sequence[Player],
    number_of_courts: int,
    seed: Optional[int] = None,
    scheduling_system: str = DEFAULT_SCHEDULING_SYSTEM,
) -> Session:
    """Create a session with a freshly seeded scheduler."""
    scheduler = RoundScheduler(scheduling_system=scheduling_system, seed=seed)
    return SessionBuilder(scheduler).build_session(players, number_of_courts)
