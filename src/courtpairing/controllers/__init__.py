"""Controllers for rosters, sessions and match tracking."""

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

from courtpairing.controllers.matches_controller import (
    MatchesController,
    MatchState,
    PlayerStats,
)
from courtpairing.controllers.roster import Roster
from courtpairing.controllers.session import (
    RoundAdvancer,
    RoundScheduler,
    SessionBuilder,
    build_session,
    next_round,
)

__all__ = [
    "Roster",
    "MatchesController",
    "MatchState",
    "PlayerStats",
    "RoundScheduler",
    "next_round",
    "SessionBuilder",
    "build_session",
    "RoundAdvancer",
]
