"""Session orchestration: scheduling rounds, building sessions and advancing them."""

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

from courtpairing.controllers.session.round_advancer import RoundAdvancer
from courtpairing.controllers.session.round_scheduler import RoundScheduler, next_round
from courtpairing.controllers.session.session_builder import (
    SessionBuilder,
    build_session,
)

__all__ = [
    "RoundScheduler",
    "next_round",
    "SessionBuilder",
    "build_session",
    "RoundAdvancer",
]
