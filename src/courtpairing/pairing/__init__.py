"""Scheduling systems and the fairness score they share."""

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

from courtpairing.pairing.fixed_courts import create_fixed_round
from courtpairing.pairing.pair_scorer import PairScorer, score
from courtpairing.pairing.rotation import (
    count_shared_partnerships,
    create_rotation_round,
    find_best_arrangement,
    select_least_played,
)

__all__ = [
    "PairScorer",
    "score",
    "create_fixed_round",
    "create_rotation_round",
    "find_best_arrangement",
    "count_shared_partnerships",
    "select_least_played",
]
