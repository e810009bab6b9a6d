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

# --- Constants ---

# Match sizes
DOUBLES_SIZE = 4
SINGLES_SIZE = 2
TWO_VS_ONE_SIZE = 3
VALID_MATCH_SIZES = (SINGLES_SIZE, TWO_VS_ONE_SIZE, DOUBLES_SIZE)

# Roster limits
MIN_PLAYERS = 4
# The fixed-court table only covers this many players and courts
MAX_FIXED_PLAYERS = 8
MAX_FIXED_COURTS = 2

# Court sides
SIDE_LEFT = "left"
SIDE_RIGHT = "right"
SIDES = (SIDE_LEFT, SIDE_RIGHT)
DEFAULT_SIDE = SIDE_LEFT

# Fairness scoring
REPEAT_PAIR_WEIGHT = 10

# Local search bound for arranging a court
MAX_ARRANGEMENT_TRIALS = 100

# Scheduling systems
SCHEDULING_ROTATION = "rotation"  # least-played selection + randomized search
SCHEDULING_FIXED = "fixed"  # case table for 4-8 players on 1-2 courts
SCHEDULING_SYSTEMS = (SCHEDULING_ROTATION, SCHEDULING_FIXED)
DEFAULT_SCHEDULING_SYSTEM = SCHEDULING_ROTATION

SCHEDULING_SYSTEM_NAMES = {
    SCHEDULING_ROTATION: "Rotation (any roster size)",
    SCHEDULING_FIXED: "Fixed courts (4-8 players)",
}

DEFAULT_NUMBER_OF_COURTS = 1

# Quick-add names offered on the player setup screen
COMMON_PLAYER_NAMES = [
    "Ray",
    "Selin",
    "Long",
    "Aayush",
    "Ankita",
    "Rajat",
    "Vivaan",
    "Michael",
]

# Seconds an error message stays on the setup screen
ERROR_DISPLAY_SECONDS = 5
