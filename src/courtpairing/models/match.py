"""Match data class."""

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
from itertools import combinations, product
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from courtpairing.constants import DOUBLES_SIZE, SIDES, VALID_MATCH_SIZES
from courtpairing.models.player import Player
from courtpairing.type_hints import IdFactory, Side
from courtpairing.utils import generate_id


@dataclass(frozen=True)
class Match:
    """One match on one court.

    The first half of ``players`` is team A and the second half team B. For
    a three player match the first player alone is team A (the minority
    side) and the other two are team B.

    Attributes
    ----------
    id : str
        Unique identifier.
    players : tuple of Player
        2, 3 or 4 distinct players.
    court : int
        Court number, starting at 1.
    side : str
        ``"left"`` or ``"right"``.
    """

    id: str
    players: Tuple[Player, ...]
    court: int
    side: Side

    def __post_init__(self) -> None:
        if not isinstance(self.players, tuple):
            object.__setattr__(self, "players", tuple(self.players))
        if len(self.players) not in VALID_MATCH_SIZES:
            raise ValueError(
                f"A match needs 2, 3 or 4 players, got {len(self.players)}"
            )
        if len({p.id for p in self.players}) != len(self.players):
            raise ValueError("A match cannot contain the same player twice")
        if self.court < 1:
            raise ValueError(f"Court numbers start at 1, got {self.court}")
        if self.side not in SIDES:
            raise ValueError(f"Side must be one of {SIDES}, got {self.side!r}")

    @classmethod
    def create(
        cls,
        players: Sequence[Player],
        court: int,
        side: Side,
        id_factory: Optional[IdFactory] = None,
    ) -> "Match":
        """Create a match with a freshly generated id."""
        new_id = id_factory() if id_factory else generate_id("match")
        return cls(id=new_id, players=tuple(players), court=court, side=side)

    @property
    def team_a(self) -> Tuple[Player, ...]:
        return self.players[: len(self.players) // 2]

    @property
    def team_b(self) -> Tuple[Player, ...]:
        return self.players[len(self.players) // 2 :]

    @property
    def is_doubles(self) -> bool:
        return len(self.players) == DOUBLES_SIZE

    @property
    def player_ids(self) -> List[str]:
        return [p.id for p in self.players]

    def teammate_pairs(self) -> Iterator[Tuple[Player, Player]]:
        """Yield every pair of players on the same side."""
        for team in (self.team_a, self.team_b):
            yield from combinations(team, 2)

    def opponent_pairs(self) -> Iterator[Tuple[Player, Player]]:
        """Yield every (team A player, team B player) pair."""
        yield from product(self.team_a, self.team_b)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "players": [p.to_dict() for p in self.players],
            "court": self.court,
            "side": self.side,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            id=data["id"],
            players=tuple(Player.from_dict(p) for p in data["players"]),
            court=int(data["court"]),
            side=data["side"],
        )

    def __str__(self) -> str:
        team_a = " & ".join(p.name for p in self.team_a)
        team_b = " & ".join(p.name for p in self.team_b)
        return f"Court {self.court} ({self.side}): {team_a} vs {team_b}"
