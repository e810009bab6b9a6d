"""A player on the session roster."""

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
from typing import Any, Dict, Optional

from courtpairing.type_hints import IdFactory
from courtpairing.utils import generate_id


@dataclass(frozen=True, slots=True)
class Player:
    """
    A roster entry.

    Players are created once, when they are added to the roster, and are
    never modified afterwards. All participation state (matches played,
    partners, opponents) lives in the
    :class:`~courtpairing.models.participation_ledger.ParticipationLedger`
    of the session, not on the player.

    Attributes
    ----------
    id : str
        Opaque unique identifier.
    name : str
        Display name.
    """

    id: str
    name: str

    @classmethod
    def create(cls, name: str, id_factory: Optional[IdFactory] = None) -> "Player":
        """Create a player with a freshly generated id."""
        new_id = id_factory() if id_factory else generate_id("player")
        return cls(id=new_id, name=name)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary."""
        return cls(id=str(data["id"]), name=data["name"])

    def __str__(self) -> str:
        return self.name
