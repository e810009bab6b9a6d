"""Type hints used in Court Pairing."""

from typing import Callable, FrozenSet, List, Literal, Tuple

from datetime import datetime

# Basically, left or right
Side = Literal["left", "right"]

SchedulingSystem = Literal["rotation", "fixed"]

# Two players who share a team or face each other
PlayerPair = Tuple["Player", "Player"]
# Unordered pair of player ids
PairKey = FrozenSet[str]
# One round of matches
Round = List["Match"]

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]

#  LocalWords:  PairKey IdFactory
