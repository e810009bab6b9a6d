import itertools
from datetime import datetime, timedelta

import pytest

from courtpairing.models import Match, Player


def make_players(*names):
    """Players whose ids are their lower-cased names."""
    return [Player(id=name.lower(), name=name) for name in names]


def make_match(players, match_id="m1", court=1, side="left"):
    return Match(id=match_id, players=tuple(players), court=court, side=side)


class StepClock:
    """Returns 18:00, 18:10, 18:20, ... on successive calls."""

    def __init__(self, step_minutes=10):
        self.current = datetime(2025, 3, 1, 17, 50)
        self.step = timedelta(minutes=step_minutes)

    def __call__(self):
        self.current += self.step
        return self.current


def sequential_ids(prefix="m"):
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


@pytest.fixture
def four_players():
    return make_players("A", "B", "C", "D")


@pytest.fixture
def eight_players():
    return make_players("A", "B", "C", "D", "E", "F", "G", "H")


@pytest.fixture
def clock():
    return StepClock()

