"""Fairness metrics for a played-out session."""

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

import statistics
from dataclasses import dataclass, field
from itertools import combinations
from typing import Dict, List, Sequence

from courtpairing.models import ParticipationLedger, Player
from courtpairing.type_hints import Round


@dataclass
class FairnessReport:
    """Statistical summary of how evenly a session spread the play."""

    rounds_played: int = 0
    total_matches: int = 0

    # Matches played per player
    matches_played: Dict[str, int] = field(default_factory=dict)
    sit_outs: Dict[str, int] = field(default_factory=dict)
    min_played: int = 0
    max_played: int = 0
    mean_played: float = 0.0
    stddev_played: float = 0.0

    # Pair variety
    distinct_partnerships: int = 0
    repeated_partnerships: int = 0
    max_pair_frequency: int = 0

    # Should always be zero
    double_bookings: int = 0

    @property
    def play_spread(self) -> int:
        return self.max_played - self.min_played

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "rounds_played": self.rounds_played,
            "total_matches": self.total_matches,
            "matches_played": self.matches_played,
            "sit_outs": self.sit_outs,
            "min_played": self.min_played,
            "max_played": self.max_played,
            "mean_played": self.mean_played,
            "stddev_played": self.stddev_played,
            "play_spread": self.play_spread,
            "distinct_partnerships": self.distinct_partnerships,
            "repeated_partnerships": self.repeated_partnerships,
            "max_pair_frequency": self.max_pair_frequency,
            "double_bookings": self.double_bookings,
        }

    def format_text(self) -> str:
        lines = [
            f"Rounds played:          {self.rounds_played}",
            f"Matches played:         {self.total_matches}",
            f"Matches per player:     min {self.min_played}, max {self.max_played}, "
            f"mean {self.mean_played:.2f}, stddev {self.stddev_played:.2f}",
            f"Distinct partnerships:  {self.distinct_partnerships}",
            f"Repeated partnerships:  {self.repeated_partnerships}",
            f"Max pair frequency:     {self.max_pair_frequency}",
            f"Double bookings:        {self.double_bookings}",
            "",
            "Player            Played  Sat out",
        ]
        for name, played in self.matches_played.items():
            lines.append(f"{name:<16}  {played:>6}  {self.sit_outs[name]:>7}")
        return "\n".join(lines)


def replay_rounds(
    players: Sequence[Player], rounds: Sequence[Round]
) -> ParticipationLedger:
    """Record every match of ``rounds`` into a fresh ledger."""
    ledger = ParticipationLedger(players)
    for round_matches in rounds:
        for match in round_matches:
            ledger.record(match)
    return ledger


def analyze_rounds(
    players: Sequence[Player], rounds: Sequence[Round]
) -> FairnessReport:
    """Replay ``rounds`` into a fresh ledger and summarize it."""
    ledger = replay_rounds(players, rounds)
    report = FairnessReport(rounds_played=len(rounds))

    for round_matches in rounds:
        seen = set()
        for match in round_matches:
            for player in match.players:
                if player.id in seen:
                    report.double_bookings += 1
                seen.add(player.id)
            report.total_matches += 1

    played: List[int] = []
    for record in ledger.records():
        report.matches_played[record.player.name] = record.total_matches
        report.sit_outs[record.player.name] = len(rounds) - record.total_matches
        played.append(record.total_matches)

    if played:
        report.min_played = min(played)
        report.max_played = max(played)
        report.mean_played = statistics.mean(played)
        report.stddev_played = statistics.pstdev(played)

    for a, b in combinations(players, 2):
        teammates = ledger.teammate_count(a.id, b.id)
        if teammates:
            report.distinct_partnerships += 1
            report.repeated_partnerships += teammates - 1
        report.max_pair_frequency = max(
            report.max_pair_frequency, ledger.pair_frequency(a.id, b.id)
        )
    return report
