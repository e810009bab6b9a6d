import random

from conftest import make_match, make_players, sequential_ids
from courtpairing.models import ParticipationLedger
from courtpairing.pairing import (
    count_shared_partnerships,
    create_rotation_round,
    find_best_arrangement,
    select_least_played,
)


def test_select_least_played_keeps_order_on_ties():
    players = make_players("A", "B", "C", "D", "E", "F")
    ledger = ParticipationLedger(players)
    ledger.record(make_match(players[:4]))

    assert [p.id for p in select_least_played(players, ledger, 4)] == [
        "e",
        "f",
        "a",
        "b",
    ]


def test_count_shared_partnerships(four_players):
    a, b, c, d = four_players
    ledger = ParticipationLedger(four_players)
    ledger.record(make_match([a, b, c, d]))

    assert count_shared_partnerships([a, b, c, d], ledger) == 2
    assert count_shared_partnerships([a, c, b, d], ledger) == 0
    assert count_shared_partnerships([a, b, d, c], ledger) == 2
    assert count_shared_partnerships([a, c, d, b], ledger) == 0


def test_local_search_finds_zero_violation_arrangement(four_players):
    a, b, c, d = four_players
    ledger = ParticipationLedger(four_players)
    ledger.record(make_match([a, b, c, d]))

    for seed in range(20):
        arrangement, violations = find_best_arrangement(
            four_players, ledger, random.Random(seed), max_trials=100
        )
        assert violations == 0
        assert count_shared_partnerships(arrangement, ledger) == 0
        assert sorted(p.id for p in arrangement) == ["a", "b", "c", "d"]


def test_local_search_reports_unavoidable_violations():
    players = make_players("A", "B", "C", "D")
    a, b, c, d = players
    ledger = ParticipationLedger(players)
    # every possible partnership has happened
    ledger.record(make_match([a, b, c, d], match_id="m1"))
    ledger.record(make_match([a, c, b, d], match_id="m2"))
    ledger.record(make_match([a, d, b, c], match_id="m3"))

    _, violations = find_best_arrangement(players, ledger, random.Random(1))
    assert violations == 2


def test_rotation_round_fills_courts_without_double_booking(eight_players):
    ledger = ParticipationLedger(eight_players)
    matches = create_rotation_round(
        eight_players, 2, ledger, random.Random(7), id_factory=sequential_ids()
    )

    assert [m.court for m in matches] == [1, 2]
    assert [m.id for m in matches] == ["m1", "m2"]
    ids = [pid for m in matches for pid in m.player_ids]
    assert sorted(ids) == sorted(p.id for p in eight_players)
    assert all(m.side in ("left", "right") for m in matches)


def test_rotation_round_partial_and_empty():
    players = make_players("A", "B", "C", "D", "E", "F")
    ledger = ParticipationLedger(players)

    partial = create_rotation_round(players, 3, ledger, random.Random(0))
    assert len(partial) == 1
    assert len(partial[0].players) == 4

    assert create_rotation_round(players[:3], 1, ledger, random.Random(0)) == []


def test_rotation_round_prefers_least_played():
    players = make_players("A", "B", "C", "D", "E", "F")
    ledger = ParticipationLedger(players)
    ledger.record(make_match(players[:4]))

    (match,) = create_rotation_round(players, 1, ledger, random.Random(3))
    assert {"e", "f"} <= set(match.player_ids)


def test_rotation_round_does_not_touch_ledger(eight_players):
    ledger = ParticipationLedger(eight_players)
    before = ledger.snapshot()
    create_rotation_round(eight_players, 2, ledger, random.Random(5))
    assert ledger.snapshot() == before
