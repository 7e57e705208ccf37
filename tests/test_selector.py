import pytest

from courtpairing.models import Gender, Match, Player, Tier, Winner
from courtpairing.pairing.selector import (
    SelectionContext,
    combinations_of_four,
    find_best_four,
    select_best_four,
)


def _players(*ids, gender=None):
    return [Player(id=pid, name=pid, gender=gender) for pid in ids]


def _context(scores=None, history=(), tiers=None, total_court_count=2, **kwargs):
    scores = scores or {}
    return SelectionContext(
        match_history=list(history),
        tiers=tiers or {},
        total_court_count=total_court_count,
        priority_fn=lambda p: scores.get(p.id, 0.0),
        one_game_delta=0.2,
        **kwargs,
    )


def _match(team_a, team_b):
    return Match(
        id="m",
        court_id=1,
        team_a=tuple(team_a),
        team_b=tuple(team_b),
        score_a=21,
        score_b=12,
        winner=Winner.TEAM_A,
    )


def _ids(players):
    return [p.id for p in players]


def test_combinations_are_lazy_and_restartable():
    combos = combinations_of_four(_players("a", "b", "c", "d", "e", "f"))
    assert len(combos) == 15
    first_pass = list(combos)
    assert list(combos) == first_pass
    assert _ids(first_pass[0]) == ["a", "b", "c", "d"]


def test_find_best_four_needs_four_candidates():
    assert find_best_four(_players("a", "b", "c"), _context()) is None


def test_lowest_total_priority_wins():
    players = _players("a", "b", "c", "d", "e", "f")
    scores = {"a": 5, "b": 1, "c": 4, "d": 0, "e": 2, "f": 3}
    best = find_best_four(players, _context(scores))
    assert sorted(_ids(best)) == ["b", "d", "e", "f"]


def test_recent_repeat_is_avoided_and_first_tie_wins():
    players = _players("a", "b", "c", "d", "e", "f")
    scores = {"a": 0, "b": 0, "c": 0, "d": 1, "e": 2, "f": 3}
    history = [_match(["a", "b"], ["c", "x"])]
    best = find_best_four(players, _context(scores, history))
    assert _ids(best) == ["a", "b", "d", "e"]


def test_fallback_takes_the_most_deserving_four():
    players = _players("a", "b", "c", "d", "e")
    scores = {"a": 4, "b": 3, "c": 2, "d": 1, "e": 0}
    history = [_match(["a", "b"], ["c", "d"])]
    context = _context(scores, history)
    assert find_best_four(players, context) is None
    assert _ids(select_best_four(players, context)) == ["e", "d", "c", "b"]


def test_small_pool_is_returned_as_is():
    players = _players("a", "b", "c", "d")
    history = [_match(["a", "b"], ["c", "d"])]
    assert select_best_four(players, _context(history=history)) == players


def test_isolated_extreme_only_checked_with_three_courts():
    players = _players("u1", "l1", "l2", "l3", "m1")
    tiers = {
        Tier.UPPER: {"u1"},
        Tier.MIDDLE: {"m1"},
        Tier.LOWER: {"l1", "l2", "l3"},
    }
    scores = {"m1": 10}
    assert _ids(find_best_four(players, _context(scores, tiers=tiers))) == [
        "u1",
        "l1",
        "l2",
        "l3",
    ]
    best = find_best_four(players, _context(scores, tiers=tiers, total_court_count=3))
    assert "m1" in _ids(best)


def test_gender_balance_breaks_priority_ties():
    players = _players("m1", "m2", "m3", gender=Gender.MALE) + _players(
        "f1", "f2", gender=Gender.FEMALE
    )
    assert _ids(find_best_four(players, _context())) == ["m1", "m2", "f1", "f2"]


def test_court_fit_penalty_keeps_home_players():
    players = _players("a", "b", "c", "d", "e")
    context = _context(court_fit_penalty=lambda p: 1.0 if p.id == "a" else 0.0)
    assert _ids(find_best_four(players, context)) == ["b", "c", "d", "e"]


def test_context_counts_past_groups_once():
    history = [_match(["A", "B"], ["C", "D"]), _match(["B", "D"], ["A", "C"])]
    context = _context(history=history)
    assert context.combo_counts[frozenset("ABCD")] == 2
    # A third meeting of A-D costs three game units on top of priority
    assert context.cost(_players("A", "B", "C", "D")) == pytest.approx(0.6)
    assert context.cost(_players("A", "B", "C", "E")) == 0.0
