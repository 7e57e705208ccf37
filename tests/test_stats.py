from courtpairing.models import Match, Player, Winner
from courtpairing.session import StatsCalculator, calculate_player_stats


def _roster(*ids):
    return [Player(id=pid, name=pid.upper()) for pid in ids]


def test_stats_fold_over_history():
    history = [
        Match("m2", 1, ("a", "c"), ("b", "d"), 15, 21, Winner.TEAM_B),
        Match("m1", 1, ("a", "b"), ("c", "d"), 21, 17, Winner.TEAM_A),
    ]
    stats = {s.id: s for s in calculate_player_stats(_roster("a", "b", "c", "d"), history)}

    assert (stats["a"].games_played, stats["a"].wins, stats["a"].losses) == (2, 1, 1)
    assert stats["a"].points == 36
    assert (stats["b"].wins, stats["b"].losses, stats["b"].points) == (2, 0, 42)
    assert (stats["d"].wins, stats["d"].losses, stats["d"].points) == (1, 1, 38)
    assert stats["b"].win_rate == 1.0


def test_roster_order_and_idle_players():
    history = [Match("m1", 2, ("a", "ghost"), ("b", "other"), 21, 3, Winner.TEAM_A)]
    stats = calculate_player_stats(_roster("z", "b", "a"), history)
    assert [s.id for s in stats] == ["z", "b", "a"]
    assert stats[0].games_played == 0
    assert stats[0].win_rate == 0.0
    assert stats[0].name == "Z"


def test_calculator_accumulates_matches():
    calculator = StatsCalculator(_roster("a", "b"))
    calculator.add_match(Match("m1", 1, ("a", "x"), ("b", "y"), 21, 10, Winner.TEAM_A))
    stats = calculator.calculate([])
    assert stats[0].to_dict() == {
        "id": "a",
        "name": "A",
        "games_played": 1,
        "wins": 1,
        "losses": 0,
        "points": 21,
    }
