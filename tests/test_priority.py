import pytest

from courtpairing.constants import UNPLAYED_PRIORITY
from courtpairing.models import AssignmentOptions, Player
from courtpairing.pairing.priority import PriorityCalculator

START = 1_735_722_000_000
MINUTE = 60_000


def test_unplayed_player_comes_first():
    calc = PriorityCalculator(now=START + 30 * MINUTE, practice_start_time=START)
    player = Player(id="a", name="a", games_played=0, activated_at=START)
    assert calc.score(player) == UNPLAYED_PRIORITY


def test_duration_score_divides_by_minutes_present():
    calc = PriorityCalculator(now=START + 60 * MINUTE, practice_start_time=START)
    player = Player(id="a", name="a", games_played=3, activated_at=START)
    assert calc.score(player) == pytest.approx(3 / 60)


def test_duration_score_floors_short_stays():
    calc = PriorityCalculator(now=START + 60 * MINUTE, practice_start_time=START)
    player = Player(
        id="a", name="a", games_played=3, activated_at=START + 58 * MINUTE
    )
    assert calc.score(player) == pytest.approx(3 / 5)


def test_duration_anchor_is_the_later_of_activation_and_session_start():
    calc = PriorityCalculator(now=START + 10 * MINUTE, practice_start_time=START)
    early_bird = Player(
        id="a", name="a", games_played=2, activated_at=START - 30 * MINUTE
    )
    assert calc.minutes_present(early_bird) == pytest.approx(10)
    assert calc.score(early_bird) == pytest.approx(0.2)


def test_no_anchor_uses_the_floor():
    calc = PriorityCalculator(now=START)
    assert calc.score(Player(id="a", name="a", games_played=1)) == pytest.approx(0.2)


def test_count_mode():
    calc = PriorityCalculator(now=START, use_stay_duration=False)
    assert calc.score(Player(id="a", name="a", games_played=5)) == pytest.approx(2.0)
    assert calc.one_game_delta == pytest.approx(0.4)


def test_one_game_delta_in_duration_mode():
    assert PriorityCalculator(
        now=START + 20 * MINUTE, practice_start_time=START
    ).one_game_delta == pytest.approx(1 / 20)
    assert PriorityCalculator(now=START).one_game_delta == pytest.approx(1 / 5)


def test_sort_is_stable():
    calc = PriorityCalculator(now=START, use_stay_duration=False)
    players = [
        Player(id="b", name="b", games_played=2),
        Player(id="a", name="a", games_played=1),
        Player(id="c", name="c", games_played=2),
        Player(id="d", name="d", games_played=0),
    ]
    assert [p.id for p in calc.sort(players)] == ["d", "a", "b", "c"]


def test_from_options():
    options = AssignmentOptions(
        now=START + 5 * MINUTE,
        practice_start_time=START,
        use_stay_duration_priority=False,
    )
    calc = PriorityCalculator.from_options(options)
    assert calc.now == START + 5 * MINUTE
    assert calc.practice_start_time == START
    assert not calc.use_stay_duration
