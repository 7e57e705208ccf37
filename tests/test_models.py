import time
from datetime import datetime, timezone

import pytest

from courtpairing.exceptions import (
    GenderValidationException,
    InvalidConfigurationException,
    InvalidPlayerDataException,
    RatingValidationException,
)
from courtpairing.models import (
    AssignmentOptions,
    CourtAssignment,
    Gender,
    Match,
    Player,
    Winner,
)
from courtpairing.models.session import to_epoch_ms
from courtpairing.utils.validation import (
    validate_gender,
    validate_gender_strict,
    validate_rating,
    validate_rating_strict,
)


def test_player_from_dict_normalizes_fields():
    player = Player.from_dict(
        {"id": "p1", "name": "Aiko", "rating": "1450", "gender": "female"}
    )
    assert player.rating == 1450
    assert player.gender is Gender.FEMALE
    assert player.is_rated
    assert player.is_active


def test_player_zero_rating_is_unrated():
    player = Player.from_dict({"id": "p1", "rating": 0})
    assert player.rating is None
    assert not player.is_rated
    assert player.name == "p1"


@pytest.mark.parametrize(
    "data",
    [
        {"name": "no id"},
        {"id": "p1", "rating": "strong"},
        {"id": "p1", "rating": -5},
        {"id": "p1", "rating": "inf"},
        {"id": "p1", "rating": "1e400"},
        {"id": "p1", "gender": "x"},
        {"id": "p1", "games_played": -1},
    ],
)
def test_player_from_dict_rejects_bad_records(data):
    with pytest.raises(InvalidPlayerDataException):
        Player.from_dict(data)


def test_player_round_trip_keeps_gender_tag():
    player = Player(id="p1", name="Ben", rating=1300, gender=Gender.MALE)
    assert Player.from_dict(player.to_dict()) == player


def test_validators():
    assert validate_rating(None).sanitized_value is None
    assert not validate_rating(True)
    assert not validate_rating("inf")
    assert not validate_rating(float("-inf"))
    assert validate_gender(" M ").sanitized_value == "M"
    assert validate_gender("").sanitized_value is None
    with pytest.raises(RatingValidationException):
        validate_rating_strict(5000)
    with pytest.raises(GenderValidationException):
        validate_gender_strict("unknown")


def test_match_derives_winner_from_scores():
    match = Match.from_dict(
        {
            "id": "m1",
            "court_id": 2,
            "team_a": ["a", "b"],
            "team_b": ["c", "d"],
            "score_a": 18,
            "score_b": 21,
        }
    )
    assert match.winner is Winner.TEAM_B
    assert match.winners == ("c", "d")
    assert match.losers == ("a", "b")
    assert match.participants == frozenset("abcd")
    assert match.involves("a")
    assert not match.involves("e")


def test_court_assignment_player_ids():
    assignment = CourtAssignment(3, ("a", "d"), ("b", "c"))
    assert assignment.player_ids == ("a", "d", "b", "c")
    assert assignment.to_dict() == {
        "court_id": 3,
        "team_a": ["a", "d"],
        "team_b": ["b", "c"],
    }


def test_epoch_conversion():
    assert to_epoch_ms(None) is None
    assert to_epoch_ms(1_000) == 1_000
    assert to_epoch_ms("2500") == 2500
    assert to_epoch_ms("2025-01-01T00:00:00Z") == 1_735_689_600_000
    with pytest.raises(InvalidConfigurationException):
        to_epoch_ms("yesterday-ish")


def test_timestamps_without_offset_are_utc(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is unavailable")
    monkeypatch.setenv("TZ", "Asia/Tokyo")
    time.tzset()
    try:
        assert to_epoch_ms("2025-01-01T09:00:00") == 1_735_722_000_000
        assert to_epoch_ms(datetime(2025, 1, 1, 9)) == 1_735_722_000_000
        assert to_epoch_ms(datetime(2025, 1, 1, 9, tzinfo=timezone.utc)) == (
            1_735_722_000_000
        )
        options = AssignmentOptions.from_dict(
            {"practice_start_time": "2025-01-01T09:00:00"}
        )
        assert options.practice_start_time == 1_735_722_000_000
    finally:
        monkeypatch.undo()
        time.tzset()


@pytest.mark.parametrize("value", ["inf", "1e400", float("inf")])
def test_out_of_range_timestamps_are_rejected(value):
    with pytest.raises(InvalidConfigurationException):
        to_epoch_ms(value)


def test_options_from_dict_parses_iso_start():
    options = AssignmentOptions.from_dict(
        {"practice_start_time": "2025-01-01T09:00:00+00:00", "total_court_count": 3}
    )
    assert options.practice_start_time == 1_735_722_000_000
    assert options.resolved_total_court_count(2) == 3
    assert options.resolved_target_court_ids(2) == [1, 2]


@pytest.mark.parametrize(
    "options, court_count",
    [
        (AssignmentOptions(), 0),
        (AssignmentOptions(target_court_ids=[1, 1]), 2),
        (AssignmentOptions(total_court_count=1), 2),
        (AssignmentOptions(jitter_scale=-1.0), 1),
    ],
)
def test_options_validation(options, court_count):
    with pytest.raises(InvalidConfigurationException):
        options.validate(court_count)


def test_options_defaults_fill_in_clock_and_random_source():
    options = AssignmentOptions(now=123, rng=lambda: 0.25)
    assert options.current_time() == 123
    assert options.random_source()() == 0.25
    assert AssignmentOptions().current_time() > 0
