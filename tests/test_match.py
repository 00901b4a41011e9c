"""
Tests for the Match entity
"""
from datetime import datetime

from scoreboard import Match

KICK_OFF = datetime(2024, 6, 14, 21, 0, 0)


def test_new_match_defaults():
    match = Match("Uruguay", "Italy", start_time=KICK_OFF)

    assert (match.home_score, match.away_score) == (0, 0)
    assert match.total_score == 0
    assert match.key == ("Uruguay", "Italy")


def test_total_score_follows_scores():
    match = Match("Uruguay", "Italy", start_time=KICK_OFF, home_score=6, away_score=6)
    assert match.total_score == 12

    match.away_score = 7
    assert match.total_score == 13


def test_snapshot_is_detached():
    match = Match("Uruguay", "Italy", start_time=KICK_OFF, sequence=3)

    copy = match.snapshot()
    copy.home_score = 5

    assert match.home_score == 0
    assert copy.sequence == 3
    assert copy.start_time == match.start_time


def test_to_dict():
    match = Match("Spain", "Brazil", start_time=KICK_OFF, home_score=10, away_score=2)

    assert match.to_dict() == {
        "home_team": "Spain",
        "away_team": "Brazil",
        "home_score": 10,
        "away_score": 2,
        "total_score": 12,
        "start_time": "2024-06-14T21:00:00",
    }


def test_str():
    match = Match("Spain", "Brazil", start_time=KICK_OFF, home_score=10, away_score=2)
    assert str(match) == "Spain 10 - Brazil 2"
