"""
Live football scoreboard
Tracks in-progress matches and produces an ordered summary
"""
from scoreboard.logic.exceptions import (ScoreboardError, InvalidArgumentError,
                                         MatchAlreadyExistsError, MatchNotFoundError)
from scoreboard.logic.match import Match
from scoreboard.logic.scoreboard import ScoreBoard

__version__ = "1.0.0"

__all__ = [
    'ScoreBoard',
    'Match',
    'ScoreboardError',
    'InvalidArgumentError',
    'MatchAlreadyExistsError',
    'MatchNotFoundError'
]
