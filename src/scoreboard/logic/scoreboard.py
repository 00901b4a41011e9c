"""
Scoreboard Module
Keeps the in-progress matches and produces the ordered summary
"""
import logging
from datetime import datetime
from itertools import count
from typing import Callable, Dict, List, Optional, Tuple

from scoreboard.logic.exceptions import (InvalidArgumentError, MatchAlreadyExistsError,
                                         MatchNotFoundError)
from scoreboard.logic.match import Match

logger = logging.getLogger("Scoreboard")


class ScoreBoard:
    """
    In-memory scoreboard of live matches.

    Matches are keyed by the ordered pair (home_team, away_team), so
    ("A", "B") and ("B", "A") are different matches. Finished matches are
    dropped, nothing is archived.

    The scoreboard does no locking. Callers sharing one instance between
    threads must guard all operations with their own lock.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize scoreboard

        Args:
            clock: Zero-argument callable returning the current time
                (default: datetime.now)
        """
        self._clock = clock or datetime.now
        self._matches: Dict[Tuple[str, str], Match] = {}
        self._sequence = count()

    def start_match(self, home_team: str, away_team: str) -> None:
        """
        Start a new match at 0-0

        Args:
            home_team: Name of the home team
            away_team: Name of the away team

        Raises:
            InvalidArgumentError: If a team name is missing
            MatchAlreadyExistsError: If this home/away pairing is already in progress
        """
        key = self._match_key(home_team, away_team)
        if key in self._matches:
            raise MatchAlreadyExistsError(home_team, away_team)

        self._matches[key] = Match(home_team, away_team,
                                   start_time=self._clock(),
                                   sequence=next(self._sequence))
        logger.debug(f"Match started: {home_team} v {away_team}")

    def update_score(self, home_team: str, home_score: int,
                     away_team: str, away_score: int) -> None:
        """
        Replace both scores of an in-progress match

        Negative scores are stored as their absolute value. Both scores are
        checked before either is written.

        Args:
            home_team: Name of the home team
            home_score: New home score
            away_team: Name of the away team
            away_score: New away score

        Raises:
            InvalidArgumentError: If a team name is missing or a score is not an integer
            MatchNotFoundError: If the match is not in progress
        """
        match = self._get_ongoing(home_team, away_team)
        home_score, away_score = self._score(home_score), self._score(away_score)
        match.home_score = home_score
        match.away_score = away_score
        logger.debug(f"Score updated: {match}")

    def finish_match(self, home_team: str, away_team: str) -> None:
        """
        Finish a match and remove it from the scoreboard

        Args:
            home_team: Name of the home team
            away_team: Name of the away team

        Raises:
            InvalidArgumentError: If a team name is missing
            MatchNotFoundError: If the match is not in progress
        """
        match = self._get_ongoing(home_team, away_team)
        del self._matches[match.key]
        logger.debug(f"Match finished: {match}")

    def get_summary(self) -> List[Match]:
        """
        Get all in-progress matches ordered for display

        Highest total score first. Equal totals put the most recently
        started match first.

        Returns:
            List of match copies (empty if nothing is in progress)
        """
        ordered = sorted(self._matches.values(),
                         key=lambda m: (m.total_score, m.start_time, m.sequence),
                         reverse=True)
        return [match.snapshot() for match in ordered]

    def get_match(self, home_team: str, away_team: str) -> Match:
        """
        Get a copy of one in-progress match

        Args:
            home_team: Name of the home team
            away_team: Name of the away team

        Returns:
            Match copy

        Raises:
            InvalidArgumentError: If a team name is missing
            MatchNotFoundError: If the match is not in progress
        """
        return self._get_ongoing(home_team, away_team).snapshot()

    def __len__(self) -> int:
        return len(self._matches)

    def __contains__(self, key) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        if not all(isinstance(team, str) for team in key):
            return False
        return key in self._matches

    def _get_ongoing(self, home_team: str, away_team: str) -> Match:
        key = self._match_key(home_team, away_team)
        match = self._matches.get(key)
        if match is None:
            raise MatchNotFoundError(home_team, away_team)
        return match

    @staticmethod
    def _score(score: int) -> int:
        if isinstance(score, bool) or not isinstance(score, int):
            raise InvalidArgumentError(f"Score must be an integer, got {score!r}")
        return abs(score)

    @staticmethod
    def _match_key(home_team: str, away_team: str) -> Tuple[str, str]:
        if home_team is None or away_team is None:
            raise InvalidArgumentError()
        if not isinstance(home_team, str) or not isinstance(away_team, str):
            raise InvalidArgumentError("Team names must be strings")
        if not home_team or not away_team:
            raise InvalidArgumentError("Team names must not be empty")
        return (home_team, away_team)
