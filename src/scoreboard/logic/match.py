"""
Match Module
In-progress football match held by the scoreboard
"""
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Tuple


@dataclass
class Match:
    """
    One in-progress match.

    ``home_team``, ``away_team`` and ``start_time`` are fixed when the match is
    started; only the two scores change afterwards. ``sequence`` is the order in
    which the scoreboard started the match and breaks ties between matches that
    share a start timestamp.
    """

    home_team: str
    away_team: str
    start_time: datetime
    home_score: int = 0
    away_score: int = 0
    sequence: int = field(default=0, repr=False, compare=False)

    @property
    def key(self) -> Tuple[str, str]:
        """Identity of the match: the ordered (home, away) pair"""
        return (self.home_team, self.away_team)

    @property
    def total_score(self) -> int:
        """Sum of both scores"""
        return self.home_score + self.away_score

    def snapshot(self) -> "Match":
        """
        Get a detached copy of this match

        Returns:
            New Match with the same values; changing it does not affect this one
        """
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """
        Get match data as a plain dictionary

        Returns:
            Dictionary with teams, scores, total score and ISO start time
        """
        return {
            "home_team": self.home_team,
            "away_team": self.away_team,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "total_score": self.total_score,
            "start_time": self.start_time.isoformat(),
        }

    def __str__(self) -> str:
        return f"{self.home_team} {self.home_score} - {self.away_team} {self.away_score}"
