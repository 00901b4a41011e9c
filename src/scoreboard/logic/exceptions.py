"""
Scoreboard exceptions
Errors raised by the scoreboard store when an operation cannot be applied
"""


class ScoreboardError(Exception):
    """Base class for all scoreboard errors"""

    # Status an HTTP wrapper would answer with
    http_status = 500


class InvalidArgumentError(ScoreboardError, ValueError):
    """Raised when a required team name is missing or not a usable string"""

    http_status = 400

    def __init__(self, message: str = "One of the parameters is null"):
        super().__init__(message)


class MatchAlreadyExistsError(ScoreboardError):
    """Raised when a match with the same home/away pairing is already in progress"""

    http_status = 409

    def __init__(self, home_team: str, away_team: str):
        self.home_team = home_team
        self.away_team = away_team
        super().__init__(f"Match between '{home_team}' and '{away_team}' already exists")


class MatchNotFoundError(ScoreboardError):
    """Raised when no match with the given home/away pairing is in progress"""

    http_status = 404

    def __init__(self, home_team: str, away_team: str):
        self.home_team = home_team
        self.away_team = away_team
        super().__init__(f"Match between '{home_team}' and '{away_team}' does not exist")
