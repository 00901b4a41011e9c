"""
Formatter utilities for console output
"""
from typing import Iterable, List

from scoreboard.logic.match import Match


def format_summary_table(matches: Iterable[Match]) -> str:
    """
    Format the scoreboard summary as a table for console output
    
    Example:
    ============================================================
    # | Match | Score | Total | Started
    ------------------------------------------------------------
    1 | Uruguay v Italy | 6-6 | 12 | 14:05:31
    ============================================================
    
    Args:
        matches: Matches in display order (as returned by ScoreBoard.get_summary)
    
    Returns:
        Formatted table string
    """
    matches = list(matches)
    if not matches:
        return "No matches in progress"
    
    border = "=" * 60
    separator = "-" * 60
    lines: List[str] = [border, "# | Match | Score | Total | Started", separator]
    
    for position, match in enumerate(matches, start=1):
        match_name = f"{match.home_team} v {match.away_team}"
        score_str = f"{match.home_score}-{match.away_score}"
        started_str = match.start_time.strftime("%H:%M:%S")
        lines.append(f"{position} | {match_name} | {score_str} | {match.total_score} | {started_str}")
    
    lines.append(border)
    return "\n".join(lines)


def format_summary_lines(matches: Iterable[Match]) -> str:
    """
    Format the summary as a numbered list, e.g. "1. Uruguay 6 - Italy 6"
    """
    return "\n".join(f"{position}. {match}" for position, match in enumerate(matches, start=1))


def format_boxed_message(message: str) -> str:
    """
    Format a message with a box border
    
    Args:
        message: Message to display in box
    
    Returns:
        Formatted string with box border
    """
    inner = max(60, len(message) + 4) - 2
    return "\n".join([
        "┌" + "─" * inner + "┐",
        "│" + message.center(inner) + "│",
        "└" + "─" * inner + "┘",
    ])
