"""
Scoreboard Demo Entry Point
Plays a set of matches through the scoreboard and prints the summary
"""
import sys
from pathlib import Path
from typing import List, Optional, Tuple

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from scoreboard import ScoreBoard, ScoreboardError
from scoreboard.config.loader import load_config, validate_config
from scoreboard.core.logging_setup import setup_logging
from scoreboard.utils.formatters import format_boxed_message, format_summary_table

DEMO_MATCHES: List[Tuple[str, int, str, int]] = [
    ("Mexico", 0, "Canada", 5),
    ("Spain", 10, "Brazil", 2),
    ("Germany", 2, "France", 2),
    ("Uruguay", 6, "Italy", 6),
    ("Argentina", 3, "Australia", 1),
]


def play_demo(scoreboard: ScoreBoard, logger) -> None:
    """
    Start the demo matches, set their scores and log the summary
    
    Args:
        scoreboard: ScoreBoard to play on
        logger: Logger for output
    """
    for home_team, _, away_team, _ in DEMO_MATCHES:
        scoreboard.start_match(home_team, away_team)
    for home_team, home_score, away_team, away_score in DEMO_MATCHES:
        scoreboard.update_score(home_team, home_score, away_team, away_score)
    
    logger.info(format_summary_table(scoreboard.get_summary()))
    
    # Each error kind, as an embedding application would see it
    attempts = [
        lambda: scoreboard.start_match("Spain", "Brazil"),
        lambda: scoreboard.update_score("Brazil", 1, "Spain", 1),
        lambda: scoreboard.finish_match(None, "Italy"),
    ]
    for attempt in attempts:
        try:
            attempt()
        except ScoreboardError as e:
            logger.warning(f"[{e.http_status}] {e}")
    
    scoreboard.finish_match("Spain", "Brazil")
    logger.info("After Spain v Brazil finished:")
    logger.info(format_summary_table(scoreboard.get_summary()))


def main(config_path: Optional[str] = None) -> int:
    """
    Run the demo
    
    Args:
        config_path: Path to configuration JSON file (default: config/config.json)
    
    Returns:
        Process exit code
    """
    try:
        config = load_config(config_path or "config/config.json")
        validate_config(config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    
    logger = setup_logging(config["logging"])
    logger.info(format_boxed_message("Live Football Scoreboard"))
    
    play_demo(ScoreBoard(), logger)
    return 0


if __name__ == '__main__':
    sys.exit(main())
