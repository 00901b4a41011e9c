"""
Logging setup module for the scoreboard
Configures file and console logging with rotation
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(message)s'
DEFAULT_CONSOLE_FORMAT = '%(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(log_config: dict) -> logging.Logger:
    """
    Configure the "Scoreboard" logger from the `logging` config section
    
    Args:
        log_config: Dictionary containing logging configuration
            - level: Log level name (default INFO)
            - file_path: Log file, rotated by size (default logs/scoreboard.log)
            - max_bytes / backup_count: Rotation settings
            - file_format / console_format / date_format: Record layouts
            - console_output: Also log to the console (default True)
            - clear_on_start: Delete the old log file first (default False)
    
    Returns:
        Configured logger instance
    """
    log_file = Path(log_config.get("file_path", "logs/scoreboard.log"))
    log_file.parent.mkdir(parents=True, exist_ok=True)
    if log_config.get("clear_on_start", False) and log_file.exists():
        log_file.unlink()
    
    log_level = getattr(logging, str(log_config.get("level", "INFO")).upper(), logging.INFO)
    date_format = log_config.get("date_format", DEFAULT_DATE_FORMAT)
    
    logger = logging.getLogger("Scoreboard")
    logger.setLevel(log_level)
    _reset_handlers(logger)
    
    handlers = [(
        RotatingFileHandler(log_file,
                            maxBytes=log_config.get("max_bytes", 10485760),
                            backupCount=log_config.get("backup_count", 5),
                            encoding='utf-8'),
        log_config.get("file_format", DEFAULT_FILE_FORMAT),
    )]
    if log_config.get("console_output", True):
        handlers.append((logging.StreamHandler(),
                         log_config.get("console_format", DEFAULT_CONSOLE_FORMAT)))
    
    for handler, fmt in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(fmt, datefmt=date_format))
        logger.addHandler(handler)
    
    logger.info(f"Logging initialized ({logging.getLevelName(log_level)}, {log_file})")
    return logger
