"""
Configuration loader module
Loads and validates configuration from JSON file and environment variables
"""
import json
import os
from pathlib import Path
from typing import Dict, Any

from dotenv import load_dotenv

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config(config_path: str = "config/config.json") -> Dict[str, Any]:
    """
    Load configuration from JSON file and environment variables
    
    Args:
        config_path: Path to configuration JSON file
    
    Returns:
        Dictionary containing merged configuration
    
    Raises:
        FileNotFoundError: If config file doesn't exist
        json.JSONDecodeError: If config file is invalid JSON
    """
    # Load environment variables from .env file if it exists
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)
    
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Please create {config_path} (see config/config.json in the repository)"
        )
    
    with open(config_file, 'r', encoding='utf-8') as f:
        config = json.load(f)
    
    # Override logging settings from environment variables
    log_config = config.setdefault("logging", {})
    if os.getenv("SCOREBOARD_LOG_LEVEL"):
        log_config["level"] = os.getenv("SCOREBOARD_LOG_LEVEL")
    if os.getenv("SCOREBOARD_LOG_FILE"):
        log_config["file_path"] = os.getenv("SCOREBOARD_LOG_FILE")
    
    return config


def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration structure and required fields
    
    Args:
        config: Configuration dictionary
    
    Returns:
        True if valid, raises ValueError if invalid
    """
    if "logging" not in config:
        raise ValueError("Missing required configuration section: logging")
    
    log_config = config["logging"]
    level = str(log_config.get("level", "INFO")).upper()
    if level not in _VALID_LEVELS:
        raise ValueError(
            f"Invalid logging level: {log_config.get('level')}\n"
            f"Expected one of: {', '.join(_VALID_LEVELS)}"
        )
    
    max_bytes = log_config.get("max_bytes", 10485760)
    if not isinstance(max_bytes, int) or max_bytes <= 0:
        raise ValueError(f"logging.max_bytes must be a positive integer, got {max_bytes!r}")
    
    backup_count = log_config.get("backup_count", 5)
    if not isinstance(backup_count, int) or backup_count < 0:
        raise ValueError(f"logging.backup_count must be a non-negative integer, got {backup_count!r}")
    
    for key in ("file_format", "console_format", "date_format"):
        if key in log_config and not (isinstance(log_config[key], str) and log_config[key]):
            raise ValueError(f"logging.{key} must be a non-empty string")
    
    return True
