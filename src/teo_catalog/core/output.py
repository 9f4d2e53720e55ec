"""
Unified output system using Loguru.
Every user-facing message goes to the log file and, unless quiet, to stdout.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import LoggingConfig, get_data_dir

# Quiet mode suppresses stdout echo (headless sessions, tests)
_quiet_mode = False


def get_log_file_path() -> Path:
    """Get the default path to the log file."""
    return get_data_dir() / "teo-catalog.log"


def setup_loguru(
    log_file: Optional[Path] = None,
    level: str = "INFO",
    rotation: str = "10 MB",
    retention: int = 5,
) -> None:
    """
    Configure loguru for file logging plus warnings on stderr.

    Args:
        log_file: Path to log file (default: ~/.local/share/teo-catalog/teo-catalog.log)
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
        rotation: Size at which the log file rotates
        retention: Number of rotated files to keep
    """
    log_file = log_file or get_log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()

    logger.add(
        log_file,
        rotation=rotation,
        retention=retention,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )
    logger.add(sys.stderr, level="WARNING", format="{level}: {message}")

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def setup_from_config(config: LoggingConfig) -> None:
    """Configure logging from the [logging] config section."""
    setup_loguru(
        log_file=Path(config.log_file) if config.log_file else None,
        level=config.level,
        rotation=f"{config.max_file_size_mb} MB",
        retention=config.backup_count,
    )


def set_quiet_mode(enabled: bool) -> None:
    """Enable or disable stdout echo for log()."""
    global _quiet_mode
    _quiet_mode = enabled


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to the log AND prints for the user.

    Args:
        message: User-facing message
        level: Log level (debug, info, success, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)

    if not _quiet_mode and level != "debug":
        print(message)
