"""Logging setup for the dues package logger.

Records from every dues.* module go to stdout and to DuesConfig.log_file.
Level comes from DuesConfig.log_level (LOG_LEVEL env var); unknown names
fall back to INFO.
"""

import logging
import sys
from pathlib import Path

from dues.services.config import DuesConfig

PACKAGE_LOGGER = "dues"

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_log_level(level_name: str) -> int:
    """Map a level name to a logging constant (default: INFO)."""
    return LOG_LEVEL_MAP.get(level_name.upper(), logging.INFO)


def setup_logging(config: DuesConfig) -> logging.Logger:
    """
    Attach stdout and file handlers to the dues package logger.

    Args:
        config: Settings providing log_file and log_level

    Returns:
        The configured "dues" logger

    Calling it again replaces the handlers, so records are never duplicated.
    The logger does not propagate to the root logger of the host application.
    """
    log_path = Path(config.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    log_level = resolve_log_level(config.log_level)

    dues_logger = logging.getLogger(PACKAGE_LOGGER)
    dues_logger.setLevel(log_level)
    dues_logger.propagate = False

    for handler in dues_logger.handlers[:]:
        handler.close()
        dues_logger.removeHandler(handler)

    for handler in (logging.StreamHandler(sys.stdout), logging.FileHandler(log_path)):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        dues_logger.addHandler(handler)

    return dues_logger
