"""
Logging configuration for the trap and its dry-run harness.

Console plus rotating file output under the configured logs directory.
Library modules only call logging.getLogger(__name__); handlers are attached
here, once, by the entry point.
"""

import logging
import logging.handlers
from typing import Optional

from .config import Config, config as default_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    logger_name: str = "basefee_trap",
    settings: Optional[Config] = None,
    level: Optional[str] = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        logger_name: Name of the logger; an empty string configures the root logger
        settings: Config supplying log_level and logs_dir (defaults to global config)
        level: Optional level override (e.g. from a --log-level flag)

    Returns:
        Configured logger instance
    """
    settings = settings or default_config
    logger = logging.getLogger(logger_name)

    level = (level or settings.log_level).upper()
    logger.setLevel(level)

    # Already configured: only the level changes
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = settings.logs_dir / f"{logger_name or 'root'}.log"
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger
