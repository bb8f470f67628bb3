"""
Logging configuration for the financial ratio library.
"""

import logging
import sys
from config.settings import settings


def setup_logging() -> None:
    """Configure application-wide logging."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    level = getattr(logging, settings.log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {settings.log_level}")

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("numpy").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)
