"""Centralized logging configuration."""

import logging
import sys

from app.config import settings


LOGGER_NAME = "clinical_note_scribe"

# Client libraries whose debug output carries request bodies (transcripts,
# prior notes). Held at WARNING whatever LOG_LEVEL says.
QUIET_LOGGERS = ("openai", "httpx", "httpcore")


def setup_logging() -> logging.Logger:
    """Configure and return the application logger."""
    level_name = settings.LOG_LEVEL.upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.debug(f"Logging configured with level: {level_name}")

    return logger


# Create the global logger instance
logger = setup_logging()
