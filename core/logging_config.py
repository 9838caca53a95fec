# core/logging_config.py
import logging

from core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME = "syndicpro"


def setup_logger(level: str = "INFO") -> logging.Logger:
    """Configure the application logger once; reloads reuse the same handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if logger.handlers:
        return logger

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream_handler)

    # Records stay inside the app logger; uvicorn installs its own root handlers
    logger.propagate = False

    return logger


logger = setup_logger(settings.LOG_LEVEL)
