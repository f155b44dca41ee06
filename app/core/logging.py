# app/core/logging.py
import logging

from pythonjsonlogger.json import JsonFormatter

APP_LOGGER = "app"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a JSON handler to the application logger once and reuse it."""
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(level.upper())
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter("%(levelname)s %(name)s %(message)s %(asctime)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
