# app/utils/logger.py
"""
Centralised logging configuration for the entire application.
Logs to console and, unless LOG_TO_FILE is off, to a rotating file in /logs/.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from app.config import settings

LOG_LEVEL = settings.LOG_LEVEL.upper()
LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "logs")
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_configured = False


def _handlers() -> list[logging.Handler]:
    handlers = [logging.StreamHandler()]
    if settings.LOG_TO_FILE:
        os.makedirs(LOG_DIR, exist_ok=True)
        # api.log + 10 rotated 5MB backups
        handlers.append(RotatingFileHandler(
            filename=os.path.join(LOG_DIR, "api.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=10,
            encoding="utf-8",
        ))
    return handlers


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)
    for handler in _handlers():
        handler.setLevel(LOG_LEVEL)
        handler.setFormatter(fmt)
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Named logger with the app-wide handlers attached to the root."""
    _configure_root_logger()
    return logging.getLogger(name)
