"""Logging helpers for the application.

Every module logger hangs off the ``fitcoach`` logger, which owns a stream
handler and, unless ``LOG_TO_FILE`` is switched off, a rotating file
handler. ``LOG_DIR`` and ``LOG_LEVEL`` come from the environment.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List, Optional

APP_LOGGER = "fitcoach"
LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "logs"))
LOG_FILE = os.path.join(LOG_DIR, "fitcoach.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() not in ("0", "false", "no")

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")


def _build_handlers() -> List[logging.Handler]:
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(_formatter)
    handlers: List[logging.Handler] = [stream_handler]
    if LOG_TO_FILE:
        os.makedirs(LOG_DIR, exist_ok=True)
        file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
        file_handler.setFormatter(_formatter)
        handlers.append(file_handler)
    return handlers


def _app_logger() -> logging.Logger:
    app_logger = logging.getLogger(APP_LOGGER)
    if not app_logger.handlers:
        app_logger.setLevel(LOG_LEVEL)
        for handler in _build_handlers():
            app_logger.addHandler(handler)
        app_logger.propagate = False
    return app_logger


def get_logger(name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """Return ``fitcoach.<name>``, configuring the shared handlers on first use.

    Handlers live on the parent logger only, so repeated calls never stack
    duplicate output. ``level`` overrides ``LOG_LEVEL`` for this logger.
    """
    parent = _app_logger()
    logger = parent.getChild(name) if name and name != APP_LOGGER else parent
    if level is not None:
        logger.setLevel(level)
    return logger
