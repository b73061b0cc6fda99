"""Per-module stdout loggers; RELAY_ENV=prod quiets them down to warnings."""

import logging
import sys

from gemini_relay.config import RELAY_ENV

LOG_FORMAT = "[relay] %(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING if RELAY_ENV == "prod" else logging.DEBUG)
    # Vercel and WSGI hosts install their own root handler
    logger.propagate = False
    return logger
