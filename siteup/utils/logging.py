"""Logging setup for siteup."""

import logging
import os

from rich.logging import RichHandler

from siteup.core.config import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL


def resolve_log_level(name=None):
    """Map a level name such as 'debug' to a logging level, defaulting to WARNING."""
    name = (name or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def configure_logging(level=None):
    """Attach a RichHandler to the siteup and msal loggers."""
    level = resolve_log_level(level)
    handler = RichHandler(show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    for name in ("siteup", "msal"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False
        logger.handlers = [h for h in logger.handlers if not isinstance(h, RichHandler)]
        logger.addHandler(handler)

    return level
