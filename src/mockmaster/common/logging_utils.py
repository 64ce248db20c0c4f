"""
MockMaster Logging Helpers

Library modules only create named loggers; handlers are configured by the
CLI entry point through setup_logging().
"""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_LEVELS = ('debug', 'info', 'warning', 'error')
DEFAULT_LOG_LEVEL = 'warning'


def resolve_log_level(level: Optional[str] = None) -> str:
    """
    Pick the effective log level name.

    Args:
        level: Explicit level name (e.g. from --log-level)

    Returns:
        Lower-case level name; explicit value first, then the
        MOCKMASTER_LOG_LEVEL environment variable, then 'warning'
    """
    candidate = level or os.environ.get('MOCKMASTER_LOG_LEVEL') or DEFAULT_LOG_LEVEL
    candidate = candidate.lower()
    if candidate not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return candidate


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the 'mockmaster' logger hierarchy for command-line use.

    Args:
        level: Level name (debug, info, warning, error)

    Returns:
        The configured 'mockmaster' logger
    """
    level_name = resolve_log_level(level)
    logger = logging.getLogger("mockmaster")
    logger.setLevel(getattr(logging, level_name.upper()))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
