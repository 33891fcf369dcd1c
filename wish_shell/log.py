"""
Diagnostic logging setup.

Records go through a rich handler on stderr. At the default WARNING level
nothing is emitted during normal operation, so the only thing a user ever
sees on stderr is the uniform error message.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "wish_shell"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a RichHandler to the package logger and set its level.

    Calling this more than once only updates the level.

    Args:
        level: Level name such as 'DEBUG' or 'WARNING'

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True, highlight=False),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("[pid %(process)d] %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    level_value = logging.getLevelName(level.upper())
    if not isinstance(level_value, int):
        level_value = logging.WARNING
    logger.setLevel(level_value)
    return logger
