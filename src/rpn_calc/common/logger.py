"""Shared package logger."""
import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "RPN_CALC_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("rpn_calc")
# Library default: stay silent until the application opts in
logger.addHandler(logging.NullHandler())


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it more than once only updates the level.

    :param level: Logging level, defaults to $RPN_CALC_LOG_LEVEL or WARNING

    :return: The configured package logger
    :rtype: logging.Logger
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = level.upper()

    logger.setLevel(level)

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
