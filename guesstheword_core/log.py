from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

from . import config


def configure_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
    logger_name: str = "guesstheword_core",
) -> logging.Logger:
    """Attach a console handler (and optionally a rotating file handler) to the package logger.

    Defaults come from GUESSTHEWORD_LOG_LEVEL / GUESSTHEWORD_LOG_FILE. Calling it
    again replaces the handlers it installed before instead of stacking them.
    """
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")
    if log_file is None:
        log_file = config.LOG_FILE

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if getattr(handler, "_guesstheword", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)
    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    stream._guesstheword = True  # type: ignore[attr-defined]
    logger.addHandler(stream)

    if log_file:
        directory = os.path.dirname(log_file)
        if directory and not os.path.exists(directory):
            os.makedirs(directory, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=config.LOG_MAX_BYTES, backupCount=config.LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        file_handler._guesstheword = True  # type: ignore[attr-defined]
        logger.addHandler(file_handler)

    return logger
