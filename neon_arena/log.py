import logging
import os
from typing import Optional, Union

from neon_arena import config


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the root logger once and return the package logger.

    ``level`` falls back to the ``NEON_ARENA_LOG_LEVEL`` environment variable,
    then WARNING. Handlers are only installed if nothing configured logging
    before us.
    """
    if level is None:
        level = os.environ.get(config.LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {name}")

    root = logging.getLogger()
    if not root.handlers:
        handlers = [logging.StreamHandler()]
        if log_file:
            handlers.append(logging.FileHandler(log_file))
        logging.basicConfig(level=level, format=config.LOG_FORMAT, handlers=handlers)
    logger = logging.getLogger("neon_arena")
    logger.setLevel(level)
    return logger
