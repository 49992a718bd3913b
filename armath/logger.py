"""
Logger utility.
"""
import logging

FORMAT = '[%(asctime)s] [%(name)s] %(levelname)s: %(message)s'


def get_logger(name=None, level=None):
    """
    Retrieve a logger with one stream handler attached.

    ``level`` may be a number or a level name such as "DEBUG". When omitted
    the logger's current level is left alone.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(handler)
        if level is None:
            level = logging.INFO
    if level is not None:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        logger.setLevel(level)
    return logger
