"""Logging setup for shiftlog."""
import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROOT_LOGGER = "shiftlog"


def resolve_level(level: Union[int, str, None], default: int = logging.WARNING) -> int:
    """Turn a level name such as "debug" into a logging level number.

    Args:
        level: Level number, level name, or None
        default: Level used when the value is missing or unknown

    Returns:
        Logging level number
    """
    if level is None or level == "":
        return default
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else default


def get_logger(name: str = ROOT_LOGGER, level: Union[int, str, None] = None) -> logging.Logger:
    """Get a logger below the shiftlog namespace.

    The console handler lives on the "shiftlog" logger and is attached only
    once, child loggers propagate to it.

    Args:
        name: Logger name, e.g. "shiftlog.store"
        level: If given, set the level of the shiftlog root logger

    Returns:
        Configured logger
    """
    root = logging.getLogger(ROOT_LOGGER)
    handler_name = f"{ROOT_LOGGER}:console"
    if not any(h.get_name() == handler_name for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        handler.set_name(handler_name)
        root.addHandler(handler)
        root.propagate = False
        root.setLevel(logging.WARNING)
    if level is not None:
        root.setLevel(resolve_level(level))
    return logging.getLogger(name)
