"""Logger setup shared by the document model, the Qt layer and the config."""

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Get a named logger whose package logger has a stream handler attached once.

    The handler sits on the top-level package logger ("simplecsv" for
    "simplecsv.storage"), so child loggers share it and records still
    propagate to the root logger.

    `level` may be a logging constant or a level name such as "DEBUG".
    When omitted the logger keeps whatever level it already has.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(parse_level(level))

    package_logger = logging.getLogger(name.split('.')[0])
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    return logger


def parse_level(level: Union[int, str]) -> int:
    """Turn "info"/"DEBUG"/20 into a logging level, defaulting to INFO"""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO
