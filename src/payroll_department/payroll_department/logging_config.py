from __future__ import annotations

import logging
from typing import Union

_logger = logging.getLogger(__name__)


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Short timestamped stderr logging, installed only once.

    Does nothing when the root logger already has handlers.
    """
    if logging.getLogger().handlers:
        return
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt, datefmt="%Y-%m-%d %H:%M:%S")
    _logger.debug("logging configured")
