from __future__ import annotations

import logging
import sys

from . import constants

LOG = logging.getLogger(constants.LOGGER_NAME)


def setup_logging(level: int | str = constants.DEFAULT_LOG_LEVEL,
                  fmt: str = constants.DEFAULT_LOG_FORMAT) -> logging.Logger:
    """Sends carve's records to stderr. The library never calls this on import."""
    if isinstance(level, str):
        name, level = level, logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level `{name}`")
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format=fmt
    )
    LOG.setLevel(level)
    return LOG
