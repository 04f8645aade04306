"""
Utilities for qtnion: the package logger and its configuration.

The log level defaults to WARNING and can be set with the
``QTNION_LOG_LEVEL`` environment variable, either as a level name
(e.g. "debug") or as a number.
"""

import os
import logging


logger = logging.getLogger("qtnion")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("QTNION_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid qtnion log level: {level}")


_set_log_level()
