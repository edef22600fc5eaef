from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "ROOTPROJECT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "rootproject-stream"


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """
    Attach one stderr handler to the package logger (safe to call twice).

    Priority: explicit `level`, then $ROOTPROJECT_LOG_LEVEL, then INFO.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or logging.INFO
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("rootproject")
    logger.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
