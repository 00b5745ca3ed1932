"""XFEATURE FILE PURPOSE
Purpose: package logger; level follows XFEATURE_DEBUG.
Hot path: no (registration and bulk loads only).
Feature flags: XFEATURE_DEBUG.
Failure mode: never crash due to logging.
"""

from __future__ import annotations

import logging

from xfeature.config import is_debug

LOGGER_NAME = "xfeature"
_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure() -> logging.Logger:
    """Attach the stream handler once and re-read the level from XFEATURE_DEBUG.

    Safe to call again after the environment changes (tests, late config).
    """
    log = logging.getLogger(LOGGER_NAME)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        log.addHandler(handler)
    log.setLevel(logging.INFO if is_debug() else logging.WARNING)
    return log


logger = configure()
