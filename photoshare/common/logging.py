# photoshare/common/logging.py
from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = "uvicorn.error", level: Optional[int | str] = None) -> logging.Logger:
    """
    Module logger for the app. Under uvicorn the root logger is already
    wired and we only set the level; standalone (scripts, tests) we
    install a basicConfig once. Level defaults to settings.log_level.
    """
    if level is None:
        from photoshare.common.settings import get_settings
        level = get_settings().log_level.upper()

    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger
