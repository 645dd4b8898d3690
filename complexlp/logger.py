"""Logging utilities for the complex profitability optimizer.

Module loggers live under the ``complexlp`` hierarchy; only the package
logger carries a handler, children propagate to it.
"""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER = "complexlp"

_LOGGERS: dict[str, logging.Logger] = {}


def _is_child(name: str) -> bool:
    return name.startswith(ROOT_LOGGER + ".")


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return a named logger, configured once per name.

    ``get_logger(__name__)`` inside the package yields a child of the
    ``complexlp`` logger that shares its stderr handler and level.
    """
    if name in _LOGGERS:
        return _LOGGERS[name]

    logger = logging.getLogger(name)
    if _is_child(name):
        get_logger(ROOT_LOGGER)
        logger.propagate = True
    else:
        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)
            logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False

    _LOGGERS[name] = logger
    return logger


def reset_logger(name: str) -> None:
    """Drop a cached logger and close its handlers, useful for testing."""
    existing: Optional[logging.Logger] = _LOGGERS.pop(name, None)
    if existing:
        for handler in list(existing.handlers):
            existing.removeHandler(handler)
            handler.close()
