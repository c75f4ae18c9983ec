"""
Lightweight core utilities for logging.

The app configures the root logger once; modules only ask for named loggers.
"""

import logging
from typing import Any, Union


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Configure the root logger and return the package logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level)
    return logging.getLogger("taskflow_core")


def log_action(action: str, data: Any = None) -> None:
    logging.getLogger("taskflow_core.actions").info("Action: %s, Data: %s", action, data)
