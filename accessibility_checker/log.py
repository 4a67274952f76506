"""Logging utilities."""

import logging
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s - %(message)s"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    format_str: Optional[str] = None
) -> logging.Logger:
    """
    Setup logging for the accessibility checker.

    Args:
        level: Logging level or level name (default: INFO)
        format_str: Custom format string

    Returns:
        Configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=format_str or DEFAULT_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logger = logging.getLogger("accessibility_checker")
    logger.setLevel(level)

    return logger
