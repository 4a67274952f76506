"""Startup validation and configuration checks."""

import logging
import os
from pathlib import Path

from accessibility_checker.log import setup_logging

from .config import get_default_scan_tier, get_log_level, get_max_markup_bytes

logger = logging.getLogger(__name__)


def validate_config() -> None:
    """Configure logging and warn about missing or invalid settings."""
    setup_logging(get_log_level())

    if not Path(".env").exists():
        logger.info(".env file not found; using environment variables and defaults.")

    raw_tier = os.environ.get("DEFAULT_SCAN_TIER")
    if raw_tier and raw_tier.strip().lower() != get_default_scan_tier().value:
        logger.warning("DEFAULT_SCAN_TIER=%r is not a valid tier; using 'standard'.", raw_tier)

    raw_limit = os.environ.get("MAX_MARKUP_BYTES")
    if raw_limit and raw_limit.strip() != str(get_max_markup_bytes()):
        logger.warning("MAX_MARKUP_BYTES=%r is invalid; using %d.", raw_limit, get_max_markup_bytes())

    logger.info(
        "Default scan tier: %s; max markup size: %d bytes",
        get_default_scan_tier().value,
        get_max_markup_bytes(),
    )
