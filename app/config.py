"""Configuration from environment."""

import os

from dotenv import load_dotenv

from accessibility_checker.issue import ScanTier

load_dotenv()

DEFAULT_MAX_MARKUP_BYTES = 5 * 1024 * 1024


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000


def get_log_level() -> str:
    """Logging level name. Default: INFO."""
    level = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
    if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
        return "INFO"
    return level


def get_default_scan_tier() -> ScanTier:
    """Tier used when a request does not name one. Default: standard."""
    raw = os.environ.get("DEFAULT_SCAN_TIER", ScanTier.STANDARD.value)
    try:
        return ScanTier.parse(raw)
    except ValueError:
        return ScanTier.STANDARD


def get_max_markup_bytes() -> int:
    """Largest markup accepted by the scan endpoints, in bytes."""
    try:
        value = int(os.environ.get("MAX_MARKUP_BYTES", str(DEFAULT_MAX_MARKUP_BYTES)))
    except ValueError:
        return DEFAULT_MAX_MARKUP_BYTES
    return value if value > 0 else DEFAULT_MAX_MARKUP_BYTES
