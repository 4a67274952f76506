"""Utility functions for the API."""

import logging

from deps import HTTPException, List, Tuple

from accessibility_checker import InvalidScanTierError, Issue, MarkupParseError, ScanTier

from .config import get_default_scan_tier, get_max_markup_bytes
from .schemas import ScanRequest
from .services import CheckerService

logger = logging.getLogger(__name__)

checker_svc = CheckerService()


def ensure_size(html: str) -> None:
    """Reject markup above the configured size limit with 413."""
    limit = get_max_markup_bytes()
    size = len(html.encode("utf-8"))
    if size > limit:
        raise HTTPException(413, f"Markup is {size} bytes; the limit is {limit} bytes")


def resolve_tier(req: ScanRequest) -> ScanTier:
    if req.tier is None:
        return get_default_scan_tier()
    try:
        return ScanTier.parse(req.tier)
    except InvalidScanTierError as e:
        raise HTTPException(400, str(e))


def run_scan(req: ScanRequest) -> Tuple[List[Issue], ScanTier]:
    """Run the checker. Returns (issues, tier); input errors become HTTP 400."""
    ensure_size(req.html)
    tier = resolve_tier(req)
    try:
        issues = checker_svc.scan(req.html, tier)
    except MarkupParseError as e:
        logger.info("Rejected unparseable markup: %s", e)
        raise HTTPException(400, str(e))
    return issues, tier
