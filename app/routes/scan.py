"""Scan routes (single page, site consistency, report)."""

from typing import Literal

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse

from accessibility_checker import MarkupParseError

from ..report_formatter import format_markdown_report
from ..schemas import ErrorDetail, ScanRequest, ScanResponse, SiteScanRequest, SiteScanResponse
from ..utils import checker_svc, ensure_size, run_scan

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorDetail, "description": "Unparseable markup or unknown tier"},
    413: {"model": ErrorDetail, "description": "Markup above the size limit"},
}


@router.post("/scan", response_model=ScanResponse, responses=ERROR_RESPONSES)
def scan(req: ScanRequest) -> ScanResponse:
    """Audit one page. The caller chooses the tier from the client's plan."""
    issues, tier = run_scan(req)
    return ScanResponse(
        tier=tier.value,
        issues=checker_svc.to_out(issues),
        summary=checker_svc.severity_summary(issues),
    )


@router.post("/scan/site", response_model=SiteScanResponse, responses=ERROR_RESPONSES)
def scan_site(req: SiteScanRequest) -> SiteScanResponse:
    """Compare navigation and component naming across the pages of a site."""
    for page in req.pages:
        ensure_size(page)
    try:
        issues = checker_svc.scan_site(req.pages)
    except MarkupParseError as e:
        raise HTTPException(400, str(e))
    return SiteScanResponse(issues=issues)


@router.post("/scan/report", response_class=PlainTextResponse, responses=ERROR_RESPONSES)
def scan_report(
    req: ScanRequest,
    format: Literal["markdown", "text"] = Query("markdown"),
) -> PlainTextResponse:
    """Audit one page and return a readable report instead of JSON."""
    issues, tier = run_scan(req)
    if format == "text":
        return PlainTextResponse(checker_svc.text_report(issues))
    body = format_markdown_report(checker_svc.to_out(issues), tier.value)
    return PlainTextResponse(body, media_type="text/markdown")
