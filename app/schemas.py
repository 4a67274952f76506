"""Pydantic request/response models."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

SeverityName = Literal["critical", "serious", "moderate", "minor"]


# --- Request ---


class ScanRequest(BaseModel):
    """Request body for a single-page scan."""

    html: str = Field(..., description="Markup snapshot of the page to audit")
    tier: Optional[str] = Field(
        default=None,
        description="Scan tier, standard or full (any case); defaults to the server's DEFAULT_SCAN_TIER",
    )


class SiteScanRequest(BaseModel):
    """Request body for the cross-page consistency checks."""

    pages: List[str] = Field(..., description="Markup of each page of the site, in navigation order")


# --- Issue (response) ---


class IssueOut(BaseModel):
    """Single accessibility issue."""

    id: str
    type: str
    element: str
    description: str
    severity: SeverityName
    fix: Optional[str] = Field(default=None, description="Replacement markup for the element, when derivable")
    message: Optional[str] = None
    selector: Optional[str] = Field(default=None, description="Best-effort CSS locator for the element")
    impact: Optional[SeverityName] = None


class FixRequest(BaseModel):
    """Request body for applying an issue's fix to markup."""

    html: str = Field(..., description="Markup the issue was found in")
    issue: IssueOut


# --- Responses ---


class ScanResponse(BaseModel):
    """Response for POST /scan."""

    tier: Literal["standard", "full"]
    issues: List[IssueOut] = Field(default_factory=list)
    summary: Dict[str, int] = Field(default_factory=dict, description="Issue count per severity")


class SiteScanResponse(BaseModel):
    """Response for POST /scan/site."""

    issues: List[IssueOut] = Field(default_factory=list)


class FixResponse(BaseModel):
    """Response for POST /fix."""

    html: str = Field(..., description="Markup with the fix applied")


class ErrorDetail(BaseModel):
    """Error response detail."""

    detail: str = Field(..., description="Error message")
