"""Fix route: apply an issue's suggested fix to page markup."""

from fastapi import APIRouter, HTTPException

from accessibility_checker import FixNotApplicableError, MarkupParseError

from ..schemas import ErrorDetail, FixRequest, FixResponse
from ..utils import checker_svc, ensure_size

router = APIRouter()


@router.post(
    "/fix",
    response_model=FixResponse,
    responses={
        400: {"model": ErrorDetail, "description": "Unparseable markup"},
        413: {"model": ErrorDetail, "description": "Markup above the size limit"},
        422: {"model": ErrorDetail, "description": "The fix cannot be applied"},
    },
)
def fix(req: FixRequest) -> FixResponse:
    """Return the markup with the issue's element replaced by its fix.

    Recording the issue as fixed is up to the caller's storage.
    """
    ensure_size(req.html)
    try:
        patched = checker_svc.apply_fix(req.html, req.issue)
    except MarkupParseError as e:
        raise HTTPException(400, str(e))
    except FixNotApplicableError as e:
        raise HTTPException(422, str(e))
    return FixResponse(html=patched)
