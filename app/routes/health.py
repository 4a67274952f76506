"""Health check route."""

from fastapi import APIRouter

from accessibility_checker import RULES

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check, with the number of loaded rules."""
    return {"status": "ok", "rules": len(RULES)}
