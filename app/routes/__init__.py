"""Route handlers."""

from .fix import router as fix_router
from .health import router as health_router
from .root import router as root_router
from .scan import router as scan_router

__all__ = ["root_router", "health_router", "scan_router", "fix_router"]
