"""FastAPI app: /health, /scan, /scan/site, /scan/report, /fix."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import fix_router, health_router, root_router, scan_router
from .startup import validate_config

app = FastAPI(
    title="Web Accessibility Checker API",
    description="Rule-based WCAG checks on page markup, with mechanical fixes where derivable.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(scan_router)
app.include_router(fix_router)


@app.on_event("startup")
def _validate_config() -> None:
    """Validate config at startup and set up logging."""
    validate_config()
