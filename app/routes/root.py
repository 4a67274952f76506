"""Root route."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

_ROOT_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Web Accessibility Checker API</title>
  <style>
    body { font-family: system-ui, sans-serif; max-width: 42rem; margin: 2rem auto; padding: 0 1rem; color: #1e293b; }
    h1 { font-size: 1.25rem; font-weight: 600; }
    ul { list-style: none; padding: 0; }
    li { margin: 0.5rem 0; }
    a { color: #1d4ed8; text-decoration: underline; }
    a:focus { outline: 2px solid #1d4ed8; }
  </style>
</head>
<body>
  <a href="#main-content">Skip to main content</a>
  <main id="main-content">
    <h1>Web Accessibility Checker API</h1>
    <p>Audits a page's markup against automatable WCAG criteria.</p>
    <ul>
      <li><code>POST /scan</code> with <code>{"html": "...", "tier": "standard"}</code></li>
      <li><code>POST /scan/site</code> with <code>{"pages": ["...", "..."]}</code></li>
      <li><code>POST /scan/report?format=markdown</code> with the same body as <code>/scan</code></li>
      <li><code>POST /fix</code> with <code>{"html": "...", "issue": {...}}</code></li>
    </ul>
    <p><a href="/docs">Swagger UI</a> · <a href="/redoc">ReDoc</a> · <a href="/health">Health</a></p>
  </main>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def root() -> str:
    """Root: welcome page with usage and links."""
    return _ROOT_HTML
