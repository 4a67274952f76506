"""Centralized imports for the entire project (app + accessibility_checker)."""

# Standard library
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

# External
from dotenv import load_dotenv
from fastapi import (
    APIRouter,
    HTTPException,
    Query,
)
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import BaseModel, Field
