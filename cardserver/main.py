"""
cardserver/main.py

FastAPI application entry point.

Responsibilities:
  - Create the FastAPI app with metadata from config
  - Register the catch-all asset router
  - Add a global exception handler for uncaught AppBaseException

The interactive docs and OpenAPI routes are disabled: every path belongs
to the static root.
"""

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from cardserver.api.asset_controller import router as asset_router
from cardserver.core.config import settings
from cardserver.core.constants import NOT_FOUND_BODY
from cardserver.core.exceptions import AppBaseException
from cardserver.core.logger import get_logger

logger = get_logger(__name__)

# ── App instance ───────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Serves the greeting-card page and its assets from a single static root.",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# ── Routers ────────────────────────────────────────────────────────────────────

app.include_router(asset_router)

# ── Global exception handler ───────────────────────────────────────────────────

@app.exception_handler(AppBaseException)
async def app_exception_handler(request: Request, exc: AppBaseException) -> PlainTextResponse:
    """
    Safety-net for any AppBaseException that escapes the controller.
    Every failure is a plain 404 with no detail in the body.
    """
    logger.exception("Unhandled application error on %s: %s", request.url.path, exc)
    return PlainTextResponse(NOT_FOUND_BODY, status_code=404)
