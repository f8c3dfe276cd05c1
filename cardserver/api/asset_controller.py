"""
cardserver/api/asset_controller.py

Handles every incoming request: the whole URL space is a file lookup.

This layer is responsible only for HTTP concerns:
  - Recovering the raw (still percent-encoded) request target.
  - Delegating decoding, resolution and opening to AssetService.
  - Translating the outcome into a streamed file or a plain-text 404.

The HTTP method is not inspected; any verb is a retrieval attempt.

Responses:
  200  The file's bytes, streamed, with Content-Type from the extension table.
  404  "Not found" as text/plain. Used for missing files, directories,
       paths escaping the static root and undecodable paths alike.
"""

from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response, StreamingResponse

from cardserver.core.constants import NOT_FOUND_BODY
from cardserver.core.exceptions import AssetNotFoundError, PathEscapeError
from cardserver.core.logger import get_logger
from cardserver.services.asset_service import asset_service

logger = get_logger(__name__)

router = APIRouter(tags=["Assets"])

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


# ── Helpers ────────────────────────────────────────────────────────────────────

def _not_found() -> PlainTextResponse:
    """Return the one 404 shape used for every failure."""
    return PlainTextResponse(NOT_FOUND_BODY, status_code=404)


def _request_target(request: Request) -> str:
    """
    Return the request path exactly as the client sent it.

    ASGI servers put the undecoded bytes in scope["raw_path"]. Literal
    non-ASCII bytes are read as UTF-8; invalid ones survive as surrogates
    so the service can reject them. When a server omits raw_path, re-quote
    the already-decoded path so decoding stays one step.
    """
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.decode("utf-8", "surrogateescape")
    return quote(request.url.path)


# ── Endpoint ───────────────────────────────────────────────────────────────────

@router.api_route("/{asset_path:path}", methods=_ALL_METHODS, include_in_schema=False)
async def serve_asset(request: Request) -> Response:
    """Stream the file the request path maps onto, or answer 404."""
    target = _request_target(request)

    try:
        served = await asset_service.fetch(target)

    except PathEscapeError as exc:
        logger.warning("%s %s → 404 (escape attempt): %s", request.method, target, exc)
        return _not_found()

    except AssetNotFoundError as exc:
        logger.info("%s %s → 404: %s", request.method, target, exc)
        return _not_found()

    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected error serving %s: %s", target, exc)
        return _not_found()

    logger.info("%s %s → 200 %s", request.method, target, served.asset.content_type)
    return StreamingResponse(
        served.body,
        status_code=200,
        media_type=served.asset.content_type,
    )
