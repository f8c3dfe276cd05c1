"""
cardserver/core/constants.py

Application-wide fixed constants.

These are part of the server's HTTP contract and are NOT configurable via
environment variables.
"""

from typing import Dict

# ── Listener ───────────────────────────────────────────────────────────────────

#: Port used when PORT is unset or unusable.
DEFAULT_PORT: int = 10000

# ── Path mapping ───────────────────────────────────────────────────────────────

#: Document served for the bare "/" path.
ENTRY_PATH: str = "/src/index.html"

#: Second place a request path is looked up when the root-relative lookup misses.
FALLBACK_SUBDIR: str = "src"

# ── Content types ──────────────────────────────────────────────────────────────

#: Lowercase extension (dot included) → Content-Type header value.
CONTENT_TYPES: Dict[str, str] = {
    ".html": "text/html; charset=utf-8",
    ".js": "text/javascript; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".webp": "image/webp",
    ".json": "application/json",
    ".ico": "image/x-icon",
}

#: Content type for any extension missing from CONTENT_TYPES.
DEFAULT_CONTENT_TYPE: str = "application/octet-stream"

# ── Responses ──────────────────────────────────────────────────────────────────

#: Plain-text body of every 404 response.
NOT_FOUND_BODY: str = "Not found"

#: Bytes read from disk per streamed chunk.
READ_CHUNK_SIZE: int = 64 * 1024
