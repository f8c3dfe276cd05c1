"""
cardserver/core/exceptions.py

Custom exception hierarchy for the application.

Raising typed exceptions from the asset layer lets the controller collapse
every lookup failure into the same 404 without leaking filesystem details.
"""


class AppBaseException(Exception):
    """Root exception — catch-all for any application-level error."""


# ── Lookup exceptions ──────────────────────────────────────────────────────────

class AssetNotFoundError(AppBaseException):
    """Raised when no regular file under the root matches the request path."""


class PathEscapeError(AssetNotFoundError):
    """Raised when a request path resolves outside the root directory."""


class MalformedPathError(AssetNotFoundError):
    """Raised when the request target cannot be percent-decoded."""
