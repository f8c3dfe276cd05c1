"""
cardserver/assets/content_types.py

Content-Type lookup by file extension.
"""

from __future__ import annotations

from pathlib import PurePath

from cardserver.core.constants import CONTENT_TYPES, DEFAULT_CONTENT_TYPE


def content_type_for(path: str | PurePath) -> str:
    """Return the Content-Type for *path*, matching its extension case-insensitively."""
    suffix = PurePath(path).suffix.lower()
    return CONTENT_TYPES.get(suffix, DEFAULT_CONTENT_TYPE)
