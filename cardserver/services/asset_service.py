"""
cardserver/services/asset_service.py

Orchestrates one static-file request:

    raw request target
      └─ decode_path()               → decoded path (query dropped, "/" → entry)
           └─ AssetSource.resolve()  → ResolvedAsset
                └─ AssetSource.open_stream() → ServedAsset

The source is constructor-injected so tests can swap in a mock or a
source rooted at a temporary directory; the module-level singleton wires
in the production filesystem source.
"""

from __future__ import annotations

from urllib.parse import unquote

import anyio.to_thread

from cardserver.assets.base import AssetSource, ServedAsset
from cardserver.assets.filesystem_source import FilesystemAssetSource
from cardserver.core.constants import ENTRY_PATH
from cardserver.core.exceptions import MalformedPathError
from cardserver.core.logger import get_logger

logger = get_logger(__name__)


class AssetService:
    """
    Turns a raw request target into an open, streamable asset.

    Every lookup failure surfaces as AssetNotFoundError (or a subclass);
    the controller maps all of them onto the same 404.
    """

    def __init__(self, source: AssetSource | None = None) -> None:
        self._source: AssetSource = source or FilesystemAssetSource()

    # ── Public API ─────────────────────────────────────────────────────────────

    def decode_path(self, target: str) -> str:
        """
        Strip the query string and percent-decode the request target.

        Args:
            target : Raw request target as received, e.g. "/caf%C3%A9.png?v=2".

        Returns:
            The decoded path, with "" and "/" replaced by ENTRY_PATH.

        Raises:
            MalformedPathError : The escapes or literal bytes are not valid
                                 UTF-8, or the decoded path contains a NUL byte.
        """
        path = target.split("?", 1)[0]

        try:
            decoded = unquote(path, encoding="utf-8", errors="strict")
        except UnicodeDecodeError as exc:
            raise MalformedPathError(f"Undecodable request path '{path}': {exc}") from exc

        try:
            decoded.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise MalformedPathError(f"Request path contains bytes that are not UTF-8: {exc}") from exc

        if "\x00" in decoded:
            raise MalformedPathError(f"Request path '{path}' contains a NUL byte.")

        if decoded in ("", "/"):
            return ENTRY_PATH
        return decoded

    async def fetch(self, target: str) -> ServedAsset:
        """
        Resolve and open the file a request target maps onto.

        Returns:
            ServedAsset whose body iterator has not been consumed yet.

        Raises:
            AssetNotFoundError : Decoding, resolution or opening failed.
        """
        path = self.decode_path(target)
        # resolve() stats the filesystem; keep it off the event loop.
        asset = await anyio.to_thread.run_sync(self._source.resolve, path)
        body = await self._source.open_stream(asset)

        logger.debug(
            "Serving '%s' → %s (%d bytes, %s)",
            path,
            asset.path,
            asset.size,
            asset.content_type,
        )
        return ServedAsset(asset=asset, body=body)


# ── Module-level singleton ─────────────────────────────────────────────────────
# The controller imports this instance. Tests construct AssetService directly
# with an injected source.

asset_service = AssetService()
