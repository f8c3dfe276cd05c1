"""
cardserver/assets/filesystem_source.py

Filesystem implementation of the AssetSource interface.

Every candidate path is canonicalised and checked for containment in the
root before it is touched, for the direct lookup and for the fallback
lookup under FALLBACK_SUBDIR alike. Reads go through anyio so file I/O runs
in worker threads and never stalls the event loop.
"""

from __future__ import annotations

import posixpath
import re
from pathlib import Path
from typing import AsyncIterator, Optional

import anyio
from anyio import AsyncFile

from cardserver.assets.base import AssetSource, ResolvedAsset
from cardserver.assets.content_types import content_type_for
from cardserver.core.config import settings
from cardserver.core.constants import FALLBACK_SUBDIR, READ_CHUNK_SIZE
from cardserver.core.exceptions import AssetNotFoundError, PathEscapeError
from cardserver.core.logger import get_logger

logger = get_logger(__name__)

# One or more "../" segments at the start of a normalised relative path.
_LEADING_PARENTS = re.compile(r"^(?:\.\.(?:/|$))+")


def to_relative(request_path: str) -> str:
    """
    Turn a decoded request path into a root-relative path.

    The path is normalised, the leading slash dropped and any leading
    parent-directory segments removed:

        "/css/../style.css"  → "style.css"
        "/../../etc/passwd"  → "etc/passwd"
        "/"                  → "."
    """
    normalised = posixpath.normpath(request_path)
    relative = _LEADING_PARENTS.sub("", normalised.lstrip("/"))
    return relative or "."


class FilesystemAssetSource(AssetSource):
    """
    AssetSource serving regular files from a single root directory.

    The root is canonicalised once on construction and never changes, so
    one instance can be shared by all concurrent requests.
    """

    def __init__(
        self,
        root: str | Path | None = None,
        chunk_size: int = READ_CHUNK_SIZE,
    ) -> None:
        """
        Args:
            root       : Directory to serve. Defaults to ``settings.static_root``.
            chunk_size : Bytes per read while streaming.
        """
        self._root = Path(root or settings.static_root).resolve()
        self._chunk_size = chunk_size

        if not self._root.is_dir():
            logger.warning("Static root '%s' is not a directory — every request will 404.", self._root)
        else:
            logger.info("FilesystemAssetSource ready — root=%s", self._root)

    @property
    def root(self) -> Path:
        return self._root

    # ── AssetSource interface ──────────────────────────────────────────────────

    def resolve(self, request_path: str) -> ResolvedAsset:
        """Try the path under the root, then under FALLBACK_SUBDIR."""
        if "\x00" in request_path:
            raise AssetNotFoundError("Request path contains a NUL byte.")

        relative = to_relative(request_path)
        escaped = False

        for base in (self._root, self._root / FALLBACK_SUBDIR):
            joined = base / relative
            try:
                canonical = self._contained(joined)
            except PathEscapeError as exc:
                logger.warning("Rejected '%s' — %s", request_path, exc)
                escaped = True
                continue

            if canonical is not None and canonical.is_file():
                return ResolvedAsset(
                    path=canonical,
                    content_type=content_type_for(joined),
                    size=canonical.stat().st_size,
                )

        if escaped:
            raise PathEscapeError(f"'{request_path}' resolves outside the static root.")
        raise AssetNotFoundError(f"No file for '{request_path}'.")

    async def open_stream(self, asset: ResolvedAsset) -> AsyncIterator[bytes]:
        try:
            handle = await anyio.open_file(asset.path, "rb")
        except OSError as exc:
            raise AssetNotFoundError(f"'{asset.path.name}' could not be opened: {exc}") from exc

        return self._iter_chunks(handle, asset)

    # ── Internals ──────────────────────────────────────────────────────────────

    def _contained(self, candidate: Path) -> Optional[Path]:
        """
        Return the canonical form of *candidate*, or None if it cannot be resolved.

        Raises:
            PathEscapeError: The canonical path is outside the root.
        """
        try:
            canonical = candidate.resolve()
        except (OSError, RuntimeError):
            # RuntimeError: symlink loop on older interpreters.
            return None

        if not canonical.is_relative_to(self._root):
            raise PathEscapeError(f"canonical path '{canonical}' is outside '{self._root}'")
        return canonical

    async def _iter_chunks(self, handle: AsyncFile, asset: ResolvedAsset) -> AsyncIterator[bytes]:
        """
        Yield the file in chunks, closing it however iteration ends.

        Headers are already on the wire by the time this runs, so a read
        failure is logged and re-raised: the server then drops the connection
        instead of finishing a truncated 200.
        """
        sent = 0
        async with handle:
            try:
                while True:
                    chunk = await handle.read(self._chunk_size)
                    if not chunk:
                        break
                    sent += len(chunk)
                    yield chunk
            except OSError as exc:
                logger.error(
                    "Read failed for '%s' after %d of %d byte(s): %s",
                    asset.path,
                    sent,
                    asset.size,
                    exc,
                )
                raise
