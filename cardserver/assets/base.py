"""
cardserver/assets/base.py

Abstract interface for the asset layer.

Design goals:
  - The service depends only on this interface, never on the filesystem.
  - ResolvedAsset and ServedAsset are the shared vocabulary across layers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator


# ── Shared data-transfer objects ──────────────────────────────────────────────

@dataclass(frozen=True)
class ResolvedAsset:
    """
    A file under the root directory that a request path maps onto.

    Attributes:
        path         : Canonical path of the file (inside the root).
        content_type : Value for the Content-Type response header.
        size         : File size in bytes at resolution time.
    """

    path: Path
    content_type: str
    size: int


@dataclass
class ServedAsset:
    """
    A resolved asset whose file is already open.

    Attributes:
        asset : The resolved file.
        body  : Async iterator yielding the file's bytes chunk by chunk.
    """

    asset: ResolvedAsset
    body: AsyncIterator[bytes]


# ── Abstract base ──────────────────────────────────────────────────────────────

class AssetSource(ABC):
    """
    Contract every asset backend must fulfil.

    Concrete implementations (e.g. FilesystemAssetSource) own the root they
    serve from and enforce that nothing outside it is ever returned.
    """

    @abstractmethod
    def resolve(self, request_path: str) -> ResolvedAsset:
        """
        Map a decoded request path onto a servable file.

        Args:
            request_path: Percent-decoded path without query string
                          (e.g. "/style.css").

        Returns:
            The ResolvedAsset for the matching regular file.

        Raises:
            AssetNotFoundError: No regular file matches.
            PathEscapeError:    The path resolves outside the root.
        """

    @abstractmethod
    async def open_stream(self, asset: ResolvedAsset) -> AsyncIterator[bytes]:
        """
        Open the asset and return an iterator over its bytes.

        The file is opened before this coroutine returns, so an open failure
        is reported while a 404 can still be sent. Reading happens lazily as
        the iterator is consumed.

        Raises:
            AssetNotFoundError: The file could not be opened.
        """
