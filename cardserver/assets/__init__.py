"""cardserver/assets/__init__.py — public API of the assets package."""

from cardserver.assets.base import AssetSource, ResolvedAsset, ServedAsset
from cardserver.assets.content_types import content_type_for
from cardserver.assets.filesystem_source import FilesystemAssetSource

__all__ = [
    "AssetSource",
    "ResolvedAsset",
    "ServedAsset",
    "FilesystemAssetSource",
    "content_type_for",
]
