"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from cardserver.api import asset_controller
from cardserver.assets.filesystem_source import FilesystemAssetSource
from cardserver.main import app
from cardserver.services.asset_service import AssetService


INDEX_HTML = b"<!DOCTYPE html><html><body><h1>Hola</h1></body></html>"
STYLE_CSS = b"body { background: #ffe4ec; }\n"
SCRIPT_JS = b"window.ValentineApp = {};\n"
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"
SECRET = b"root:x:0:0:root:/root:/bin/bash\n"


# ── Site fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """
    A static root laid out like the greeting-card site:

        site/
          style.css
          app.js
          src/index.html
          src/only-in-src.js
          media/Logo.PNG
          data.bin
        secret.txt          ← outside the root, must never be served
    """
    root = tmp_path / "site"
    (root / "src").mkdir(parents=True)
    (root / "media").mkdir()

    (root / "src" / "index.html").write_bytes(INDEX_HTML)
    (root / "src" / "only-in-src.js").write_bytes(SCRIPT_JS)
    (root / "style.css").write_bytes(STYLE_CSS)
    (root / "app.js").write_bytes(SCRIPT_JS)
    (root / "media" / "Logo.PNG").write_bytes(PNG_BYTES)
    (root / "data.bin").write_bytes(bytes(range(256)))

    (tmp_path / "secret.txt").write_bytes(SECRET)
    return root


@pytest.fixture
def source(site_root: Path) -> FilesystemAssetSource:
    return FilesystemAssetSource(root=site_root)


# ── Core client fixtures ───────────────────────────────────────────────────────

@pytest.fixture
def patched_service(source: FilesystemAssetSource, monkeypatch: pytest.MonkeyPatch) -> AssetService:
    """Point the controller's service at the temporary site instead of ./site."""
    service = AssetService(source=source)
    monkeypatch.setattr(asset_controller, "asset_service", service)
    return service


@pytest.fixture
def client(patched_service: AssetService) -> TestClient:
    """A synchronous TestClient wrapping the FastAPI app."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
