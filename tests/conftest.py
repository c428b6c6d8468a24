"""Shared fixtures: a throwaway static root and an in-process client."""

import pytest
from httpx import AsyncClient, ASGITransport

from e2e_server.app import create_app
from e2e_server.config import get_settings

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256))


@pytest.fixture
def public_dir(tmp_path):
    root = tmp_path / "public"
    (root / "assets").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "index.html").write_text("<html></html>")
    (root / "assets" / "app.css").write_text("body { margin: 0; }")
    (root / "assets" / "logo.png").write_bytes(PNG_BYTES)
    (root / "docs" / "index.html").write_text("<html>docs</html>")
    (root / ".env").write_text("SECRET=1")
    (tmp_path / "secret.txt").write_text("outside the static root")
    return root


@pytest.fixture
async def client(public_dir):
    app = create_app(get_settings(STATIC_DIR=str(public_dir)))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
