"""Tests for serving the map page from the static directory."""

from pathlib import Path

from starlette.applications import Starlette
from starlette.testclient import TestClient

from tas_lightning.adapters.web.static_files import static_mount


def test_missing_directory_gives_no_mount(tmp_path: Path) -> None:
    assert static_mount(tmp_path / "public") is None


def test_index_is_served_with_cache_headers(tmp_path: Path) -> None:
    """Given a public directory with index.html, when requesting /, then it is served for a minute."""
    (tmp_path / "index.html").write_text("<h1>Lightning</h1>")
    mount = static_mount(tmp_path)
    assert mount is not None

    response = TestClient(Starlette(routes=[mount])).get("/")

    assert response.status_code == 200
    assert "Lightning" in response.text
    assert response.headers["cache-control"] == "public, max-age=60, must-revalidate"


def test_unknown_file_is_not_found(tmp_path: Path) -> None:
    mount = static_mount(tmp_path)
    assert mount is not None

    response = TestClient(Starlette(routes=[mount])).get("/missing.js")

    assert response.status_code == 404
