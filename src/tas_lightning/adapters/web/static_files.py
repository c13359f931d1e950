"""Static file mounting with short-lived cache headers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.routing import Mount
from starlette.staticfiles import StaticFiles

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

logger = logging.getLogger(__name__)

CACHE_CONTROL = b"public, max-age=60, must-revalidate"


class StaticFileCacheApp:
    """ASGI app wrapper that adds cache headers to static file responses."""

    def __init__(self, static_files: StaticFiles) -> None:
        self.static_files = static_files

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        async def send_with_cache_headers(message: MutableMapping[str, Any]) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                if not any(name.lower() == b"cache-control" for name, _ in headers):
                    headers.append((b"cache-control", CACHE_CONTROL))
                    message["headers"] = headers
            await send(message)

        await self.static_files(scope, receive, send_with_cache_headers)


def static_mount(static_dir: str | Path) -> Mount | None:
    """Mount serving `static_dir` at the site root, or None if the directory is missing.

    Relative paths are tried against the working directory and then the project root.
    """
    candidates = [Path(static_dir)]
    if not Path(static_dir).is_absolute():
        candidates.append(Path(__file__).parent.parent.parent.parent.parent / static_dir)

    for path in candidates:
        if path.is_dir():
            logger.info(f"Serving static files from {path} with 1-minute cache headers")
            app = StaticFileCacheApp(StaticFiles(directory=str(path), html=True))
            return Mount("/", app=app, name="static")

    logger.warning(f"Static directory not found at any of: {[str(p) for p in candidates]}")
    return None
