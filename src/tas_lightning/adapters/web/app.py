"""Starlette web adapter serving the lightning API and the map page."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette

from tas_lightning.adapters.config import AppConfig

from .api_routes import LightningApi
from .rate_limit_middleware import RateLimitMiddleware
from .static_files import static_mount

if TYPE_CHECKING:
    from starlette.routing import BaseRoute

    from tas_lightning.application.services import LineFeatureService, ScanService
    from tas_lightning.domain.ports import StationRepository

logger = logging.getLogger(__name__)


def create_app(
    config: AppConfig,
    scan_service: ScanService,
    line_service: LineFeatureService,
    station_repository: StationRepository,
) -> Starlette:
    """Build the ASGI application. API routes take precedence over static files."""
    api = LightningApi(
        scan_service,
        line_service,
        station_repository,
        default_minutes=config.default_minutes,
        default_radius_km=config.default_radius_km,
    )
    routes: list[BaseRoute] = list(api.routes())
    mount = static_mount(config.static_dir)
    if mount is not None:
        routes.append(mount)

    app = Starlette(routes=routes)
    app.add_middleware(RateLimitMiddleware, requests_per_minute=config.rate_limit_per_minute)
    return app


class LightningWebServer:
    """Runs the web application with uvicorn."""

    def __init__(self, app: Starlette, config: AppConfig) -> None:
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        self.app = app
        self.config = config
        self._server: Any | None = None

    async def start(self) -> None:
        """Start serving. Returns when the server shuts down."""
        import uvicorn

        uvicorn_config = uvicorn.Config(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(uvicorn_config)
        logger.info(f"Lightning monitor running on http://{self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        if self._server is not None:
            self._server.should_exit = True
