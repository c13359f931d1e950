"""Main entry point for the lightning proximity monitor."""

import asyncio
import logging
import sys

import aiohttp

from tas_lightning.adapters.arcgis_api import ArcGisLineRepository
from tas_lightning.adapters.config import AppConfig, StationFileRepository
from tas_lightning.adapters.web import LightningWebServer, create_app
from tas_lightning.adapters.xweather_api import XweatherStrikeRepository
from tas_lightning.application.services import LineFeatureService, ScanService
from tas_lightning.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_services(
    config: AppConfig, session: aiohttp.ClientSession
) -> tuple[StationFileRepository, ScanService, LineFeatureService]:
    """Wire repositories and services for the given configuration."""
    station_repo = StationFileRepository(config.stations_file)
    strike_repo = XweatherStrikeRepository(
        session,
        client_id=config.xweather_client_id,
        client_secret=config.xweather_client_secret,
        base_url=config.xweather_base_url,
        timeout_seconds=config.xweather_timeout_seconds,
        limit=config.xweather_strike_limit,
    )
    line_repo = ArcGisLineRepository(
        session,
        query_url=config.lines_service_url,
        timeout_seconds=config.lines_timeout_seconds,
    )
    scan_service = ScanService(
        strike_repo,
        station_repo.list_stations(),
        max_concurrent_requests=config.xweather_max_concurrent_requests,
    )
    return station_repo, scan_service, LineFeatureService(line_repo)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    if not config.has_xweather_credentials:
        logger.warning("XWEATHER_CLIENT_ID/SECRET not set, scans will fail until they are")

    async with aiohttp.ClientSession() as session:
        try:
            station_repo, scan_service, line_service = build_services(config, session)
        except ConfigurationError as e:
            logger.error(f"Invalid configuration: {e}")
            sys.exit(1)

        logger.info(f"Monitoring {len(scan_service.stations)} station(s)")
        app = create_app(config, scan_service, line_service, station_repo)
        server = LightningWebServer(app, config)
        try:
            await server.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await server.stop()


def run() -> None:
    """Console script entry point."""
    configure_logging()
    asyncio.run(main())


if __name__ == "__main__":
    run()
