"""Scan service: nearest-strike distances for every station in one pass."""

from __future__ import annotations

import asyncio
import logging
from contextlib import AbstractAsyncContextManager, nullcontext
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from tas_lightning.application.services.strike_merging import merge_unique_points
from tas_lightning.domain.errors import NetworkError, ProviderError
from tas_lightning.domain.geodesy import nearest_distance_km
from tas_lightning.domain.models import (
    ScanRequest,
    ScanResult,
    Station,
    StationResult,
    StrikeQuery,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from tas_lightning.domain.ports import StrikeRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ScanService:
    """Fans one strike query out per station and aggregates the answers."""

    def __init__(
        self,
        strike_repository: StrikeRepository,
        stations: Sequence[Station],
        max_concurrent_requests: int = 0,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the scan service.

        Args:
            strike_repository: Repository for fetching strikes around a station.
            stations: Stations to scan, in display order.
            max_concurrent_requests: Cap on in-flight provider queries. 0 means no cap.
            clock: Returns the current time; the scan window ends there.
        """
        if max_concurrent_requests < 0:
            raise ValueError("max_concurrent_requests must be >= 0")
        self.strike_repository = strike_repository
        self.stations = list(stations)
        self.max_concurrent_requests = max_concurrent_requests
        self._clock = clock

    async def scan(self, request: ScanRequest) -> ScanResult:
        """Scan all stations for strikes within the request's radius and time window.

        A failing station only degrades its own result. The call itself fails with
        ConfigurationError before any query when the provider is not configured,
        and with NetworkError once every query has settled if any of them hit a
        connection-level failure.
        """
        self.strike_repository.ensure_configured()

        window = request.window(self._clock())
        query = StrikeQuery(
            radius_km=request.radius_km,
            window=window,
            strike_filter=request.strike_filter,
        )
        logger.debug(
            f"Scanning {len(self.stations)} station(s) from {window.start_param} "
            f"to {window.end_param} within {request.radius_km} km"
        )

        limiter = self._create_limiter()
        outcomes = await asyncio.gather(
            *(self._scan_station(station, query, limiter) for station in self.stations),
            return_exceptions=True,
        )

        results: list[StationResult] = []
        for station, outcome in zip(self.stations, outcomes, strict=True):
            if isinstance(outcome, BaseException):
                logger.error(f"Scan aborted: query for station {station.name} failed: {outcome}")
                if isinstance(outcome, NetworkError):
                    raise outcome
                message = f"Strike query for {station.name} failed: {outcome}"
                raise NetworkError(message) from outcome
            results.append(outcome)

        degraded = sum(1 for result in results if result.degraded)
        if degraded:
            logger.warning(f"Scan finished with {degraded} of {len(results)} station(s) degraded")

        return ScanResult(
            updated_at=window.end_param,
            minutes=request.minutes,
            radius_km=request.radius_km,
            results=results,
            points=merge_unique_points(results),
        )

    def _create_limiter(self) -> AbstractAsyncContextManager[object]:
        if self.max_concurrent_requests:
            return asyncio.Semaphore(self.max_concurrent_requests)
        return nullcontext()

    async def _scan_station(
        self,
        station: Station,
        query: StrikeQuery,
        limiter: AbstractAsyncContextManager[object],
    ) -> StationResult:
        """Query one station. Provider errors become a degraded result instead of raising."""
        try:
            async with limiter:
                strikes = await self.strike_repository.fetch_strikes(station, query)
        except ProviderError as e:
            logger.warning(f"Strike query for station {station.name} failed: {e}")
            return StationResult(
                station=station.name,
                lat=station.lat,
                lon=station.lon,
                nearest_km=None,
                strikes=[],
                error=e.details,
            )

        nearest_km = nearest_distance_km(
            station.lat, station.lon, ((strike.lat, strike.lon) for strike in strikes)
        )
        return StationResult(
            station=station.name,
            lat=station.lat,
            lon=station.lon,
            nearest_km=nearest_km,
            strikes=strikes,
        )
