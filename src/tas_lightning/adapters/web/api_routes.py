"""JSON API endpoints for stations, lightning scans and transmission lines."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from starlette.responses import JSONResponse
from starlette.routing import Route

from tas_lightning.domain.errors import ConfigurationError, ValidationError
from tas_lightning.domain.models import ErrorDetails, ScanRequest

if TYPE_CHECKING:
    from collections.abc import Mapping

    from starlette.requests import Request

    from tas_lightning.application.services import LineFeatureService, ScanService
    from tas_lightning.domain.ports import StationRepository

logger = logging.getLogger(__name__)


def _parse_number(params: Mapping[str, str], name: str, default: float) -> float:
    raw = params.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValidationError(f"{name} must be a positive number") from e
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"{name} must be a positive number")
    return value


def parse_scan_request(
    params: Mapping[str, str], default_minutes: float = 15, default_radius_km: float = 50
) -> ScanRequest:
    """Build a ScanRequest from `minutes`, `radiusKm` and `includeIC` query parameters.

    `includeIC` is only enabled by the literal string "true".
    """
    return ScanRequest(
        minutes=_parse_number(params, "minutes", default_minutes),
        radius_km=_parse_number(params, "radiusKm", default_radius_km),
        include_ic=params.get("includeIC", "false") == "true",
    )


def error_response(details: ErrorDetails) -> JSONResponse:
    return JSONResponse(details.to_payload(), status_code=details.status_code or 500)


class LightningApi:
    """Request handlers translating HTTP queries into service calls."""

    def __init__(
        self,
        scan_service: ScanService,
        line_service: LineFeatureService,
        station_repository: StationRepository,
        default_minutes: float = 15,
        default_radius_km: float = 50,
    ) -> None:
        self.scan_service = scan_service
        self.line_service = line_service
        self.station_repository = station_repository
        self.default_minutes = default_minutes
        self.default_radius_km = default_radius_km

    def routes(self) -> list[Route]:
        return [
            Route("/api/stations", self.stations, methods=["GET"]),
            Route("/api/scan", self.scan, methods=["GET"]),
            Route("/api/lines", self.lines, methods=["GET"]),
        ]

    async def stations(self, _request: Request) -> JSONResponse:
        stations = self.station_repository.list_stations()
        return JSONResponse({"stations": [station.to_dict() for station in stations]})

    async def scan(self, request: Request) -> JSONResponse:
        """GET /api/scan?minutes=15&radiusKm=50&includeIC=false"""
        try:
            scan_request = parse_scan_request(
                request.query_params, self.default_minutes, self.default_radius_km
            )
            result = await self.scan_service.scan(scan_request)
        except ValidationError as e:
            return error_response(ErrorDetails(status_code=400, reason=str(e)))
        except ConfigurationError as e:
            logger.error(f"Scan not possible: {e}")
            return error_response(ErrorDetails(status_code=500, reason=str(e)))
        except Exception as e:
            logger.error(f"Scan failed: {e}", exc_info=True)
            return error_response(ErrorDetails(status_code=500, reason=str(e)))
        return JSONResponse(result.to_dict())

    async def lines(self, request: Request) -> JSONResponse:
        """GET /api/lines?xmin=&ymin=&xmax=&ymax= (WGS84)"""
        try:
            collection = await self.line_service.fetch_lines(request.query_params)
        except ValidationError as e:
            return error_response(ErrorDetails(status_code=400, reason=str(e)))
        except Exception as e:
            logger.error(f"Line lookup failed: {e}", exc_info=True)
            return error_response(ErrorDetails(status_code=500, reason=str(e)))
        return JSONResponse(collection)
