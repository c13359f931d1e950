"""ArcGIS line feature repository adapter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from tas_lightning.adapters.api_request_logger import log_api_request
from tas_lightning.adapters.arcgis_api.constants import (
    BASE_QUERY_PARAMS,
    ESRI_JSON_FORMAT,
    GA_TRANSMISSION_LINES_QUERY_URL,
    GEOJSON_FORMAT,
)
from tas_lightning.domain.errors import NetworkError

if TYPE_CHECKING:
    from tas_lightning.domain.models import BoundingBox

logger = logging.getLogger(__name__)


class ArcGisLineRepository:
    """Queries an ArcGIS MapServer layer for features intersecting an envelope."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        query_url: str = GA_TRANSMISSION_LINES_QUERY_URL,
        timeout_seconds: float = 20,
    ) -> None:
        self._session = session
        self.query_url = query_url
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @staticmethod
    def build_params(bbox: BoundingBox, output_format: str) -> dict[str, str]:
        """Query parameters for an envelope intersection query in the given format."""
        return {**BASE_QUERY_PARAMS, "geometry": bbox.to_envelope(), "f": output_format}

    async def query_geojson(self, bbox: BoundingBox) -> Any | None:
        """Query in GeoJSON format. Returns None instead of raising if the call fails."""
        try:
            return await self._query(bbox, GEOJSON_FORMAT)
        except NetworkError as e:
            logger.warning(f"GeoJSON query failed, ESRI JSON will be tried: {e}")
            return None

    async def query_esri_json(self, bbox: BoundingBox) -> dict[str, Any]:
        """Query in ESRI JSON format.

        Raises:
            NetworkError: The request failed, returned a non-2xx status or an unparsable body.
        """
        body = await self._query(bbox, ESRI_JSON_FORMAT)
        if not isinstance(body, dict):
            raise NetworkError(
                "Mapping service returned an unexpected ESRI JSON body", url=self.query_url
            )
        return body

    async def _query(self, bbox: BoundingBox, output_format: str) -> Any:
        params = self.build_params(bbox, output_format)
        log_api_request("GET", self.query_url, params)

        try:
            async with self._session.get(
                self.query_url, params=params, timeout=self.timeout
            ) as response:
                if not response.ok:
                    error_text = await response.text()
                    raise NetworkError(
                        f"Mapping service returned status {response.status}: {error_text[:200]}",
                        url=self.query_url,
                        status_code=response.status,
                    )
                return await response.json(content_type=None)
        except (aiohttp.ClientError, TimeoutError) as e:
            raise NetworkError(f"Mapping service request failed: {e}", url=self.query_url) from e
        except ValueError as e:
            raise NetworkError(
                f"Mapping service returned invalid JSON: {e}", url=self.query_url
            ) from e
