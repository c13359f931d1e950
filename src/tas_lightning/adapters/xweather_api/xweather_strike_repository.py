"""Xweather strike repository adapter.

API documentation: https://www.xweather.com/docs/weather-api/endpoints/lightning
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from tas_lightning.adapters.api_request_logger import log_api_request
from tas_lightning.adapters.xweather_api.constants import (
    BAD_JSON_DESCRIPTION,
    TIMEOUT_DESCRIPTION,
    XWEATHER_API_BASE_URL,
    XWEATHER_LIGHTNING_PATH,
    XWEATHER_STRIKE_LIMIT,
)
from tas_lightning.adapters.xweather_api.strike_parser import StrikeParser
from tas_lightning.domain.errors import ConfigurationError, NetworkError, ProviderError
from tas_lightning.domain.numbers import format_number

if TYPE_CHECKING:
    from tas_lightning.domain.models import Station, StrikePoint, StrikeQuery

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_MESSAGE = "Missing XWEATHER_CLIENT_ID/SECRET env vars"


class XweatherStrikeRepository:
    """Adapter fetching lightning strikes around a point from Xweather."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        client_id: str | None,
        client_secret: str | None,
        base_url: str = XWEATHER_API_BASE_URL,
        timeout_seconds: float = 10,
        limit: int = XWEATHER_STRIKE_LIMIT,
    ) -> None:
        """Initialize the repository.

        Args:
            session: Shared aiohttp session.
            client_id: Xweather client ID.
            client_secret: Xweather client secret.
            base_url: API base URL, without trailing slash.
            timeout_seconds: Total timeout for a single request.
            limit: Maximum number of strikes requested per station.
        """
        self._session = session
        self._client_id = client_id
        self._client_secret = client_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self.limit = limit

    def ensure_configured(self) -> None:
        """Raise ConfigurationError when credentials are missing."""
        if not self._client_id or not self._client_secret:
            raise ConfigurationError(MISSING_CREDENTIALS_MESSAGE)

    def build_url(self, station: Station) -> str:
        """URL of the lightning endpoint for a station, coordinates as `lat,lon`."""
        return self.base_url + XWEATHER_LIGHTNING_PATH.format(lat=station.lat, lon=station.lon)

    def build_params(self, query: StrikeQuery) -> dict[str, str]:
        """Query string parameters for a strike query."""
        self.ensure_configured()
        params = {
            "radius": format_number(query.radius_km),
            "limit": str(self.limit),
            "format": "json",
            "from": query.window.start_param,
            "to": query.window.end_param,
            "client_id": str(self._client_id),
            "client_secret": str(self._client_secret),
        }
        if query.strike_filter:
            params["filter"] = query.strike_filter
        return params

    async def fetch_strikes(self, station: Station, query: StrikeQuery) -> list[StrikePoint]:
        """Get strikes around a station.

        Raises:
            ProviderError: The provider reported failure, sent an unparsable body,
                or did not answer in time.
            NetworkError: The request could not be made at all.
        """
        url = self.build_url(station)
        params = self.build_params(query)
        log_api_request("GET", url, params)

        try:
            async with self._session.get(url, params=params, timeout=self.timeout) as response:
                body = await self._read_body(response)
        except TimeoutError as e:
            raise ProviderError(TIMEOUT_DESCRIPTION) from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"Xweather request failed: {e}", url=url) from e

        strikes = StrikeParser.parse_response(body)
        logger.debug(f"Fetched {len(strikes)} strike(s) near station {station.name}")
        return strikes

    @staticmethod
    async def _read_body(response: aiohttp.ClientResponse) -> Any:
        """Decode the JSON body regardless of status; Xweather reports errors in the body."""
        try:
            body = await response.json(content_type=None)
        except ValueError as e:
            logger.warning(f"Xweather returned status {response.status} with unparsable body: {e}")
            raise ProviderError(BAD_JSON_DESCRIPTION) from e
        if body is None:
            raise ProviderError(BAD_JSON_DESCRIPTION)
        return body
