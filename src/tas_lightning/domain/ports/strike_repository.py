"""Strike repository port."""

from typing import Protocol

from tas_lightning.domain.models.scan_request import StrikeQuery
from tas_lightning.domain.models.station import Station
from tas_lightning.domain.models.strike_point import StrikePoint


class StrikeRepository(Protocol):
    """Port for retrieving lightning strikes around a station."""

    def ensure_configured(self) -> None:
        """Raise ConfigurationError if the provider cannot be queried at all."""
        ...

    async def fetch_strikes(self, station: Station, query: StrikeQuery) -> list[StrikePoint]:
        """Get strikes near a station.

        Raises ProviderError for failures scoped to this station and NetworkError
        for connection-level failures.
        """
        ...
