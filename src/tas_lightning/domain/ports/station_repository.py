"""Station repository port."""

from typing import Protocol

from tas_lightning.domain.models.station import Station


class StationRepository(Protocol):
    """Port for retrieving the monitored stations."""

    def list_stations(self) -> list[Station]:
        """Return all stations in their configured order."""
        ...
