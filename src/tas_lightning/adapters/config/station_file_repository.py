"""Station repository backed by a static JSON file."""

import json
import logging
from pathlib import Path
from typing import Any

from tas_lightning.domain.errors import ConfigurationError
from tas_lightning.domain.models import Station

logger = logging.getLogger(__name__)


class StationFileRepository:
    """Loads the monitored stations once and serves them unchanged afterwards.

    The file holds either a JSON list of `{"name", "lat", "lon"}` objects or an
    object with such a list under `"stations"`.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._stations: list[Station] | None = None

    def list_stations(self) -> list[Station]:
        """Return all stations, loading the file on first use."""
        if self._stations is None:
            self._stations = self._load()
            logger.info(f"Loaded {len(self._stations)} station(s) from {self.path}")
        return list(self._stations)

    def _load(self) -> list[Station]:
        if not self.path.exists():
            raise ConfigurationError(f"Stations file not found: {self.path}")

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Stations file {self.path} is not valid JSON: {e}") from e

        entries = data.get("stations") if isinstance(data, dict) else data
        if not isinstance(entries, list):
            raise ConfigurationError(f"Stations file {self.path} must contain a list of stations")

        return [self._parse_station(entry, index) for index, entry in enumerate(entries)]

    def _parse_station(self, entry: Any, index: int) -> Station:
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Station #{index} in {self.path} must be an object")
        try:
            return Station(
                name=str(entry["name"]), lat=float(entry["lat"]), lon=float(entry["lon"])
            )
        except KeyError as e:
            raise ConfigurationError(f"Station #{index} in {self.path} is missing {e}") from e
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Station #{index} in {self.path} is invalid: {e}") from e
