"""Scan result domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tas_lightning.domain.models.station_result import StationResult
from tas_lightning.domain.models.strike_point import StrikePoint
from tas_lightning.domain.numbers import compact_number


class ScanResult(BaseModel):
    """Outcome of a scan across all stations."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    updated_at: str = Field(alias="updatedAt")
    minutes: int | float
    radius_km: int | float = Field(alias="radiusKm")
    results: list[StationResult]
    points: list[StrikePoint]

    @field_validator("minutes", "radius_km")
    @classmethod
    def _echo_whole_numbers_as_int(cls, value: float) -> int | float:
        return compact_number(value)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready payload with camelCase keys."""
        return self.model_dump(by_alias=True)
