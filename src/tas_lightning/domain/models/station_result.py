"""Per-station scan result domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer

from tas_lightning.domain.models.strike_point import StrikePoint


class StationResult(BaseModel):
    """Strikes found around one station and the distance to the closest of them."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    station: str
    lat: float
    lon: float
    nearest_km: float | None = Field(default=None, alias="nearestKm")
    strikes: list[StrikePoint] = Field(default_factory=list)
    error: dict[str, Any] | None = None

    @property
    def degraded(self) -> bool:
        return self.error is not None

    @model_serializer(mode="wrap")
    def _omit_missing_error(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        if data.get("error") is None:
            data.pop("error", None)
        return data
