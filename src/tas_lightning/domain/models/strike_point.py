"""Strike point domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StrikePoint(BaseModel):
    """A single lightning strike as reported by the provider.

    Values are taken verbatim from the provider record; only the fields below are kept.
    Apart from the coordinates they are passed through without validation.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    lat: float
    lon: float
    date_time: Any = Field(default=None, alias="dateTime")
    type: Any = None
    amp: Any = None
    polarity: Any = None

    @property
    def dedup_key(self) -> tuple[str, str, str | None]:
        """Key under which two reports count as the same strike.

        Coordinates are rounded to four decimal places (roughly 11 m).
        """
        date_time = self.date_time
        if date_time is not None and not isinstance(date_time, str):
            date_time = str(date_time)
        return (f"{self.lat:.4f}", f"{self.lon:.4f}", date_time)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
