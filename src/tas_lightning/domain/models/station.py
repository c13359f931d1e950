"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """A power station monitored for nearby lightning."""

    name: str
    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Station {self.name!r} latitude {self.lat} is outside [-90, 90]")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Station {self.name!r} longitude {self.lon} is outside [-180, 180]")

    def to_dict(self) -> dict[str, str | float]:
        """Return the JSON representation used by the stations endpoint."""
        return {"name": self.name, "lat": self.lat, "lon": self.lon}
