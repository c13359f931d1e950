"""Scan request and time window domain models."""

import math
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

PROVIDER_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_provider_timestamp(value: datetime) -> str:
    """Format a datetime as a UTC timestamp with second precision and a trailing Z."""
    return value.astimezone(UTC).strftime(PROVIDER_TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class ScanWindow:
    """Time window a scan covers. Both ends are UTC and whole seconds."""

    start: datetime
    end: datetime

    @classmethod
    def ending_at(cls, end: datetime, minutes: float) -> "ScanWindow":
        """Build the window of `minutes` length that ends at `end`."""
        end = end.astimezone(UTC).replace(microsecond=0)
        start = (end - timedelta(minutes=minutes)).replace(microsecond=0)
        return cls(start=start, end=end)

    @property
    def start_param(self) -> str:
        return format_provider_timestamp(self.start)

    @property
    def end_param(self) -> str:
        return format_provider_timestamp(self.end)


@dataclass(frozen=True)
class ScanRequest:
    """Parameters of one lightning scan."""

    minutes: float = 15
    radius_km: float = 50
    include_ic: bool = False

    def __post_init__(self) -> None:
        if not math.isfinite(self.minutes) or self.minutes <= 0:
            raise ValueError("minutes must be a positive number")
        if not math.isfinite(self.radius_km) or self.radius_km <= 0:
            raise ValueError("radiusKm must be a positive number")

    @property
    def strike_filter(self) -> str | None:
        """Provider strike-type filter: cloud-to-ground only unless intracloud is requested."""
        return None if self.include_ic else "cg"

    def window(self, now: datetime) -> ScanWindow:
        """Return the scan window ending at `now`."""
        return ScanWindow.ending_at(now, self.minutes)


@dataclass(frozen=True)
class StrikeQuery:
    """What is asked of the strike provider for a single station."""

    radius_km: float
    window: ScanWindow
    strike_filter: str | None = None
