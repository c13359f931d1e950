"""Domain layer - core models, ports and errors."""

from tas_lightning.domain.models import (
    BoundingBox,
    ScanRequest,
    ScanResult,
    Station,
    StationResult,
    StrikePoint,
)
from tas_lightning.domain.ports import (
    LineFeatureRepository,
    StationRepository,
    StrikeRepository,
)

__all__ = [
    "BoundingBox",
    "LineFeatureRepository",
    "ScanRequest",
    "ScanResult",
    "Station",
    "StationRepository",
    "StationResult",
    "StrikePoint",
    "StrikeRepository",
]
