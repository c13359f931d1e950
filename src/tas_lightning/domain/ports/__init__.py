"""Ports (interfaces) for the ports-and-adapters architecture."""

from tas_lightning.domain.ports.line_feature_repository import LineFeatureRepository
from tas_lightning.domain.ports.station_repository import StationRepository
from tas_lightning.domain.ports.strike_repository import StrikeRepository

__all__ = [
    "LineFeatureRepository",
    "StationRepository",
    "StrikeRepository",
]
