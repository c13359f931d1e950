"""Adapters layer - external system integrations."""

from tas_lightning.adapters.arcgis_api import ArcGisLineRepository
from tas_lightning.adapters.config import AppConfig, StationFileRepository
from tas_lightning.adapters.xweather_api import XweatherStrikeRepository

__all__ = [
    "AppConfig",
    "ArcGisLineRepository",
    "StationFileRepository",
    "XweatherStrikeRepository",
]
