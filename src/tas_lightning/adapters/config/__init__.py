"""Configuration adapters."""

from tas_lightning.adapters.config.app_config import AppConfig
from tas_lightning.adapters.config.station_file_repository import StationFileRepository

__all__ = ["AppConfig", "StationFileRepository"]
