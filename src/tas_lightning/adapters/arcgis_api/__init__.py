"""ArcGIS mapping service adapter."""

from tas_lightning.adapters.arcgis_api.arcgis_line_repository import ArcGisLineRepository

__all__ = ["ArcGisLineRepository"]
