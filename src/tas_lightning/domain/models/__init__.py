"""Domain models for lightning proximity scans."""

from tas_lightning.domain.models.bounding_box import BoundingBox
from tas_lightning.domain.models.error_details import ErrorDetails
from tas_lightning.domain.models.line_features import (
    EsriJsonPayload,
    GeoJsonPayload,
    LineFeatureCollection,
    MappingServicePayload,
    is_feature_collection,
)
from tas_lightning.domain.models.scan_request import (
    ScanRequest,
    ScanWindow,
    StrikeQuery,
    format_provider_timestamp,
)
from tas_lightning.domain.models.scan_result import ScanResult
from tas_lightning.domain.models.station import Station
from tas_lightning.domain.models.station_result import StationResult
from tas_lightning.domain.models.strike_point import StrikePoint

__all__ = [
    "BoundingBox",
    "ErrorDetails",
    "EsriJsonPayload",
    "GeoJsonPayload",
    "LineFeatureCollection",
    "MappingServicePayload",
    "ScanRequest",
    "ScanResult",
    "ScanWindow",
    "Station",
    "StationResult",
    "StrikePoint",
    "StrikeQuery",
    "format_provider_timestamp",
    "is_feature_collection",
]
