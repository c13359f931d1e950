"""Application services."""

from tas_lightning.application.services.line_feature_service import (
    LineFeatureService,
    parse_bounding_box,
)
from tas_lightning.application.services.scan_service import ScanService
from tas_lightning.application.services.strike_merging import merge_unique_points

__all__ = [
    "LineFeatureService",
    "ScanService",
    "merge_unique_points",
    "parse_bounding_box",
]
