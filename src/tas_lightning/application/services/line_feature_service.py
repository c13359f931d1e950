"""Line feature service: transmission lines inside a bounding box as GeoJSON."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from tas_lightning.domain.errors import ValidationError
from tas_lightning.domain.models import (
    BoundingBox,
    EsriJsonPayload,
    GeoJsonPayload,
    LineFeatureCollection,
    MappingServicePayload,
    is_feature_collection,
)
from tas_lightning.domain.models.bounding_box import BBOX_FIELDS

if TYPE_CHECKING:
    from tas_lightning.domain.ports import LineFeatureRepository

logger = logging.getLogger(__name__)

MISSING_BBOX_MESSAGE = f"Missing bbox params: {','.join(BBOX_FIELDS)}"


def parse_bounding_box(params: Mapping[str, Any]) -> BoundingBox:
    """Build a BoundingBox from request parameters, raising ValidationError on bad input."""
    try:
        return BoundingBox.from_params(params)
    except KeyError as e:
        raise ValidationError(MISSING_BBOX_MESSAGE) from e
    except ValueError as e:
        raise ValidationError(str(e)) from e


class LineFeatureService:
    """Fetches line features, preferring GeoJSON and converting ESRI JSON otherwise."""

    def __init__(self, line_repository: LineFeatureRepository) -> None:
        self.line_repository = line_repository

    async def fetch_lines(self, params: Mapping[str, Any]) -> LineFeatureCollection:
        """Return the line features intersecting the bounding box in `params`.

        Raises:
            ValidationError: A bbox field is missing or not a number. No request is made.
            NetworkError: Both the GeoJSON and the ESRI JSON queries failed.
        """
        bbox = parse_bounding_box(params)
        payload = await self.fetch_payload(bbox)
        return payload.to_feature_collection()

    async def fetch_payload(self, bbox: BoundingBox) -> MappingServicePayload:
        """Resolve which response shape the mapping service gave for this bbox."""
        body = await self.line_repository.query_geojson(bbox)
        if is_feature_collection(body):
            return GeoJsonPayload(body)

        logger.info(
            f"GeoJSON query for {bbox.to_envelope()} gave no FeatureCollection, "
            "falling back to ESRI JSON"
        )
        return EsriJsonPayload(await self.line_repository.query_esri_json(bbox))
