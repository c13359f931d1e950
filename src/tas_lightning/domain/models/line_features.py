"""Mapping-service payload variants and the GeoJSON shape they normalize to."""

from dataclasses import dataclass, field
from typing import Any

LineFeatureCollection = dict[str, Any]


def is_feature_collection(body: Any) -> bool:
    """Whether a decoded body already has the shape of a GeoJSON FeatureCollection."""
    return isinstance(body, dict) and (
        body.get("type") == "FeatureCollection" or body.get("features") is not None
    )


@dataclass(frozen=True)
class GeoJsonPayload:
    """Mapping-service response that is already GeoJSON. Passed through unchanged."""

    body: dict[str, Any]

    def to_feature_collection(self) -> LineFeatureCollection:
        return self.body


@dataclass(frozen=True)
class EsriJsonPayload:
    """Mapping-service response in ESRI JSON, converted to GeoJSON line strings.

    Only the first path of each polyline is kept. Multi-part lines lose their
    other parts. Features without geometry or with an empty first path get an
    empty coordinate list, and points with fewer than two values are dropped.
    Coordinates are copied as-is, without reprojection.
    """

    body: dict[str, Any] = field(default_factory=dict)

    def to_feature_collection(self) -> LineFeatureCollection:
        features = self.body.get("features") or []
        return {
            "type": "FeatureCollection",
            "features": [_esri_feature_to_geojson(feature) for feature in features],
        }


MappingServicePayload = GeoJsonPayload | EsriJsonPayload


def _esri_feature_to_geojson(feature: dict[str, Any]) -> dict[str, Any]:
    geometry = feature.get("geometry") or {}
    paths = geometry.get("paths") or []
    first_path = (paths[0] if paths else None) or []
    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [
                [point[0], point[1]] for point in first_path if point and len(point) >= 2
            ],
        },
        "properties": feature.get("attributes") or {},
    }
