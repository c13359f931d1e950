"""Line feature repository port."""

from typing import Any, Protocol

from tas_lightning.domain.models.bounding_box import BoundingBox


class LineFeatureRepository(Protocol):
    """Port for querying a mapping service for line features inside a bounding box."""

    async def query_geojson(self, bbox: BoundingBox) -> Any | None:
        """Query in GeoJSON format. Returns the decoded body, or None if the call failed."""
        ...

    async def query_esri_json(self, bbox: BoundingBox) -> dict[str, Any]:
        """Query in the service's native JSON format. Raises NetworkError on failure."""
        ...
