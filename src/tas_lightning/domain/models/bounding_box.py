"""Bounding box domain model."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tas_lightning.domain.numbers import format_number

BBOX_FIELDS = ("xmin", "ymin", "xmax", "ymax")


@dataclass(frozen=True)
class BoundingBox:
    """Rectangular WGS84 extent, x is longitude and y is latitude."""

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "BoundingBox":
        """Build a bounding box from request parameters.

        Raises:
            KeyError: If any of xmin, ymin, xmax, ymax is absent.
            ValueError: If a value is not a finite number.
        """
        missing = [name for name in BBOX_FIELDS if params.get(name) is None]
        if missing:
            raise KeyError(", ".join(missing))

        values: dict[str, float] = {}
        for name in BBOX_FIELDS:
            try:
                value = float(params[name])
            except (TypeError, ValueError) as e:
                raise ValueError(f"{name} must be a number, got {params[name]!r}") from e
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number")
            values[name] = value
        return cls(**values)

    def to_envelope(self) -> str:
        """Render as the `xmin,ymin,xmax,ymax` envelope string ArcGIS expects."""
        return ",".join(format_number(getattr(self, name)) for name in BBOX_FIELDS)
