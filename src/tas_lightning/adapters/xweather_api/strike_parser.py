"""Parser for Xweather lightning responses."""

import logging
from typing import Any

from tas_lightning.adapters.xweather_api.constants import REQUEST_FAILED_DESCRIPTION
from tas_lightning.domain.errors import ProviderError
from tas_lightning.domain.models import StrikePoint

logger = logging.getLogger(__name__)

STRIKE_FIELDS = ("lat", "lon", "dateTime", "type", "amp", "polarity")


class StrikeParser:
    """Turns an Xweather response envelope into StrikePoint objects."""

    @staticmethod
    def parse_response(body: Any) -> list[StrikePoint]:
        """Parse a decoded response body.

        Raises:
            ProviderError: The envelope is not successful. Carries the provider's
                error object as sent, or a generic "request failed" description.
        """
        if not isinstance(body, dict) or not body.get("success"):
            error = body.get("error") if isinstance(body, dict) else None
            if isinstance(error, dict):
                description = str(error.get("description") or REQUEST_FAILED_DESCRIPTION)
                raise ProviderError(description, details=error)
            raise ProviderError(REQUEST_FAILED_DESCRIPTION)

        records = body.get("response") or []
        if isinstance(records, dict):
            records = [records]

        strikes = []
        for record in records:
            strike = StrikeParser._parse_strike(record)
            if strike is not None:
                strikes.append(strike)
        return strikes

    @staticmethod
    def _parse_strike(record: Any) -> StrikePoint | None:
        """Select the strike fields from one record. Records without coordinates are skipped."""
        if not isinstance(record, dict):
            return None
        if not all(_is_coordinate(record.get(key)) for key in ("lat", "lon")):
            logger.warning(f"Skipping strike record without coordinates: {record!r:.200}")
            return None
        return StrikePoint.model_validate({key: record.get(key) for key in STRIKE_FIELDS})


def _is_coordinate(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)
