"""Merging of per-station strikes into one set of map points."""

from collections.abc import Iterable

from tas_lightning.domain.models import StationResult, StrikePoint


def merge_unique_points(results: Iterable[StationResult]) -> list[StrikePoint]:
    """Flatten all stations' strikes, keeping the first report of each strike.

    Stations are visited in the given order and strikes in the order the provider
    returned them, so the output is deterministic for a given input.
    """
    seen: set[tuple[str, str, str | None]] = set()
    points: list[StrikePoint] = []
    for result in results:
        for strike in result.strikes:
            key = strike.dedup_key
            if key in seen:
                continue
            seen.add(key)
            points.append(strike)
    return points
