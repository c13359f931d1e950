"""Shared fixtures and fakes for the test suite."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

import pytest

from tas_lightning.domain.errors import ConfigurationError
from tas_lightning.domain.models import BoundingBox, Station, StrikePoint, StrikeQuery

FIXED_NOW = datetime(2026, 1, 15, 3, 30, 45, 987654, tzinfo=UTC)


def strike(
    lat: float,
    lon: float,
    date_time: str = "2026-01-15T03:25:00+00:00",
    strike_type: str = "cg",
    amp: float = -12.5,
    polarity: str = "-",
) -> StrikePoint:
    """Build a StrikePoint the way the provider would report it."""
    return StrikePoint(
        lat=lat, lon=lon, date_time=date_time, type=strike_type, amp=amp, polarity=polarity
    )


def strike_record(lat: float, lon: float, /, **overrides: Any) -> dict[str, Any]:
    """Raw strike record as found in an Xweather response."""
    record = {
        "lat": lat,
        "lon": lon,
        "dateTime": "2026-01-15T14:25:00+11:00",
        "type": "cg",
        "amp": -8.2,
        "polarity": "-",
    }
    record.update(overrides)
    return record


@pytest.fixture
def stations() -> list[Station]:
    return [
        Station(name="Gordon", lat=-42.7375, lon=145.9756),
        Station(name="Poatina", lat=-41.8097, lon=146.9161),
        Station(name="Trevallyn", lat=-41.4461, lon=147.1064),
    ]


@pytest.fixture
def bbox() -> BoundingBox:
    return BoundingBox(xmin=144.5, ymin=-43.7, xmax=148.5, ymax=-39.5)


class FakeStrikeRepository:
    """Strike repository returning canned strikes or raising canned errors per station."""

    def __init__(
        self,
        outcomes: dict[str, list[StrikePoint] | BaseException] | None = None,
        delays: dict[str, float] | None = None,
        configured: bool = True,
    ) -> None:
        self.outcomes = outcomes or {}
        self.delays = delays or {}
        self.configured = configured
        self.calls: list[tuple[str, StrikeQuery]] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    def ensure_configured(self) -> None:
        if not self.configured:
            raise ConfigurationError("Missing XWEATHER_CLIENT_ID/SECRET env vars")

    async def fetch_strikes(self, station: Station, query: StrikeQuery) -> list[StrikePoint]:
        self.calls.append((station.name, query))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(station.name, 0))
            outcome = self.outcomes.get(station.name, [])
            if isinstance(outcome, BaseException):
                raise outcome
            return list(outcome)
        finally:
            self.in_flight -= 1
            self.completed.append(station.name)


class FakeLineRepository:
    """Line repository returning canned bodies and recording which formats were asked for."""

    def __init__(
        self,
        geojson_body: Any | None = None,
        esri_body: dict[str, Any] | BaseException | None = None,
    ) -> None:
        self.geojson_body = geojson_body
        self.esri_body = esri_body
        self.calls: list[tuple[str, BoundingBox]] = []

    async def query_geojson(self, bbox: BoundingBox) -> Any | None:
        self.calls.append(("geojson", bbox))
        return self.geojson_body

    async def query_esri_json(self, bbox: BoundingBox) -> dict[str, Any]:
        self.calls.append(("json", bbox))
        if isinstance(self.esri_body, BaseException):
            raise self.esri_body
        return self.esri_body or {}


class FakeResponse:
    """Stand-in for aiohttp.ClientResponse."""

    def __init__(self, status: int = 200, body: Any = None, raw_text: str | None = None) -> None:
        self.status = status
        self._body = body
        self._raw_text = raw_text

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    async def json(self, content_type: str | None = "application/json") -> Any:  # noqa: ARG002
        if self._raw_text is not None:
            return json.loads(self._raw_text)
        return self._body

    async def text(self) -> str:
        if self._raw_text is not None:
            return self._raw_text
        return json.dumps(self._body)


class _RequestContext:
    def __init__(self, outcome: FakeResponse | BaseException) -> None:
        self._outcome = outcome

    async def __aenter__(self) -> FakeResponse:
        if isinstance(self._outcome, BaseException):
            raise self._outcome
        return self._outcome

    async def __aexit__(self, *_exc: object) -> bool:
        return False


@dataclass
class FakeSession:
    """Stand-in for aiohttp.ClientSession serving queued responses in order."""

    outcomes: list[FakeResponse | BaseException] = field(default_factory=list)
    requests: list[dict[str, Any]] = field(default_factory=list)

    def get(self, url: str, params: dict[str, str] | None = None, **kwargs: Any) -> _RequestContext:
        self.requests.append({"url": url, "params": dict(params or {}), **kwargs})
        return _RequestContext(self.outcomes.pop(0))
