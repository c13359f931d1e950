"""Tests for domain models and geodesy helpers."""

import math
from datetime import UTC, datetime, timedelta, timezone

import pytest
from conftest import strike

from tas_lightning.domain.geodesy import haversine_km, nearest_distance_km
from tas_lightning.domain.models import (
    BoundingBox,
    ScanRequest,
    ScanResult,
    ScanWindow,
    Station,
    StationResult,
    StrikePoint,
)


class TestStation:
    def test_valid_station_serializes(self) -> None:
        """Given a valid station, when serializing, then name and coordinates are returned."""
        assert Station("Poatina", -41.8097, 146.9161).to_dict() == {
            "name": "Poatina",
            "lat": -41.8097,
            "lon": 146.9161,
        }

    @pytest.mark.parametrize(("lat", "lon"), [(-90.1, 0), (90.5, 0), (0, 180.01), (0, -181)])
    def test_out_of_range_coordinates_rejected(self, lat: float, lon: float) -> None:
        """Given coordinates outside WGS84 ranges, when creating a station, then ValueError is raised."""
        with pytest.raises(ValueError, match="outside"):
            Station("X", lat, lon)


class TestScanWindow:
    def test_window_is_truncated_to_whole_seconds(self) -> None:
        """Given a time with microseconds, when building a window, then both ends drop fractions."""
        now = datetime(2026, 1, 15, 3, 30, 45, 999999, tzinfo=UTC)

        window = ScanWindow.ending_at(now, 15)

        assert window.end_param == "2026-01-15T03:30:45Z"
        assert window.start_param == "2026-01-15T03:15:45Z"

    def test_fractional_minutes_truncate_start(self) -> None:
        """Given a fractional minute count, when building a window, then start has no sub-second part."""
        now = datetime(2026, 1, 15, 3, 30, 45, tzinfo=UTC)

        window = ScanWindow.ending_at(now, 0.0125)

        assert window.start_param == "2026-01-15T03:30:44Z"

    def test_non_utc_time_is_converted(self) -> None:
        """Given a local time, when formatting, then the window is expressed in UTC."""
        hobart = timezone(timedelta(hours=11))
        now = datetime(2026, 1, 15, 14, 30, 45, tzinfo=hobart)

        assert ScanWindow.ending_at(now, 15).end_param == "2026-01-15T03:30:45Z"


class TestScanRequest:
    def test_defaults(self) -> None:
        """Given no arguments, when creating a request, then 15 minutes, 50 km and cg only apply."""
        request = ScanRequest()

        assert (request.minutes, request.radius_km, request.include_ic) == (15, 50, False)
        assert request.strike_filter == "cg"

    def test_include_ic_removes_filter(self) -> None:
        assert ScanRequest(include_ic=True).strike_filter is None

    @pytest.mark.parametrize(
        ("minutes", "radius_km"), [(0, 50), (-1, 50), (15, 0), (15, math.inf), (math.nan, 50)]
    )
    def test_non_positive_values_rejected(self, minutes: float, radius_km: float) -> None:
        """Given a non-positive or non-finite value, when creating a request, then ValueError is raised."""
        with pytest.raises(ValueError, match="positive number"):
            ScanRequest(minutes=minutes, radius_km=radius_km)


class TestStrikeAndResultSerialization:
    def test_strike_point_accepts_provider_field_names(self) -> None:
        """Given provider-style keys, when validating, then dateTime maps to date_time."""
        point = StrikePoint.model_validate({"lat": 1.0, "lon": 2.0, "dateTime": "t", "type": "ic"})

        assert point.date_time == "t"
        assert point.to_dict()["dateTime"] == "t"

    def test_dedup_key_rounds_to_four_decimals(self) -> None:
        assert strike(-42.123456, 147.98766, date_time="t").dedup_key == ("-42.1235", "147.9877", "t")

    def test_station_result_omits_missing_error(self) -> None:
        """Given a healthy result, when serializing, then there is no error key but nearestKm is kept."""
        result = StationResult(station="A", lat=-42.0, lon=147.0, nearest_km=None, strikes=[])

        assert result.model_dump(by_alias=True) == {
            "station": "A",
            "lat": -42.0,
            "lon": 147.0,
            "nearestKm": None,
            "strikes": [],
        }

    def test_scan_result_to_dict_is_plain_json_data(self) -> None:
        """Given a scan result, when converting to a dict, then keys are camelCase and values plain."""
        point = strike(-42.01, 147.01)
        result = ScanResult(
            updated_at="2026-01-15T03:30:45Z",
            minutes=15,
            radius_km=50,
            results=[
                StationResult(station="A", lat=-42.0, lon=147.0, nearest_km=1.38, strikes=[point])
            ],
            points=[point],
        )

        payload = result.to_dict()

        assert set(payload) == {"updatedAt", "minutes", "radiusKm", "results", "points"}
        assert payload["results"][0]["strikes"] == [point.to_dict()]
        assert payload["points"][0]["dateTime"] == point.date_time

    def test_scan_result_echoes_whole_numbers_without_decimals(self) -> None:
        """Given 15.0 minutes and 50.0 km, when serializing, then they are echoed as 15 and 50."""
        result = ScanResult(
            updated_at="2026-01-15T03:30:45Z", minutes=15.0, radius_km=50.0, results=[], points=[]
        )

        payload = result.to_dict()

        assert (payload["minutes"], payload["radiusKm"]) == (15, 50)
        assert isinstance(payload["minutes"], int)
        assert isinstance(payload["radiusKm"], int)

    def test_scan_result_keeps_fractional_values(self) -> None:
        result = ScanResult(
            updated_at="2026-01-15T03:30:45Z", minutes=7.5, radius_km=12.25, results=[], points=[]
        )

        assert (result.minutes, result.radius_km) == (7.5, 12.25)

    def test_dedup_key_accepts_non_string_timestamps(self) -> None:
        """Given a numeric dateTime, when building the key, then it is rendered as text."""
        assert strike(-42.0, 147.0, date_time=1736911500).dedup_key == (  # type: ignore[arg-type]
            "-42.0000",
            "147.0000",
            "1736911500",
        )


class TestBoundingBox:
    def test_from_params_parses_strings(self) -> None:
        bbox = BoundingBox.from_params({"xmin": "144.5", "ymin": "-43.7", "xmax": "148", "ymax": "-39.5"})

        assert bbox == BoundingBox(144.5, -43.7, 148.0, -39.5)
        assert bbox.to_envelope() == "144.5,-43.7,148,-39.5"

    def test_from_params_reports_missing_fields(self) -> None:
        with pytest.raises(KeyError, match="ymax"):
            BoundingBox.from_params({"xmin": 1, "ymin": 2, "xmax": 3})

    def test_from_params_rejects_infinite_values(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            BoundingBox.from_params({"xmin": "inf", "ymin": 2, "xmax": 3, "ymax": 4})

    def test_integer_fields_render_in_envelope(self) -> None:
        """Given a bbox built from ints, when rendering, then the envelope has no decimals."""
        assert BoundingBox(144, -44, 149, -39).to_envelope() == "144,-44,149,-39"

    def test_envelope_keeps_full_precision(self) -> None:
        assert BoundingBox(144.123456789, -44, 149.5, -39).to_envelope() == (
            "144.123456789,-44,149.5,-39"
        )


class TestGeodesy:
    def test_same_point_is_zero(self) -> None:
        assert haversine_km(-42.0, 147.0, -42.0, 147.0) == 0

    def test_one_degree_of_latitude(self) -> None:
        """Given points one degree of latitude apart, when measuring, then about 111.2 km is returned."""
        assert haversine_km(-42.0, 147.0, -43.0, 147.0) == pytest.approx(111.195, abs=0.01)

    def test_distance_is_symmetric(self) -> None:
        assert haversine_km(-41.4, 147.1, -42.7, 145.9) == pytest.approx(
            haversine_km(-42.7, 145.9, -41.4, 147.1)
        )

    def test_nearest_of_no_points_is_none(self) -> None:
        assert nearest_distance_km(-42.0, 147.0, []) is None

    def test_non_finite_minimum_is_none(self) -> None:
        """Given a point with NaN coordinates only, when finding the nearest, then None is returned."""
        assert nearest_distance_km(-42.0, 147.0, [(math.nan, 147.0)]) is None

    def test_nearest_picks_smallest(self) -> None:
        points = [(-42.5, 147.0), (-42.01, 147.01), (-41.0, 146.0)]

        assert nearest_distance_km(-42.0, 147.0, points) == pytest.approx(1.385, abs=0.01)
