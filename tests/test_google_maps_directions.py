"""Tests for the Google Maps transportation adapter."""

from datetime import datetime, timezone

import httpx
import pytest

from travel_assistant.config import MapsConfig
from travel_assistant.exceptions import DirectionsError
from travel_assistant.infrastructure import GoogleMapsDirections
from travel_assistant.infrastructure.google_maps_directions import split_transit_places

PLACES = [
    {
        "name": "5th Ave / Main St",
        "types": ["bus_station", "transit_station"],
        "geometry": {"location": {"lat": 40.71, "lng": -74.0}},
        "vicinity": "Main St",
    },
    {
        "name": "Central Station",
        "types": ["subway_station", "transit_station"],
        "geometry": {"location": {"lat": 40.72, "lng": -74.01}},
        "vicinity": "Central Sq",
    },
]


def maps_with(handler, api_key: str = "maps-key") -> GoogleMapsDirections:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return GoogleMapsDirections(client, MapsConfig(api_key=api_key))


class TestDirections:
    def test_metro_uses_rail_transit_modes(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.url.params)
            seen["path"] = request.url.path
            return httpx.Response(200, json={"status": "OK", "routes": []})

        maps_with(handler).directions("A", "B", "metro")

        assert seen["path"] == "/maps/api/directions/json"
        assert seen["mode"] == "transit"
        assert seen["transit_mode"] == "subway|train"
        assert seen["key"] == "maps-key"

    def test_error_status_is_a_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"status": "REQUEST_DENIED", "error_message": "Key invalid"}
            )

        with pytest.raises(DirectionsError) as exc_info:
            maps_with(handler).directions("A", "B", "bus")

        assert "Key invalid" in str(exc_info.value)

    def test_zero_results_is_not_a_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "ZERO_RESULTS", "routes": []})

        data = maps_with(handler).transportation_options("A", "B", "all", {})

        assert data["routes"] == []
        assert data["legs"] == []

    def test_missing_key_fails_without_request(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={"status": "OK"})

        with pytest.raises(DirectionsError) as exc_info:
            maps_with(handler, api_key="").directions("A", "B", "bus")

        assert exc_info.value.status_code == 503
        assert calls == []


class TestNearby:
    def test_splits_bus_and_metro(self):
        stations = split_transit_places(PLACES)

        assert [station["name"] for station in stations["bus"]] == ["5th Ave / Main St"]
        assert [station["name"] for station in stations["metro"]] == ["Central Station"]

    def test_filters_by_transport_type(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["type"] == "transit_station"
            return httpx.Response(200, json={"status": "OK", "results": PLACES})

        data = maps_with(handler).nearby(40.71, -74.0, 500, "metro")

        assert [option["name"] for option in data["nearbyOptions"]] == ["Central Station"]
        assert data["location"]["radius"] == 500

    def test_non_json_body_is_a_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>proxy</html>")

        with pytest.raises(DirectionsError) as exc_info:
            maps_with(handler).nearby(40.71, -74.0, 500, "all")

        assert "invalid response" in str(exc_info.value)


class TestLocation:
    def test_track_location_echoes_position(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["radius"] == "1000"
            return httpx.Response(200, json={"status": "OK", "results": PLACES})

        timestamp = datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)
        data = maps_with(handler).track_location(40.71, -74.0, 15.0, timestamp)

        assert data["location"]["timestamp"] == "2026-10-19T08:30:00+00:00"
        assert data["location"]["accuracy"] == 15.0
        assert [station["name"] for station in data["nearbyStations"]] == [
            "5th Ave / Main St",
            "Central Station",
        ]

    def test_location_realtime_attaches_station_names(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "OK", "results": PLACES})

        data = maps_with(handler).location_realtime(40.71, -74.0, 800, "bus")

        assert [option["name"] for option in data["nearbyTransport"]] == ["5th Ave / Main St"]
        assert data["realTimeUpdates"]["bus"]["nearbyStations"] == ["5th Ave / Main St"]
        assert data["realTimeUpdates"]["metro"] is None
        assert data["location"]["radius"] == 800
