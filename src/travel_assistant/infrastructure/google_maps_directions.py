"""Google Maps implementation of the DirectionsProvider interface."""

from datetime import datetime, timezone
from typing import Any

import httpx

from travel_assistant.config import MapsConfig
from travel_assistant.exceptions import DirectionsError
from travel_assistant.logging import setup_logging

from .interfaces import DirectionsProvider

logger = setup_logging()

# Directions and Places report failures in a "status" field with HTTP 200.
_OK_STATUSES = {"OK", "ZERO_RESULTS"}
_METRO_TYPES = ("subway_station", "train_station")
_BUS_TYPES = ("bus_station", "transit_station")
TRACKING_RADIUS_METERS = 1000


def _station_type(types: list[str]) -> str:
    if "subway_station" in types or "train_station" in types:
        return "metro"
    if "bus_station" in types:
        return "bus"
    return "transit"


def _coordinates(place: dict[str, Any]) -> dict[str, float]:
    location = place.get("geometry", {}).get("location", {})
    return {"lat": location.get("lat"), "lng": location.get("lng")}


def _station(place: dict[str, Any], kind: str) -> dict[str, Any]:
    return {
        "id": place.get("place_id"),
        "type": kind,
        "name": place.get("name"),
        "vicinity": place.get("vicinity"),
        "rating": place.get("rating"),
        "coordinates": _coordinates(place),
    }


def split_transit_places(places: list[dict[str, Any]]) -> dict[str, list[dict[str, Any]]]:
    """Groups Places results into bus and metro stations."""
    bus, metro = [], []
    for place in places:
        types = place.get("types", [])
        if any(t in types for t in _METRO_TYPES):
            metro.append(_station(place, "metro"))
        elif any(t in types for t in _BUS_TYPES):
            bus.append(_station(place, _station_type(types)))
    return {"bus": bus, "metro": metro}


def _filter_stations(
    stations: dict[str, list[dict[str, Any]]], transport_type: str
) -> list[dict[str, Any]]:
    if transport_type in ("bus", "metro"):
        return stations[transport_type]
    return stations["bus"] + stations["metro"]


class GoogleMapsDirections(DirectionsProvider):
    """Transit directions and nearby stations from the Google Maps web services."""

    def __init__(self, client: httpx.Client, config: MapsConfig):
        self._client = client
        self._config = config

    def transportation_options(
        self, origin: str, destination: str, mode: str, preferences: dict[str, Any]
    ) -> dict[str, Any]:
        payload = self._call(
            "/directions/json",
            {"origin": origin, "destination": destination, "mode": "transit"},
        )
        routes = payload.get("routes", [])
        return {
            "origin": origin,
            "destination": destination,
            "routes": routes,
            "legs": routes[0].get("legs", []) if routes else [],
        }

    def realtime_updates(self, transport_type: str) -> dict[str, Any]:
        status = {"realTimeStatus": "On time", "delays": []}
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "bus": status if transport_type in ("all", "bus") else None,
            "metro": status if transport_type in ("all", "metro") else None,
        }

    def directions(
        self,
        origin: str,
        destination: str,
        transport_type: str,
        route_id: str | None = None,
    ) -> dict[str, Any]:
        params = {"origin": origin, "destination": destination, "mode": "transit"}
        if transport_type == "bus":
            params["transit_mode"] = "bus"
        elif transport_type == "metro":
            params["transit_mode"] = "subway|train"
        return self._call("/directions/json", params)

    def nearby(
        self, latitude: float, longitude: float, radius: int, transport_type: str
    ) -> dict[str, Any]:
        stations = self._stations(latitude, longitude, radius)
        return {
            "location": {"latitude": latitude, "longitude": longitude, "radius": radius},
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "nearbyOptions": _filter_stations(stations, transport_type),
        }

    def track_location(
        self, latitude: float, longitude: float, accuracy: float, timestamp: datetime
    ) -> dict[str, Any]:
        stations = self._stations(latitude, longitude, TRACKING_RADIUS_METERS)
        return {
            "location": {
                "latitude": latitude,
                "longitude": longitude,
                "accuracy": accuracy,
                "timestamp": timestamp.isoformat(),
            },
            "nearbyStations": stations["bus"] + stations["metro"],
            "alerts": [],
        }

    def location_realtime(
        self, latitude: float, longitude: float, radius: int, transport_type: str
    ) -> dict[str, Any]:
        """Nearby stations plus the network status for each requested kind."""
        stations = self._stations(latitude, longitude, radius)
        updates = self.realtime_updates(transport_type)
        realtime = {}
        for kind in ("bus", "metro"):
            if updates[kind] is None:
                realtime[kind] = None
            else:
                realtime[kind] = {
                    **updates[kind],
                    "nearbyStations": [station["name"] for station in stations[kind]],
                }
        return {
            "location": {"latitude": latitude, "longitude": longitude, "radius": radius},
            "timestamp": updates["timestamp"],
            "nearbyTransport": _filter_stations(stations, transport_type),
            "realTimeUpdates": realtime,
        }

    def _stations(
        self, latitude: float, longitude: float, radius: int
    ) -> dict[str, list[dict[str, Any]]]:
        payload = self._call(
            "/place/nearbysearch/json",
            {
                "location": f"{latitude},{longitude}",
                "radius": radius,
                "type": "transit_station",
            },
        )
        return split_transit_places(payload.get("results", []))

    def _call(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        if not self._config.api_key:
            raise DirectionsError("GOOGLE_MAPS_API_KEY is not configured", status_code=503)
        try:
            response = self._client.get(
                f"{self._config.base_url}{path}",
                params={**params, "key": self._config.api_key},
                timeout=self._config.timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.exception("Google Maps request failed", extra={"path": path})
            raise DirectionsError(f"Google Maps request failed: {e}", cause=e) from e
        except ValueError as e:
            logger.exception("Google Maps returned a non-JSON body", extra={"path": path})
            raise DirectionsError("Google Maps returned an invalid response", cause=e) from e

        if not isinstance(payload, dict):
            raise DirectionsError("Google Maps returned an invalid response")
        status = payload.get("status", "OK")
        if status not in _OK_STATUSES:
            message = payload.get("error_message") or status
            logger.error(
                "Google Maps returned an error status",
                extra={"path": path, "status": status, "error": message},
            )
            raise DirectionsError(f"Google Maps error: {message}")
        return payload
