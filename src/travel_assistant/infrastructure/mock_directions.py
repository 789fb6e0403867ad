"""Deterministic in-process DirectionsProvider used when live maps are disabled."""

from datetime import datetime, timezone
from typing import Any

from .interfaces import DirectionsProvider

BUS_NETWORK = {
    "routes": [
        {"id": "B1", "name": "Downtown Express", "frequency": "Every 15 min", "cost": "$2.50"},
        {"id": "B2", "name": "Airport Shuttle", "frequency": "Every 30 min", "cost": "$5.00"},
    ],
    "realTimeStatus": "On time",
    "delays": [],
}

METRO_NETWORK = {
    "lines": [
        {"id": "M1", "name": "Red Line", "frequency": "Every 8 min", "cost": "$3.25"},
    ],
    "realTimeStatus": "Minor delays on Red Line",
    "delays": ["Red Line: 5-10 min delay"],
}


def _wants(transport_type: str, kind: str) -> bool:
    return transport_type in ("all", kind)


class MockDirections(DirectionsProvider):
    """Fixed sample data shaped like the live provider's responses."""

    def transportation_options(
        self, origin: str, destination: str, mode: str, preferences: dict[str, Any]
    ) -> dict[str, Any]:
        options = [
            {
                "type": "bus",
                "estimatedTime": "35-45 min",
                "cost": "$2.50",
                "route": ["Walk to bus stop", "Take bus B1", f"Arrive at {destination}"],
            },
            {
                "type": "metro",
                "estimatedTime": "25-35 min",
                "cost": "$3.25",
                "route": ["Walk to metro station", "Take Red Line", f"Arrive at {destination}"],
            },
        ]
        if mode in ("bus", "metro"):
            options = [option for option in options if option["type"] == mode]
        return {"origin": origin, "destination": destination, "options": options}

    def realtime_updates(self, transport_type: str) -> dict[str, Any]:
        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "bus": BUS_NETWORK if _wants(transport_type, "bus") else None,
            "metro": METRO_NETWORK if _wants(transport_type, "metro") else None,
        }

    def directions(
        self,
        origin: str,
        destination: str,
        transport_type: str,
        route_id: str | None = None,
    ) -> dict[str, Any]:
        return {
            "origin": origin,
            "destination": destination,
            "transportType": transport_type,
            "routeId": route_id,
            "steps": [f"Go from {origin} to {destination} via {transport_type}"],
            "totalTime": "25 min",
            "totalCost": "$3.50",
        }

    def nearby(
        self, latitude: float, longitude: float, radius: int, transport_type: str
    ) -> dict[str, Any]:
        options = []
        if _wants(transport_type, "bus"):
            options.append(
                {
                    "type": "bus",
                    "name": "Bus Route 42",
                    "stop": "Main Street & 5th Ave",
                    "distance": min(radius, 250),
                    "nextArrival": 5,
                    "frequency": "Every 8-12 minutes",
                    "status": "On time",
                }
            )
        if _wants(transport_type, "metro"):
            options.append(
                {
                    "type": "metro",
                    "name": "Red Line",
                    "station": "Central Station",
                    "distance": min(radius, 400),
                    "nextArrival": 3,
                    "frequency": "Every 4-6 minutes",
                    "status": "Minor delays",
                }
            )
        return {
            "location": {"latitude": latitude, "longitude": longitude, "radius": radius},
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "nearbyOptions": options,
            "walkingDistances": [
                {"destination": "Nearest Bus Stop", "distance": 150, "time": 2},
                {"destination": "Nearest Metro Station", "distance": 300, "time": 4},
            ],
        }

    def track_location(
        self, latitude: float, longitude: float, accuracy: float, timestamp: datetime
    ) -> dict[str, Any]:
        return {
            "location": {
                "latitude": latitude,
                "longitude": longitude,
                "accuracy": accuracy,
                "timestamp": timestamp.isoformat(),
            },
            "nearbyStations": [
                {
                    "id": "ST1",
                    "name": "Central Station",
                    "type": "metro",
                    "distance": 400,
                    "walkingTime": 5,
                    "coordinates": {"lat": latitude + 0.001, "lng": longitude + 0.001},
                },
                {
                    "id": "ST2",
                    "name": "Main Street Bus Stop",
                    "type": "bus",
                    "distance": 150,
                    "walkingTime": 2,
                    "coordinates": {"lat": latitude - 0.0005, "lng": longitude + 0.0005},
                },
            ],
            "alerts": [
                {"type": "delay", "message": delay, "severity": "medium"}
                for delay in METRO_NETWORK["delays"]
            ],
        }

    def location_realtime(
        self, latitude: float, longitude: float, radius: int, transport_type: str
    ) -> dict[str, Any]:
        nearby = self.nearby(latitude, longitude, radius, transport_type)
        updates = self.realtime_updates(transport_type)
        return {
            "location": nearby["location"],
            "timestamp": updates["timestamp"],
            "nearbyTransport": nearby["nearbyOptions"],
            "realTimeUpdates": {"bus": updates["bus"], "metro": updates["metro"]},
        }
