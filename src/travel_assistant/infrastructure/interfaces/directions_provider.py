"""Abstract interface for transportation and directions lookups."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any


class DirectionsProvider(ABC):
    """Abstract base class for transportation data sources."""

    @abstractmethod
    def transportation_options(
        self, origin: str, destination: str, mode: str, preferences: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Returns ways of getting from origin to destination.

        Raises:
            DirectionsError: If the provider call fails.
        """
        pass

    @abstractmethod
    def realtime_updates(self, transport_type: str) -> dict[str, Any]:
        """Returns current status and delays for bus/metro networks."""
        pass

    @abstractmethod
    def directions(
        self,
        origin: str,
        destination: str,
        transport_type: str,
        route_id: str | None = None,
    ) -> dict[str, Any]:
        """
        Returns step-by-step directions.

        Raises:
            DirectionsError: If the provider call fails.
        """
        pass

    @abstractmethod
    def nearby(
        self, latitude: float, longitude: float, radius: int, transport_type: str
    ) -> dict[str, Any]:
        """
        Returns transit options near a coordinate.

        Raises:
            DirectionsError: If the provider call fails.
        """
        pass

    @abstractmethod
    def track_location(
        self, latitude: float, longitude: float, accuracy: float, timestamp: datetime
    ) -> dict[str, Any]:
        """
        Echoes a reported position with the stations and alerts around it.

        Nothing is stored between calls.

        Raises:
            DirectionsError: If the provider call fails.
        """
        pass

    @abstractmethod
    def location_realtime(
        self, latitude: float, longitude: float, radius: int, transport_type: str
    ) -> dict[str, Any]:
        """
        Returns nearby transport together with real-time updates for a coordinate.

        Raises:
            DirectionsError: If the provider call fails.
        """
        pass
