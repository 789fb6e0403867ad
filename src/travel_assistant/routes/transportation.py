"""Public transportation endpoints."""

from datetime import datetime, timezone
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query

from travel_assistant.dependencies import get_directions
from travel_assistant.exceptions import ApiError, DirectionsError
from travel_assistant.infrastructure.interfaces import DirectionsProvider
from travel_assistant.request_models import (
    DirectionsBody,
    LocationTrackingBody,
    TransportationOptionsBody,
)
from travel_assistant.response_models import success_response

router = APIRouter(prefix="/api/transportation", tags=["transportation"])

DirectionsDep = Annotated[DirectionsProvider, Depends(get_directions)]
TransportType = Literal["all", "bus", "metro"]
Latitude = Annotated[float, Query(ge=-90, le=90)]
Longitude = Annotated[float, Query(ge=-180, le=180)]
Radius = Annotated[int, Query(ge=100, le=10000)]


@router.post("/options")
def transportation_options(body: TransportationOptionsBody, provider: DirectionsDep):
    try:
        data = provider.transportation_options(
            body.origin, body.destination, body.mode, body.preferences
        )
    except DirectionsError as e:
        raise ApiError(e.status_code, "Failed to get transportation options", str(e))
    return success_response(data, "Transportation options retrieved successfully")


@router.get("/realtime")
def realtime(
    provider: DirectionsDep,
    transport_type: Annotated[TransportType, Query(alias="transportType")] = "all",
):
    return success_response(
        provider.realtime_updates(transport_type), "Real-time updates retrieved successfully"
    )


@router.post("/directions")
def directions(body: DirectionsBody, provider: DirectionsDep):
    try:
        data = provider.directions(
            body.origin, body.destination, body.transport_type, body.route_id
        )
    except DirectionsError as e:
        raise ApiError(e.status_code, "Failed to get directions", str(e))
    return success_response(data, "Directions retrieved successfully")


@router.get("/nearby")
@router.get("/location/nearby")
def nearby(
    provider: DirectionsDep,
    latitude: Latitude,
    longitude: Longitude,
    radius: Radius = 1000,
    transport_type: Annotated[TransportType, Query(alias="transportType")] = "all",
):
    """Transit stops and stations around a coordinate."""
    try:
        data = provider.nearby(latitude, longitude, radius, transport_type)
    except DirectionsError as e:
        raise ApiError(e.status_code, "Failed to get nearby transportation", str(e))
    return success_response(data, "Nearby transportation retrieved successfully")


@router.post("/location/track")
def track_location(body: LocationTrackingBody, provider: DirectionsDep):
    timestamp = body.timestamp or datetime.now(timezone.utc)
    try:
        data = provider.track_location(
            body.latitude, body.longitude, body.accuracy, timestamp
        )
    except DirectionsError as e:
        raise ApiError(e.status_code, "Failed to track location", str(e))
    return success_response(data, "Location tracked successfully")


@router.get("/location/realtime")
def location_realtime(
    provider: DirectionsDep,
    latitude: Latitude,
    longitude: Longitude,
    radius: Radius = 1000,
    transport_type: Annotated[TransportType, Query(alias="transportType")] = "all",
):
    """Nearby transport and real-time network updates for a coordinate."""
    try:
        data = provider.location_realtime(latitude, longitude, radius, transport_type)
    except DirectionsError as e:
        raise ApiError(e.status_code, "Failed to get location-based data", str(e))
    return success_response(data, "Location-based real-time data retrieved successfully")


@router.get("/status")
def system_status(provider: DirectionsDep):
    """Summarizes bus and metro status from the real-time feed."""
    updates = provider.realtime_updates("all")
    bus = updates.get("bus") or {}
    metro = updates.get("metro") or {}
    alerts = [*bus.get("delays", []), *metro.get("delays", [])]
    return success_response(
        {
            "overall": "Delays" if alerts else "Good",
            "bus": "Good" if bus.get("realTimeStatus") == "On time" else "Delays",
            "metro": "Delays" if "delay" in metro.get("realTimeStatus", "").lower() else "Good",
            "lastUpdated": updates.get("timestamp"),
            "alerts": alerts,
        },
        "Transportation system status retrieved successfully",
    )
