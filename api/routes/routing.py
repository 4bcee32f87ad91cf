"""
FastAPI routes for campus routing endpoints.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from api.schemas.routing import (
    HealthResponse,
    LocationRequest,
    NearestNodeResponse,
    NetworkResponse,
    PlaceRouteRequest,
    RouteRequest,
    RouteResponse,
    SuggestionResponse
)
from api.services.routing_service import routing_service

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/campus", tags=["campus"])


@router.get("/health", response_model=HealthResponse, summary="Health Check")
async def health_check():
    """
    Check the health status of the routing service.

    Returns:
        HealthResponse: Service health information
    """
    return routing_service.get_health_status()


@router.get("/network", response_model=NetworkResponse, summary="Path Network")
async def get_network():
    """
    Get the loaded path network for drawing: bounds and GeoJSON path features.
    """
    return routing_service.get_network()


@router.get("/suggest", response_model=SuggestionResponse, summary="Suggest Places")
async def suggest_places(q: str = Query("", description="Partial or misspelled place name"),
                         limit: Optional[int] = Query(None, ge=1, le=50, description="Maximum suggestions")):
    """
    Suggest campus places matching a typed query.

    Matching tolerates typos and partial words; results keep catalog order.
    An empty query returns no suggestions.
    """
    return routing_service.suggest(q, limit)


@router.post("/nearest", response_model=NearestNodeResponse, summary="Snap To Path Network")
async def find_nearest(location: LocationRequest):
    """
    Find the path node closest to a coordinate.

    Args:
        location: Query coordinate

    Returns:
        NearestNodeResponse: Node key, coordinates and distance, or success=false
    """
    return routing_service.find_nearest(location)


@router.post("/route", response_model=RouteResponse, summary="Route Between Coordinates")
async def calculate_route(request: RouteRequest):
    """
    Calculate the shortest walking route between two coordinates.

    Both points are snapped to their nearest path nodes first. "No route" and
    "same node" outcomes are returned with success=false and HTTP 200.

    Example:
        ```json
        {
            "start": {"latitude": 39.2542, "longitude": -76.7164},
            "destination": {"latitude": 39.2532, "longitude": -76.7110}
        }
        ```
    """
    try:
        return routing_service.calculate_route(request)

    except ValueError as e:
        logger.warning(f"Route calculation validation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.post("/route/places", response_model=RouteResponse, summary="Route Between Places")
async def calculate_place_route(request: PlaceRouteRequest):
    """
    Calculate the shortest walking route between two typed place names.

    Each query resolves to its first suggestion in catalog order.
    """
    try:
        return routing_service.calculate_place_route(request)

    except ValueError as e:
        logger.warning(f"Place route validation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


@router.get("/", summary="API Information")
async def get_api_info():
    """
    Get information about the Campus Routing API.

    Returns:
        dict: API information and available endpoints
    """
    return {
        "api": "Campus Routing API",
        "description": "Shortest walking routes over the campus path network",
        "endpoints": {
            "GET /api/campus/health": "Check service health status",
            "GET /api/campus/network": "Path network bounds and GeoJSON features",
            "GET /api/campus/suggest": "Typo-tolerant place suggestions",
            "POST /api/campus/nearest": "Snap a coordinate to the nearest path node",
            "POST /api/campus/route": "Route between two coordinates",
            "POST /api/campus/route/places": "Route between two typed place names",
            "GET /api/campus/": "This information endpoint"
        }
    }
