"""
Pydantic schemas for the campus routing API.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class LocationRequest(BaseModel):
    """Request model for a single location."""
    latitude: float = Field(..., ge=-90, le=90, description="Latitude coordinate")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude coordinate")


class RouteRequest(BaseModel):
    """Request model for routing between two coordinates."""
    start: LocationRequest = Field(..., description="Starting location")
    destination: LocationRequest = Field(..., description="Destination location")


class PlaceRouteRequest(BaseModel):
    """Request model for routing between two typed place names."""
    start_query: str = Field(..., min_length=1, description="Start place, free text")
    destination_query: str = Field(..., min_length=1, description="Destination place, free text")


class PlaceResponse(BaseModel):
    """A named campus place."""
    display_name: str
    lat: str
    lon: str


class SuggestionResponse(BaseModel):
    """Place suggestions for a query, in catalog order."""
    query: str
    suggestions: List[PlaceResponse] = Field(default_factory=list)


class NearestNodeResponse(BaseModel):
    """Response model for snapping a coordinate to the path network."""
    success: bool = Field(..., description="Whether a node was found")
    message: str = Field(..., description="Status message")
    node_key: Optional[str] = Field(default=None, description="Quantized node key")
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    distance_m: Optional[float] = Field(default=None, description="Distance from the query point in meters")


class RouteStats(BaseModel):
    """Statistics about a calculated route."""
    total_distance_m: float = Field(..., description="Total route distance in meters")
    formatted_distance: str = Field(..., description="Distance for display, e.g. '312 m'")
    total_time_s: float = Field(..., description="Estimated walking time in seconds")
    node_count: int = Field(..., description="Number of path nodes on the route")


class RouteResponse(BaseModel):
    """Response model for route calculation."""
    success: bool = Field(..., description="Whether a route was found")
    status: str = Field(..., description="found, same_node, no_route or location_not_found")
    message: str = Field(..., description="Status message")
    route_geojson: Optional[Dict[str, Any]] = Field(default=None, description="Route as GeoJSON FeatureCollection")
    route_stats: Optional[RouteStats] = Field(default=None, description="Route statistics")
    start_place: Optional[str] = Field(default=None, description="Resolved start place name")
    destination_place: Optional[str] = Field(default=None, description="Resolved destination place name")


class NetworkResponse(BaseModel):
    """The loaded path network, for drawing."""
    node_count: int
    edge_count: int
    bounds: Optional[Dict[str, float]] = Field(default=None, description="lat/lon bounds of the network")
    padded_bounds: Optional[Dict[str, float]] = Field(default=None, description="Bounds padded for map fitting")
    display_features: Dict[str, Any] = Field(..., description="Path features as GeoJSON FeatureCollection")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    graph_loaded: bool = Field(..., description="Whether a non-empty path network is loaded")
    node_count: int = Field(..., description="Number of path nodes")
    edge_count: int = Field(..., description="Number of path edges")
    place_count: int = Field(..., description="Number of searchable places")


class ErrorResponse(BaseModel):
    """Error response model."""
    success: bool = Field(False, description="Always false for error responses")
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Detailed error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
