"""
Service layer for the campus routing API.
"""

import logging
import os
from dataclasses import replace
from typing import Any, Dict, List, Optional

import geojson

from campus_routing import __version__
from campus_routing.algorithms.optimization.campus_navigator import CampusNavigator, NavigationResult
from campus_routing.config.routing_config import RoutingConfig
from campus_routing.data.data_loader import get_data_bbox, load_feature_collection, load_place_catalog
from campus_routing.data.distance_utils import NetworkBounds, format_distance
from campus_routing.data.place_catalog import PlaceRecord
from campus_routing.mapping.network.graph_builder import PathGraph, build_graph
from api.schemas.routing import (
    HealthResponse,
    LocationRequest,
    NearestNodeResponse,
    NetworkResponse,
    PlaceResponse,
    PlaceRouteRequest,
    RouteRequest,
    RouteResponse,
    RouteStats,
    SuggestionResponse
)

logger = logging.getLogger(__name__)


class CampusRoutingService:
    """
    Service class that provides campus routing functionality for the API.

    The path graph and place catalog are loaded once and only read afterwards.
    """

    def __init__(self, config: Optional[RoutingConfig] = None):
        """Initialize the routing service."""
        config = config or RoutingConfig()
        self.config = replace(
            config,
            paths_data_path=config.paths_data_path or os.environ.get('CAMPUS_PATHS_FILE'),
            places_data_path=config.places_data_path or os.environ.get('CAMPUS_PLACES_FILE')
        )

        self.graph = PathGraph(precision=self.config.coordinate_precision)
        self.catalog: List[PlaceRecord] = []
        self.data_bbox: Optional[NetworkBounds] = None
        self.is_initialized = False

        # Initialize the service
        self._initialize()
        self.navigator = CampusNavigator(self.graph, self.catalog, self.config)

    def _initialize(self) -> None:
        """Load path geometry and the place catalog."""
        logger.info("Initializing campus routing service...")

        try:
            self.catalog = load_place_catalog(self.config.places_data_path)
        except (FileNotFoundError, ValueError) as e:
            logger.warning(f"Place catalog unavailable, search disabled: {e}")
            self.catalog = []

        try:
            collection = load_feature_collection(self.config.paths_data_path)
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Failed to load path data: {e}")
            return

        self.data_bbox = get_data_bbox(collection)
        self.graph = build_graph(collection, self.config)
        self.is_initialized = self.graph.node_count > 0

        if self.is_initialized:
            logger.info(f"Service initialized with {self.graph.node_count} path nodes "
                        f"and {len(self.catalog)} places")
        else:
            logger.warning("Path data contains no usable lines")

    def get_health_status(self) -> HealthResponse:
        """Get the health status of the routing service."""
        return HealthResponse(
            status="healthy" if self.is_initialized else "degraded",
            version=__version__,
            graph_loaded=self.is_initialized,
            node_count=self.graph.node_count,
            edge_count=self.graph.edge_count,
            place_count=len(self.catalog)
        )

    def get_network(self) -> NetworkResponse:
        """Describe the loaded network, falling back to the data bbox when the graph has no extent."""
        bounds = self.graph.bounds if self.graph.bounds.is_valid() else self.data_bbox
        padded = bounds.pad(self.config.bounds_padding) if bounds is not None else None

        return NetworkResponse(
            node_count=self.graph.node_count,
            edge_count=self.graph.edge_count,
            bounds=bounds.to_dict() if bounds is not None else None,
            padded_bounds=padded.to_dict() if padded is not None and padded.is_valid() else None,
            display_features=self.graph.display_feature_collection()
        )

    def suggest(self, query: str, limit: Optional[int] = None) -> SuggestionResponse:
        """Suggest catalog places for a query."""
        places = self.navigator.suggest(query, limit)
        return SuggestionResponse(
            query=query,
            suggestions=[PlaceResponse(**place.to_dict()) for place in places]
        )

    def find_nearest(self, location: LocationRequest) -> NearestNodeResponse:
        """Snap a coordinate to the path network."""
        nearest = self.navigator.snap(location.latitude, location.longitude)
        if nearest is None:
            return NearestNodeResponse(success=False, message="No nearby path node found.")

        return NearestNodeResponse(
            success=True,
            message="Nearest path node found",
            node_key=nearest.key,
            latitude=nearest.lat,
            longitude=nearest.lon,
            distance_m=round(nearest.distance, 2)
        )

    def calculate_route(self, request: RouteRequest) -> RouteResponse:
        """
        Calculate a walking route between two coordinates.

        Args:
            request: Route calculation request

        Returns:
            RouteResponse with route GeoJSON and statistics
        """
        logger.info(f"Calculating route from {request.start.model_dump()} to {request.destination.model_dump()}")

        result = self.navigator.route_between_coords(
            (request.start.latitude, request.start.longitude),
            (request.destination.latitude, request.destination.longitude)
        )
        return self._convert_to_response(result)

    def calculate_place_route(self, request: PlaceRouteRequest) -> RouteResponse:
        """
        Calculate a walking route between two typed place names.

        Raises:
            ValueError: If a matched place has malformed coordinates
        """
        logger.info(f"Calculating route from '{request.start_query}' to '{request.destination_query}'")

        result = self.navigator.route_between_places(request.start_query, request.destination_query)
        return self._convert_to_response(result)

    def _convert_to_response(self, result: NavigationResult) -> RouteResponse:
        """
        Convert navigator result to API response format.

        Args:
            result: NavigationResult from CampusNavigator

        Returns:
            Formatted RouteResponse
        """
        route_geojson = None
        route_stats = None
        if result.found:
            route_geojson = self._route_to_geojson(result)
            route_stats = self._calculate_route_stats(result)

        return RouteResponse(
            success=result.found,
            status=result.status.value,
            message=result.message,
            route_geojson=route_geojson,
            route_stats=route_stats,
            start_place=result.start_place.display_name if result.start_place else None,
            destination_place=result.end_place.display_name if result.end_place else None
        )

    def _route_to_geojson(self, result: NavigationResult) -> Dict[str, Any]:
        """
        Convert a found route to GeoJSON format.

        Args:
            result: NavigationResult with a found path

        Returns:
            GeoJSON FeatureCollection
        """
        path = result.path
        line = path.to_linestring(self.graph)

        # Create LineString feature
        line_feature = geojson.Feature(
            geometry=geojson.LineString([list(coord) for coord in line.coords]),
            properties={
                "algorithm": path.algorithm,
                "total_distance_m": path.distance,
                "node_count": len(path.nodes),
                "calculation_time_ms": path.calculation_time * 1000 if path.calculation_time else None
            }
        )

        # Create point features for start and end
        start_feature = geojson.Feature(
            geometry=geojson.Point([result.start.lon, result.start.lat]),
            properties={"type": "start", "name": "Start Point", "node_key": result.start.key}
        )

        end_feature = geojson.Feature(
            geometry=geojson.Point([result.end.lon, result.end.lat]),
            properties={"type": "end", "name": "End Point", "node_key": result.end.key}
        )

        return geojson.FeatureCollection([
            line_feature,
            start_feature,
            end_feature
        ])

    def _calculate_route_stats(self, result: NavigationResult) -> RouteStats:
        """Calculate statistics for a found route."""
        distance_m = result.path.distance
        return RouteStats(
            total_distance_m=round(distance_m, 1),
            formatted_distance=format_distance(distance_m),
            total_time_s=round(result.walking_time_s, 0),
            node_count=len(result.path.nodes)
        )


# Global service instance
routing_service = CampusRoutingService()
