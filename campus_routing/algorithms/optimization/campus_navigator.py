"""
Campus navigator: place search, snapping and routing in one call.

Each request returns a NavigationResult; the navigator keeps no
per-request state, so one instance can serve any number of callers.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ...config.routing_config import RoutingConfig
from ...data.distance_utils import estimate_walking_time, format_distance
from ...data.place_catalog import PlaceRecord
from ...mapping.network.graph_builder import PathGraph
from ...mapping.network.nearest_node import NearestNode, find_nearest_node
from ..matching.fuzzy_matcher import FuzzyPlaceMatcher
from ..routing.dijkstra import DijkstraRouter, PathResult

logger = logging.getLogger(__name__)


class RouteStatus(str, Enum):
    FOUND = "found"
    SAME_NODE = "same_node"
    NO_ROUTE = "no_route"
    LOCATION_NOT_FOUND = "location_not_found"


@dataclass
class NavigationResult:
    """Outcome of a navigation request."""

    status: RouteStatus
    message: str
    path: Optional[PathResult] = None
    start: Optional[NearestNode] = None
    end: Optional[NearestNode] = None
    start_place: Optional[PlaceRecord] = None
    end_place: Optional[PlaceRecord] = None
    walking_time_s: Optional[float] = None

    @property
    def found(self) -> bool:
        return self.status == RouteStatus.FOUND

    def get_summary(self) -> Dict[str, Any]:
        summary = {
            'status': self.status.value,
            'message': self.message,
            'start_node': self.start.key if self.start else None,
            'end_node': self.end.key if self.end else None,
            'start_place': self.start_place.display_name if self.start_place else None,
            'end_place': self.end_place.display_name if self.end_place else None,
        }
        if self.path is not None:
            summary.update(self.path.get_summary())
        if self.walking_time_s is not None:
            summary['walking_time_s'] = round(self.walking_time_s, 0)
        return summary


class CampusNavigator:
    """
    Main interface for campus walking routes.

    Ties together the place matcher, the nearest-node locator and the
    Dijkstra router over one prebuilt PathGraph.
    """

    def __init__(self, graph: PathGraph, catalog: Optional[Sequence[PlaceRecord]] = None,
                 config: Optional[RoutingConfig] = None):
        """
        Initialize navigator.

        Args:
            graph: Walking network (treated as read-only)
            catalog: Searchable places; empty if None
            config: Routing configuration parameters
        """
        self.config = config or RoutingConfig()
        self.config.validate()

        self.graph = graph
        self.matcher = FuzzyPlaceMatcher(catalog or [], limit=self.config.suggestion_limit)
        self.router = DijkstraRouter(graph)

        logger.info(f"CampusNavigator initialized ({graph.node_count} nodes, "
                    f"{len(self.matcher.catalog)} places)")

    def suggest(self, query: str, limit: Optional[int] = None) -> List[PlaceRecord]:
        """Suggest places for a partial or misspelled name."""
        return self.matcher.suggest(query, limit)

    def snap(self, lat: float, lon: float) -> Optional[NearestNode]:
        """Nearest graph node to a coordinate, or None on an empty graph."""
        return find_nearest_node(lat, lon, self.graph)

    def route_between_nodes(self, start: NearestNode, end: NearestNode) -> NavigationResult:
        """
        Route between two snapped nodes.

        Args:
            start: Snapped start node
            end: Snapped end node

        Returns:
            NavigationResult with status FOUND, SAME_NODE or NO_ROUTE
        """
        if start.key == end.key:
            return NavigationResult(
                status=RouteStatus.SAME_NODE,
                message="Start and End are the same node.",
                start=start,
                end=end
            )

        path = self.router.find_route(start.key, end.key)
        if not path.found:
            return NavigationResult(
                status=RouteStatus.NO_ROUTE,
                message="No route found between the selected points.",
                path=path,
                start=start,
                end=end
            )

        return NavigationResult(
            status=RouteStatus.FOUND,
            message=f"Distance: {format_distance(path.distance)}",
            path=path,
            start=start,
            end=end,
            walking_time_s=estimate_walking_time(path.distance, self.config.walking_speed_mps)
        )

    def route_between_coords(self, start_coords: Tuple[float, float],
                             end_coords: Tuple[float, float]) -> NavigationResult:
        """
        Snap two (lat, lon) points to the network and route between them.

        Args:
            start_coords: (lat, lon) of route start
            end_coords: (lat, lon) of route end

        Returns:
            NavigationResult
        """
        logger.info(f"Finding route from {start_coords} to {end_coords}")

        start = self.snap(*start_coords)
        end = self.snap(*end_coords)
        if start is None or end is None:
            return NavigationResult(
                status=RouteStatus.LOCATION_NOT_FOUND,
                message="Could not find nearby path nodes for one or both locations.",
                start=start,
                end=end
            )

        return self.route_between_nodes(start, end)

    def route_between_places(self, start_query: str, end_query: str) -> NavigationResult:
        """
        Resolve two place queries with the matcher and route between them.

        The first suggestion (catalog order) is used for each query.

        Args:
            start_query: Free-text start location
            end_query: Free-text destination

        Returns:
            NavigationResult with the resolved places attached
        """
        start_place = self.matcher.best_match(start_query)
        end_place = self.matcher.best_match(end_query)

        if start_place is None or end_place is None:
            missing = []
            if start_place is None:
                missing.append('Start')
            if end_place is None:
                missing.append('End')
            return NavigationResult(
                status=RouteStatus.LOCATION_NOT_FOUND,
                message=f"{' and '.join(missing)} location not found.",
                start_place=start_place,
                end_place=end_place
            )

        logger.info(f"Resolved places: '{start_place.display_name}' -> '{end_place.display_name}'")
        result = self.route_between_coords(start_place.coordinates, end_place.coordinates)
        result.start_place = start_place
        result.end_place = end_place
        return result

    def route_coordinates(self, result: NavigationResult) -> List[Tuple[float, float]]:
        """(lat, lon) polyline of a result's path; empty if there is none."""
        if result.path is None or not result.path.found:
            return []
        return result.path.coordinates(self.graph)
