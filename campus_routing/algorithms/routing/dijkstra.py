"""
Dijkstra shortest-path routing over the campus walking network.
"""

import heapq
import itertools
import logging
import math
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from shapely.geometry import LineString

from ...data.distance_utils import calculate_route_distance
from ...mapping.network.graph_builder import PathGraph

logger = logging.getLogger(__name__)


@dataclass
class PathResult:
    """Ordered node keys from start to end (inclusive) and the total length."""

    nodes: List[str] = field(default_factory=list)
    distance: float = math.inf  # meters; inf when unreachable
    algorithm: str = "dijkstra"
    calculation_time: Optional[float] = None

    @classmethod
    def unreachable(cls) -> 'PathResult':
        return cls(nodes=[], distance=math.inf)

    @property
    def found(self) -> bool:
        return bool(self.nodes) and math.isfinite(self.distance)

    @property
    def is_trivial(self) -> bool:
        """Start and end are the same node."""
        return len(self.nodes) == 1

    def coordinates(self, graph: PathGraph) -> List[Tuple[float, float]]:
        """(lat, lon) of every node on the path."""
        return [graph.node_coordinates(key) for key in self.nodes]

    def to_linestring(self, graph: PathGraph) -> Optional[LineString]:
        """Path geometry in (lon, lat) order, or None for paths shorter than one edge."""
        if len(self.nodes) < 2:
            return None
        return LineString([(lon, lat) for lat, lon in self.coordinates(graph)])

    def get_summary(self) -> Dict[str, Any]:
        return {
            'algorithm': self.algorithm,
            'node_count': len(self.nodes),
            'total_distance_m': round(self.distance, 1) if self.found else None,
            'calculation_time_ms': round(self.calculation_time * 1000, 1) if self.calculation_time else None
        }


class DijkstraRouter:
    """
    Single-source shortest path with a binary heap and lazy deletion.

    The router only reads the graph; every call keeps its own distance,
    predecessor and visited state, so one router can serve many callers.
    """

    def __init__(self, graph: PathGraph):
        self.graph = graph

    def find_route(self, start_key: str, end_key: str) -> PathResult:
        """
        Find the shortest path between two node keys.

        Args:
            start_key: Starting node key
            end_key: Destination node key

        Returns:
            PathResult; empty path with infinite distance when unreachable
        """
        start_time = time.time()
        adjacency = self.graph.network.adj

        if start_key not in adjacency or end_key not in adjacency:
            logger.warning(f"Unknown node key in route request: {start_key} -> {end_key}")
            return PathResult.unreachable()

        logger.debug(f"Finding route from {start_key} to {end_key}")

        dist: Dict[str, float] = {start_key: 0.0}
        prev: Dict[str, str] = {}
        visited = set()

        # (distance, insertion counter, key); the counter keeps pops stable on ties
        counter = itertools.count()
        queue = [(0.0, next(counter), start_key)]

        while queue:
            d, _, u = heapq.heappop(queue)
            if u in visited:
                continue
            visited.add(u)
            if u == end_key:
                break

            for v, edge in adjacency[u].items():
                if v in visited:
                    continue
                alt = d + edge['length']
                if alt < dist.get(v, math.inf):
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(queue, (alt, next(counter), v))

        if end_key not in prev and end_key != start_key:
            logger.info(f"No path found from {start_key} to {end_key}")
            route = PathResult.unreachable()
            route.calculation_time = time.time() - start_time
            return route

        path = [end_key]
        while path[-1] != start_key:
            path.append(prev[path[-1]])
        path.reverse()

        route = PathResult(nodes=path, distance=dist[end_key])
        route.calculation_time = time.time() - start_time

        logger.info(f"Route found: {len(path)} nodes, "
                    f"{route.distance:.0f}m, "
                    f"calculated in {route.calculation_time*1000:.1f}ms")
        return route

    def validate_route(self, route: PathResult, tolerance: float = 1e-6) -> bool:
        """
        Validate that a route is continuous and its distance matches its edges.

        Args:
            route: Route to validate
            tolerance: Allowed absolute difference in meters

        Returns:
            True if route is valid
        """
        if not route.found:
            return False

        for i in range(len(route.nodes) - 1):
            if self.graph.edge_weight(route.nodes[i], route.nodes[i + 1]) is None:
                logger.error(f"Discontinuous path at nodes {route.nodes[i]} -> {route.nodes[i + 1]}")
                return False

        recomputed = calculate_route_distance(route.nodes, self.graph)
        if abs(recomputed - route.distance) > tolerance:
            logger.error(f"Route distance mismatch: reported {route.distance}, edges sum to {recomputed}")
            return False

        return True


def shortest_path(graph: PathGraph, start_key: str, end_key: str) -> PathResult:
    """Functional form of DijkstraRouter.find_route."""
    return DijkstraRouter(graph).find_route(start_key, end_key)
