"""
Snap arbitrary coordinates onto the walking network.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ...data.distance_utils import haversine_distances
from .graph_builder import PathGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NearestNode:
    """Graph node closest to a query point."""

    key: str
    lat: float
    lon: float
    distance: float  # meters from the query point

    def to_dict(self) -> dict:
        return {
            'key': self.key,
            'lat': self.lat,
            'lon': self.lon,
            'distance_m': self.distance
        }


def find_nearest_node(lat: float, lon: float, graph: PathGraph) -> Optional[NearestNode]:
    """
    Find the graph node closest to a coordinate by haversine distance.

    Every node is scanned; on equal distances the node inserted first wins.
    There is no distance cutoff, so a far-away node is still returned.

    Args:
        lat, lon: Query point in degrees
        graph: PathGraph to search

    Returns:
        NearestNode, or None if the graph has no nodes

    Raises:
        ValueError: If the query coordinate is not finite
    """
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ValueError(f"Invalid query coordinate: ({lat}, {lon})")

    if graph.node_count == 0:
        logger.debug("Nearest node lookup on empty graph")
        return None

    keys = list(graph.nodes())
    node_data = graph.network.nodes
    lats = np.fromiter((node_data[k]['y'] for k in keys), dtype=float, count=len(keys))
    lons = np.fromiter((node_data[k]['x'] for k in keys), dtype=float, count=len(keys))

    distances = haversine_distances(lat, lon, lats, lons)
    # argmin returns the first index among equal minima
    best = int(np.argmin(distances))

    return NearestNode(
        key=keys[best],
        lat=float(lats[best]),
        lon=float(lons[best]),
        distance=float(distances[best])
    )


def find_nearest_nodes(graph: PathGraph, start_coords: Tuple[float, float],
                       end_coords: Tuple[float, float]) -> Tuple[Optional[NearestNode], Optional[NearestNode]]:
    """
    Find nearest nodes in the graph for start and end coordinates.

    Args:
        graph: PathGraph
        start_coords: (lat, lon) of start point
        end_coords: (lat, lon) of end point

    Returns:
        Tuple of (start_node, end_node); either may be None on an empty graph
    """
    start_node = find_nearest_node(start_coords[0], start_coords[1], graph)
    end_node = find_nearest_node(end_coords[0], end_coords[1], graph)
    return start_node, end_node
