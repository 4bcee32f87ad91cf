"""
Distance calculation utilities optimized for performance.
"""

import math
from dataclasses import dataclass
from typing import Dict, List

import numpy as np

# Earth's radius in meters
EARTH_RADIUS_M = 6371000


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points on Earth.

    Args:
        lat1, lon1: First point coordinates
        lat2, lon2: Second point coordinates

    Returns:
        Distance in meters
    """
    # Convert to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    # Haversine formula
    a = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def haversine_distances(lat: float, lon: float,
                        lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
    """
    Vectorised haversine from one point to many.

    Args:
        lat, lon: Query point coordinates
        lats, lons: Arrays of target coordinates (same length)

    Returns:
        Array of distances in meters, one per target
    """
    lat_rad = np.radians(lat)
    lats_rad = np.radians(lats)
    delta_lat = np.radians(lats - lat)
    delta_lon = np.radians(lons - lon)

    a = (np.sin(delta_lat / 2) ** 2 +
         np.cos(lat_rad) * np.cos(lats_rad) * np.sin(delta_lon / 2) ** 2)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def calculate_route_distance(route_nodes: List, graph) -> float:
    """
    Calculate the total geometric distance of a route.

    Args:
        route_nodes: List of node keys in the route
        graph: PathGraph or NetworkX graph with 'length' edge attributes

    Returns:
        Total distance in meters
    """
    network = getattr(graph, 'network', graph)
    total_distance = 0.0

    for i in range(len(route_nodes) - 1):
        current_node = route_nodes[i]
        next_node = route_nodes[i + 1]

        if network.has_edge(current_node, next_node):
            total_distance += network.edges[current_node, next_node].get('length', 0)

    return total_distance


@dataclass
class NetworkBounds:
    """Cumulative lat/lon bounding box; empty until the first point is added."""

    lat_min: float = math.inf
    lat_max: float = -math.inf
    lon_min: float = math.inf
    lon_max: float = -math.inf

    def extend(self, lat: float, lon: float) -> None:
        self.lat_min = min(self.lat_min, lat)
        self.lat_max = max(self.lat_max, lat)
        self.lon_min = min(self.lon_min, lon)
        self.lon_max = max(self.lon_max, lon)

    def is_valid(self) -> bool:
        return self.lat_min <= self.lat_max and self.lon_min <= self.lon_max

    def pad(self, ratio: float) -> 'NetworkBounds':
        """
        Return a copy grown on every side by ratio of its own extent.

        Args:
            ratio: Fraction of the height/width added to each side

        Returns:
            New NetworkBounds (empty when this box is invalid)
        """
        if not self.is_valid():
            return NetworkBounds()
        lat_buffer = (self.lat_max - self.lat_min) * ratio
        lon_buffer = (self.lon_max - self.lon_min) * ratio
        return NetworkBounds(
            lat_min=self.lat_min - lat_buffer,
            lat_max=self.lat_max + lat_buffer,
            lon_min=self.lon_min - lon_buffer,
            lon_max=self.lon_max + lon_buffer
        )

    def to_dict(self) -> Dict[str, float]:
        return {
            'lat_min': self.lat_min,
            'lat_max': self.lat_max,
            'lon_min': self.lon_min,
            'lon_max': self.lon_max
        }


def format_distance(meters: float) -> str:
    """Format a distance for display: meters below 1 km, kilometers above."""
    if meters < 1000:
        return f"{meters:.0f} m"
    return f"{meters / 1000:.2f} km"


def estimate_walking_time(meters: float, speed_mps: float = 5000 / 3600) -> float:
    """Estimated walking time in seconds at the given speed."""
    return meters / speed_mps
