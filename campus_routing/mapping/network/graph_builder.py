"""
Path graph builder: turns campus line geometry into a weighted walking network.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import geojson
import networkx as nx

from ...config.routing_config import RoutingConfig
from ...data.distance_utils import NetworkBounds, haversine_distance

logger = logging.getLogger(__name__)

LINE_TYPES = ('LineString', 'MultiLineString')


class InvalidGeometryError(ValueError):
    """Raised when a feature's coordinates cannot be read as finite numbers."""


class PathGraph:
    """
    Walking network keyed by quantized coordinates.

    Nodes live in an undirected NetworkX graph with 'y' (lat) and 'x' (lon)
    attributes; edges carry 'length' in meters. Node iteration follows
    insertion order.
    """

    def __init__(self, precision: int = 6):
        self.precision = precision
        self.network = nx.Graph()
        self.bounds = NetworkBounds()
        self.display_features: List[Dict[str, Any]] = []
        self.skipped_features: List[Tuple[int, str]] = []

    def node_key(self, lat: float, lon: float) -> str:
        return f"{lat:.{self.precision}f},{lon:.{self.precision}f}"

    def add_node(self, lat: float, lon: float) -> str:
        """Get or create the node for a coordinate and extend the bounds."""
        key = self.node_key(lat, lon)
        if key not in self.network:
            self.network.add_node(key, y=lat, x=lon)
        self.bounds.extend(lat, lon)
        return key

    def add_edge(self, a_key: str, b_key: str) -> None:
        """Connect two existing nodes, keeping the shortest length seen for the pair."""
        if a_key == b_key:
            return
        a = self.network.nodes[a_key]
        b = self.network.nodes[b_key]
        length = haversine_distance(a['y'], a['x'], b['y'], b['x'])

        if self.network.has_edge(a_key, b_key):
            edge = self.network.edges[a_key, b_key]
            edge['length'] = min(edge['length'], length)
        else:
            self.network.add_edge(a_key, b_key, length=length)

    @property
    def node_count(self) -> int:
        return self.network.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self.network.number_of_edges()

    def __len__(self) -> int:
        return self.node_count

    def __contains__(self, key) -> bool:
        return key in self.network

    def nodes(self) -> Iterator[str]:
        return iter(self.network.nodes)

    def node_coordinates(self, key: str) -> Tuple[float, float]:
        """(lat, lon) of a node."""
        data = self.network.nodes[key]
        return data['y'], data['x']

    def neighbors(self, key: str) -> Dict[str, float]:
        """Neighbor key -> edge length for one node."""
        return {neighbor: data['length'] for neighbor, data in self.network.adj[key].items()}

    def edge_weight(self, a_key: str, b_key: str) -> Optional[float]:
        if not self.network.has_edge(a_key, b_key):
            return None
        return self.network.edges[a_key, b_key]['length']

    def padded_bounds(self, ratio: float) -> NetworkBounds:
        return self.bounds.pad(ratio)

    def display_feature_collection(self) -> geojson.FeatureCollection:
        """Accepted source features, for drawing the path network."""
        return geojson.FeatureCollection(list(self.display_features))

    def get_summary(self) -> Dict[str, Any]:
        return {
            'nodes': self.node_count,
            'edges': self.edge_count,
            'display_features': len(self.display_features),
            'skipped_features': len(self.skipped_features),
            'bounds': self.bounds.to_dict() if self.bounds.is_valid() else None
        }


class PathGraphBuilder:
    """Builds a PathGraph from GeoJSON-style line features."""

    def __init__(self, config: Optional[RoutingConfig] = None):
        self.config = config or RoutingConfig()
        self.config.validate()

    def should_use_feature(self, feature: Any) -> bool:
        """
        Denylist filter: any line feature is walkable unless tagged as a barrier.

        Args:
            feature: GeoJSON feature mapping

        Returns:
            True if the feature should contribute to the graph
        """
        if not isinstance(feature, Mapping):
            return False
        geometry = feature.get('geometry')
        if not isinstance(geometry, Mapping) or geometry.get('type') not in LINE_TYPES:
            return False

        # A non-mapping 'properties' carries no tags
        properties = feature.get('properties')
        if not isinstance(properties, Mapping):
            properties = {}
        return not any(properties.get(tag) for tag in self.config.barrier_tags)

    def add_feature(self, graph: PathGraph, feature: Mapping) -> bool:
        """
        Add one feature's lines to the graph.

        The whole geometry is parsed before the graph is touched, so a bad
        feature leaves the graph unchanged.

        Returns:
            True if the feature was accepted

        Raises:
            InvalidGeometryError: If coordinates cannot be parsed
        """
        if not self.should_use_feature(feature):
            return False

        for line in _parse_lines(feature['geometry']):
            prev_key = None
            for lat, lon in line:
                key = graph.add_node(lat, lon)
                if prev_key is not None:
                    graph.add_edge(prev_key, key)
                prev_key = key

        graph.display_features.append(feature)
        return True

    def build(self, features: Any, strict: bool = False) -> PathGraph:
        """
        Build a graph from a feature list or a GeoJSON FeatureCollection.

        Args:
            features: Iterable of features, or a mapping with a 'features' list
            strict: Re-raise InvalidGeometryError instead of skipping the feature

        Returns:
            PathGraph (possibly with zero nodes)
        """
        if isinstance(features, Mapping):
            features = features.get('features') or []

        graph = PathGraph(precision=self.config.coordinate_precision)

        for index, feature in enumerate(features):
            try:
                self.add_feature(graph, feature)
            except InvalidGeometryError as e:
                if strict:
                    raise
                logger.warning(f"Skipping feature {index}: {e}")
                graph.skipped_features.append((index, str(e)))

        logger.info(f"Path graph built: {graph.node_count} nodes, {graph.edge_count} edges "
                    f"from {len(graph.display_features)} line features")
        if graph.node_count == 0:
            logger.warning("Path graph is empty - no usable line features")

        return graph


def build_graph(features: Iterable, config: Optional[RoutingConfig] = None,
                strict: bool = False) -> PathGraph:
    """
    Build a walking graph from line features.

    Args:
        features: Iterable of GeoJSON features or a FeatureCollection
        config: Routing configuration (precision, barrier tags)
        strict: Raise on unparsable coordinates instead of skipping the feature

    Returns:
        PathGraph
    """
    return PathGraphBuilder(config).build(features, strict=strict)


def _parse_lines(geometry: Mapping) -> List[List[Tuple[float, float]]]:
    """Parse LineString/MultiLineString coordinates into (lat, lon) lines of two or more vertices."""
    coordinates = geometry.get('coordinates')
    if not isinstance(coordinates, (list, tuple)):
        raise InvalidGeometryError(f"{geometry.get('type')} coordinates must be a list")

    raw_lines = [coordinates] if geometry['type'] == 'LineString' else coordinates

    lines = []
    for raw_line in raw_lines:
        if not isinstance(raw_line, (list, tuple)):
            raise InvalidGeometryError("Line coordinates must be a list of positions")
        if len(raw_line) < 2:
            continue
        lines.append([_parse_position(position) for position in raw_line])
    return lines


def _parse_position(position: Any) -> Tuple[float, float]:
    # GeoJSON positions are (lon, lat)
    try:
        lon, lat = float(position[0]), float(position[1])
    except (TypeError, ValueError, IndexError, KeyError):
        raise InvalidGeometryError(f"Invalid position {position!r}") from None

    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidGeometryError(f"Non-finite position {position!r}")
    return lat, lon
