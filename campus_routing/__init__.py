"""
Campus Walking Router

Snaps typed building names or map clicks onto a pedestrian path network
built from map line geometry, and finds the shortest walk between them.

## Quick Start

```python
from campus_routing import CampusNavigator, build_graph, load_path_features, load_place_catalog

graph = build_graph(load_path_features())
navigator = CampusNavigator(graph, load_place_catalog())

result = navigator.route_between_places("Library", "Fine Arts")
print(result.message)  # e.g. "Distance: 300 m"
```

## Main Components

- **build_graph / PathGraph**: walking network from LineString features
- **find_nearest_node**: snap a coordinate onto the network
- **DijkstraRouter**: shortest path between two node keys
- **suggest_places**: typo-tolerant place search
- **CampusNavigator**: all of the above behind one interface

## Architecture

- `algorithms/`: Routing, place matching and orchestration
- `mapping/`: Graph construction and snapping
- `data/`: Data loading, bundled campus data and distance utilities
- `config/`: Configuration management
"""

from .algorithms import (
    CampusNavigator,
    DijkstraRouter,
    FuzzyPlaceMatcher,
    NavigationResult,
    PathResult,
    RouteStatus,
    shortest_path,
    suggest_places
)
from .config import RoutingConfig
from .data import PlaceRecord, haversine_distance, load_path_features, load_place_catalog
from .mapping import InvalidGeometryError, NearestNode, PathGraph, build_graph, find_nearest_node

# Version information
__version__ = "1.0.0"

# Public API
__all__ = [
    # Main interfaces
    'CampusNavigator',
    'NavigationResult',
    'RouteStatus',
    'RoutingConfig',

    # Core algorithms
    'build_graph',
    'PathGraph',
    'InvalidGeometryError',
    'find_nearest_node',
    'NearestNode',
    'DijkstraRouter',
    'PathResult',
    'shortest_path',
    'FuzzyPlaceMatcher',
    'suggest_places',

    # Utilities
    'PlaceRecord',
    'haversine_distance',
    'load_path_features',
    'load_place_catalog',

    # Metadata
    '__version__'
]
