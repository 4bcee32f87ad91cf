import pytest

from campus_routing.data.data_loader import load_path_features, load_place_catalog
from campus_routing.mapping.network.graph_builder import PathGraph, build_graph


def line_feature(coords, **properties):
    """GeoJSON LineString feature from (lon, lat) pairs."""
    return {
        "type": "Feature",
        "properties": properties,
        "geometry": {"type": "LineString", "coordinates": [list(c) for c in coords]},
    }


def make_graph(nodes, edges):
    """
    PathGraph with hand-set edge lengths.

    nodes: {key: (lat, lon)}, edges: [(a, b, length)]
    """
    graph = PathGraph()
    for key, (lat, lon) in nodes.items():
        graph.network.add_node(key, y=lat, x=lon)
        graph.bounds.extend(lat, lon)
    for a, b, length in edges:
        graph.network.add_edge(a, b, length=length)
    return graph


@pytest.fixture
def square_graph():
    # A - B - C - D - A, every side 10 m
    return make_graph(
        {"A": (0.0, 0.0), "B": (0.0, 0.001), "C": (0.001, 0.001), "D": (0.001, 0.0)},
        [("A", "B", 10.0), ("B", "C", 10.0), ("C", "D", 10.0), ("D", "A", 10.0)],
    )


@pytest.fixture(scope="session")
def campus_features():
    return load_path_features()


@pytest.fixture(scope="session")
def campus_catalog():
    return load_place_catalog()


@pytest.fixture
def campus_graph(campus_features):
    return build_graph(campus_features)
