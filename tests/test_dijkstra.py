import math

import pytest
from shapely.geometry import LineString

from campus_routing.algorithms.routing.dijkstra import DijkstraRouter, PathResult, shortest_path
from campus_routing.data.distance_utils import haversine_distance
from campus_routing.mapping.network.graph_builder import build_graph

from conftest import line_feature, make_graph


def test_square_opposite_corners(square_graph):
    result = shortest_path(square_graph, "A", "C")

    assert result.distance == pytest.approx(20.0)
    assert len(result.nodes) == 3
    assert result.nodes[0] == "A"
    assert result.nodes[-1] == "C"
    assert result.nodes[1] in ("B", "D")


def test_adjacent_corners(square_graph):
    result = shortest_path(square_graph, "A", "B")
    assert result.nodes == ["A", "B"]
    assert result.distance == pytest.approx(10.0)


def test_same_start_and_end(square_graph):
    result = shortest_path(square_graph, "B", "B")
    assert result.nodes == ["B"]
    assert result.distance == 0.0
    assert result.found
    assert result.is_trivial


def test_disconnected_components_are_unreachable():
    graph = make_graph(
        {"a": (0, 0), "b": (0, 1), "x": (5, 5), "y": (5, 6)},
        [("a", "b", 1.0), ("x", "y", 1.0)],
    )
    result = shortest_path(graph, "a", "y")

    assert result.nodes == []
    assert math.isinf(result.distance)
    assert not result.found


def test_unknown_keys_are_unreachable(square_graph):
    assert not shortest_path(square_graph, "A", "Z").found
    assert not shortest_path(square_graph, "Z", "A").found
    assert not shortest_path(build_graph([]), "Z", "Z").found


def test_prefers_shorter_multi_hop_route():
    graph = make_graph(
        {"a": (0, 0), "b": (0, 1), "c": (0, 2)},
        [("a", "b", 1.0), ("b", "c", 1.0), ("a", "c", 5.0)],
    )
    result = shortest_path(graph, "a", "c")
    assert result.nodes == ["a", "b", "c"]
    assert result.distance == pytest.approx(2.0)


def test_improved_tentative_distance_wins():
    # b is first reached directly (10), then improved through c (1 + 1)
    graph = make_graph(
        {"a": (0, 0), "b": (0, 1), "c": (1, 0), "d": (1, 1)},
        [("a", "b", 10.0), ("a", "c", 1.0), ("c", "b", 1.0), ("b", "d", 1.0)],
    )
    result = shortest_path(graph, "a", "d")
    assert result.nodes == ["a", "c", "b", "d"]
    assert result.distance == pytest.approx(3.0)


def test_route_is_symmetric_in_distance(campus_graph):
    router = DijkstraRouter(campus_graph)
    start, end = "39.254200,-76.716400", "39.253200,-76.710200"

    forward = router.find_route(start, end)
    backward = router.find_route(end, start)
    assert forward.distance == pytest.approx(backward.distance)
    assert forward.nodes == list(reversed(backward.nodes))


def test_router_leaves_graph_untouched_between_calls(campus_graph):
    router = DijkstraRouter(campus_graph)
    weights_before = {(a, b): d["length"] for a, b, d in campus_graph.network.edges(data=True)}

    first = router.find_route("39.254200,-76.716400", "39.252200,-76.715200")
    router.find_route("39.257200,-76.710200", "39.254200,-76.716400")
    again = router.find_route("39.254200,-76.716400", "39.252200,-76.715200")

    assert first.nodes == again.nodes
    assert first.distance == again.distance
    weights_after = {(a, b): d["length"] for a, b, d in campus_graph.network.edges(data=True)}
    assert weights_after == weights_before


def test_two_lines_sharing_an_endpoint():
    west, shared, east = (-76.7140, 39.2540), (-76.7130, 39.2545), (-76.7120, 39.2538)
    graph = build_graph([line_feature([west, shared]), line_feature([shared, east])])

    start = graph.node_key(west[1], west[0])
    middle = graph.node_key(shared[1], shared[0])
    end = graph.node_key(east[1], east[0])
    result = shortest_path(graph, start, end)

    expected = (haversine_distance(west[1], west[0], shared[1], shared[0]) +
                haversine_distance(shared[1], shared[0], east[1], east[0]))
    assert result.nodes == [start, middle, end]
    assert result.distance == pytest.approx(expected)


def test_validate_route(campus_graph, square_graph):
    router = DijkstraRouter(campus_graph)
    route = router.find_route("39.254200,-76.716400", "39.253200,-76.710200")
    assert router.validate_route(route)

    assert not router.validate_route(PathResult.unreachable())

    broken = PathResult(nodes=["39.254200,-76.716400", "39.253200,-76.710200"], distance=1.0)
    assert not router.validate_route(broken)

    square_router = DijkstraRouter(square_graph)
    wrong_length = PathResult(nodes=["A", "B"], distance=99.0)
    assert not square_router.validate_route(wrong_length)


def test_path_geometry(campus_graph):
    route = shortest_path(campus_graph, "39.254200,-76.716400", "39.253200,-76.711000")

    assert route.coordinates(campus_graph)[0] == (39.2542, -76.7164)
    line = route.to_linestring(campus_graph)
    assert isinstance(line, LineString)
    assert list(line.coords)[0] == (-76.7164, 39.2542)
    assert len(line.coords) == len(route.nodes)

    trivial = shortest_path(campus_graph, "39.254200,-76.716400", "39.254200,-76.716400")
    assert trivial.to_linestring(campus_graph) is None


def test_summary(square_graph):
    summary = shortest_path(square_graph, "A", "C").get_summary()
    assert summary["algorithm"] == "dijkstra"
    assert summary["node_count"] == 3
    assert summary["total_distance_m"] == 20.0

    assert PathResult.unreachable().get_summary()["total_distance_m"] is None
