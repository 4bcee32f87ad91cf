import pytest

from campus_routing.algorithms.optimization.campus_navigator import CampusNavigator, RouteStatus
from campus_routing.config.routing_config import RoutingConfig
from campus_routing.data.distance_utils import haversine_distance
from campus_routing.mapping.network.graph_builder import build_graph

LIBRARY = "39.254600,-76.713900"
FINE_ARTS = "39.253200,-76.711000"
RAC = "39.254200,-76.716400"
BWTECH_NORTH = "39.257200,-76.710200"


@pytest.fixture
def navigator(campus_graph, campus_catalog):
    return CampusNavigator(campus_graph, campus_catalog)


def test_route_between_places(navigator):
    result = navigator.route_between_places("Library", "Fine Art")

    assert result.status == RouteStatus.FOUND
    assert result.found
    assert result.start_place.display_name == "Albin O. Kuhn Library & Gallery"
    assert result.end_place.display_name == "Fine Arts Building"
    assert result.path.nodes[0] == LIBRARY
    assert result.path.nodes[-1] == FINE_ARTS
    assert len(result.path.nodes) == 4

    coords = [(39.2546, -76.7139), (39.2540, -76.7132), (39.2537, -76.7122), (39.2532, -76.7110)]
    expected = sum(haversine_distance(*coords[i], *coords[i + 1]) for i in range(3))
    assert result.path.distance == pytest.approx(expected)
    assert result.message == f"Distance: {expected:.0f} m"


def test_walking_time_uses_configured_speed(campus_graph, campus_catalog):
    slow = CampusNavigator(campus_graph, campus_catalog, RoutingConfig(walking_speed_mps=1.0))
    result = slow.route_between_places("Retriever", "Fine Art")
    assert result.walking_time_s == pytest.approx(result.path.distance)


def test_route_between_coords_snaps_both_ends(navigator):
    result = navigator.route_between_coords((39.25421, -76.71641), (39.25319, -76.71099))

    assert result.found
    assert result.start.key == RAC
    assert result.end.key == FINE_ARTS
    assert result.path.nodes[1] == LIBRARY


def test_same_node_is_not_routed(navigator):
    result = navigator.route_between_places("Library", "Kuhn")

    assert result.status == RouteStatus.SAME_NODE
    assert result.message == "Start and End are the same node."
    assert result.path is None
    assert not result.found


def test_disconnected_destination(navigator):
    result = navigator.route_between_places("Retriever", "bwtech")

    assert result.status == RouteStatus.NO_ROUTE
    assert result.message == "No route found between the selected points."
    assert result.end.key == BWTECH_NORTH
    assert result.path.nodes == []
    assert navigator.route_coordinates(result) == []


def test_unknown_places(navigator):
    result = navigator.route_between_places("zzzzzz", "Library")
    assert result.status == RouteStatus.LOCATION_NOT_FOUND
    assert result.message == "Start location not found."

    result = navigator.route_between_places("zzzzzz", "qqqqqq")
    assert result.message == "Start and End location not found."

    result = navigator.route_between_places("Library", "")
    assert result.message == "End location not found."


def test_empty_graph_reports_location_not_found(campus_catalog):
    navigator = CampusNavigator(build_graph([]), campus_catalog)

    assert navigator.snap(39.25, -76.71) is None
    result = navigator.route_between_coords((39.25, -76.71), (39.26, -76.72))
    assert result.status == RouteStatus.LOCATION_NOT_FOUND


def test_navigator_without_catalog_has_no_suggestions(campus_graph):
    navigator = CampusNavigator(campus_graph)
    assert navigator.suggest("Library") == []
    assert navigator.route_between_places("Library", "Fine Art").status == RouteStatus.LOCATION_NOT_FOUND


def test_suggest_uses_configured_limit(campus_graph, campus_catalog):
    navigator = CampusNavigator(campus_graph, campus_catalog, RoutingConfig.create_search_box_config())
    assert len(navigator.suggest("Building")) == 6
    assert len(navigator.suggest("Building", limit=2)) == 2


def test_route_coordinates_and_summary(navigator):
    result = navigator.route_between_places("Retriever", "Fine Art")

    coords = navigator.route_coordinates(result)
    assert coords[0] == (39.2542, -76.7164)
    assert coords[-1] == (39.2532, -76.7110)

    summary = result.get_summary()
    assert summary["status"] == "found"
    assert summary["start_place"] == "Retriever Activities Center (RAC)"
    assert summary["node_count"] == 5
    assert summary["walking_time_s"] > 0


def test_malformed_place_coordinates_raise(campus_graph):
    from campus_routing.data.place_catalog import PlaceRecord

    catalog = [PlaceRecord("The Commons", "39.25515120000", "-76.71133180000,")]
    navigator = CampusNavigator(campus_graph, catalog)
    with pytest.raises(ValueError):
        navigator.route_between_places("Commons", "Commons")
