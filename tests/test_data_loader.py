import json

import pytest

from campus_routing.data.data_loader import (
    get_data_bbox,
    load_feature_collection,
    load_path_features,
    load_place_catalog,
)
from campus_routing.data.place_catalog import PlaceRecord


def test_bundled_path_features(campus_features):
    assert len(campus_features) == 8
    assert all(f["type"] == "Feature" for f in campus_features)


def test_bundled_catalog(campus_catalog):
    assert len(campus_catalog) == 40
    assert campus_catalog[0] == PlaceRecord("Albin O. Kuhn Library & Gallery", "39.2546", "-76.7139")
    assert campus_catalog[-1].display_name == "bwtech@UMBC South"


def test_missing_files_raise(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_path_features(str(tmp_path / "missing.geojson"))
    with pytest.raises(FileNotFoundError):
        load_place_catalog(str(tmp_path / "missing.json"))


def test_invalid_json_raises_value_error(tmp_path):
    path = tmp_path / "broken.geojson"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        load_path_features(str(path))


def test_geojson_without_features_raises(tmp_path):
    path = tmp_path / "point.geojson"
    path.write_text(json.dumps({"type": "Point", "coordinates": [0, 0]}))
    with pytest.raises(ValueError):
        load_feature_collection(str(path))


def test_catalog_entries_need_names(tmp_path):
    path = tmp_path / "places.json"
    path.write_text(json.dumps([{"display_name": "Gym", "lat": "1", "lon": "2"}, {"lat": "3", "lon": "4"}]))
    with pytest.raises(ValueError):
        load_place_catalog(str(path))


def test_catalog_must_be_a_list(tmp_path):
    path = tmp_path / "places.json"
    path.write_text(json.dumps({"display_name": "Gym"}))
    with pytest.raises(ValueError):
        load_place_catalog(str(path))


def test_catalog_coordinates_stay_text(tmp_path):
    path = tmp_path / "places.json"
    path.write_text(json.dumps([{"display_name": "Gym", "lat": 39.25, "lon": "-76.71"}]))
    place = load_place_catalog(str(path))[0]
    assert place.lat == "39.25"
    assert place.coordinates == (39.25, -76.71)


def test_malformed_place_coordinate():
    place = PlaceRecord("The Commons", "39.25515120000", "-76.71133180000,")
    assert place.latitude == pytest.approx(39.2551512)
    with pytest.raises(ValueError, match="The Commons"):
        place.longitude


def test_data_bbox():
    bounds = get_data_bbox(load_feature_collection())
    assert bounds.to_dict() == {"lat_min": 39.2472, "lat_max": 39.2575, "lon_min": -76.7172, "lon_max": -76.71}
    assert get_data_bbox({"features": []}) is None


@pytest.mark.parametrize("bbox", [["a", "b", "c", "d"], 5, [1, 2, 3], [None, 1, 2, 3]])
def test_malformed_bbox_is_ignored(bbox):
    assert get_data_bbox({"bbox": bbox, "features": []}) is None
