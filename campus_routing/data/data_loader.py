"""
Campus data loaders for path geometry and the searchable place catalog.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from .distance_utils import NetworkBounds
from .place_catalog import PlaceRecord

logger = logging.getLogger(__name__)

_DATA_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_PATHS_FILE = os.path.join(_DATA_DIR, 'campus_paths.geojson')
DEFAULT_PLACES_FILE = os.path.join(_DATA_DIR, 'campus_places.json')


def _read_json(data_path: str, label: str) -> Any:
    if not os.path.exists(data_path):
        raise FileNotFoundError(f"{label} file not found: {data_path}")

    try:
        with open(data_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON format in {label} file: {e}")


def load_feature_collection(data_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a GeoJSON FeatureCollection of campus paths.

    Args:
        data_path: Path to the GeoJSON file (bundled campus paths if None)

    Returns:
        The parsed FeatureCollection mapping

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a GeoJSON FeatureCollection
    """
    if data_path is None:
        data_path = DEFAULT_PATHS_FILE

    logger.info(f"Loading path data from: {data_path}")
    collection = _read_json(data_path, "Path data")

    if not isinstance(collection, dict) or 'features' not in collection:
        raise ValueError("Path data must be in GeoJSON format with 'features' key")
    if not isinstance(collection['features'], list):
        raise ValueError("GeoJSON 'features' must be a list")

    return collection


def load_path_features(data_path: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Load the feature list of a campus path GeoJSON file.

    Args:
        data_path: Path to the GeoJSON file (bundled campus paths if None)

    Returns:
        List of GeoJSON feature mappings, unfiltered
    """
    features = load_feature_collection(data_path)['features']
    logger.info(f"Loaded {len(features)} features")
    return features


def get_data_bbox(collection: Dict[str, Any]) -> Optional[NetworkBounds]:
    """
    Read the optional GeoJSON 'bbox' member ([min_lon, min_lat, max_lon, max_lat]).

    Returns:
        NetworkBounds, or None when the collection carries no usable bbox
    """
    bbox = collection.get('bbox')
    if not bbox:
        return None

    try:
        min_lon, min_lat, max_lon, max_lat = (float(v) for v in bbox[:4])
    except (TypeError, ValueError) as e:
        logger.warning(f"Ignoring malformed bbox {bbox!r}: {e}")
        return None

    return NetworkBounds(lat_min=min_lat, lat_max=max_lat, lon_min=min_lon, lon_max=max_lon)


def load_place_catalog(data_path: Optional[str] = None) -> List[PlaceRecord]:
    """
    Load the catalog of named campus places.

    Args:
        data_path: Path to a JSON list of {display_name, lat, lon} objects
                   (bundled campus buildings if None)

    Returns:
        PlaceRecords in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a list of named places
    """
    if data_path is None:
        data_path = DEFAULT_PLACES_FILE

    entries = _read_json(data_path, "Place catalog")
    if not isinstance(entries, list):
        raise ValueError("Place catalog must be a JSON list")

    catalog = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or not entry.get('display_name'):
            raise ValueError(f"Place catalog entry {index} has no display_name")
        catalog.append(PlaceRecord(
            display_name=str(entry['display_name']),
            lat=str(entry.get('lat', '')),
            lon=str(entry.get('lon', ''))
        ))

    logger.info(f"Loaded {len(catalog)} places from {data_path}")
    return catalog
