"""
Data processing and utilities for campus routing.

This module contains:
- Path geometry and place catalog loading
- Distance calculations
- Geographic bounds utilities
"""

from .data_loader import (
    load_feature_collection,
    load_path_features,
    load_place_catalog,
    get_data_bbox
)
from .distance_utils import (
    haversine_distance,
    haversine_distances,
    calculate_route_distance,
    format_distance,
    estimate_walking_time,
    NetworkBounds
)
from .place_catalog import PlaceRecord

__all__ = [
    'load_feature_collection',
    'load_path_features',
    'load_place_catalog',
    'get_data_bbox',
    'haversine_distance',
    'haversine_distances',
    'calculate_route_distance',
    'format_distance',
    'estimate_walking_time',
    'NetworkBounds',
    'PlaceRecord'
]
