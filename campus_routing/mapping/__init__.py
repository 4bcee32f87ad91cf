"""
Mapping functionality for campus routing.

This module contains:
- Path graph construction from line geometry
- Nearest-node snapping
"""

from .network.graph_builder import PathGraph, PathGraphBuilder, InvalidGeometryError, build_graph
from .network.nearest_node import NearestNode, find_nearest_node, find_nearest_nodes

__all__ = [
    'PathGraph',
    'PathGraphBuilder',
    'InvalidGeometryError',
    'build_graph',
    'NearestNode',
    'find_nearest_node',
    'find_nearest_nodes'
]
