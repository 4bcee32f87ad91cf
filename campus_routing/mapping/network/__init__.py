"""
Network building and snapping functionality.
"""

from .graph_builder import PathGraph, PathGraphBuilder, InvalidGeometryError, build_graph
from .nearest_node import NearestNode, find_nearest_node, find_nearest_nodes

__all__ = [
    'PathGraph',
    'PathGraphBuilder',
    'InvalidGeometryError',
    'build_graph',
    'NearestNode',
    'find_nearest_node',
    'find_nearest_nodes'
]
