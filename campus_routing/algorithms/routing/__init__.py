"""
Core routing algorithms.
"""

from .dijkstra import DijkstraRouter, PathResult, shortest_path

__all__ = [
    'DijkstraRouter',
    'PathResult',
    'shortest_path'
]
