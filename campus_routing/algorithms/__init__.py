"""
Routing algorithms and place matching.

This module contains:
- Shortest path routing (Dijkstra)
- Fuzzy place name matching
- Navigation orchestration
"""

from .routing.dijkstra import DijkstraRouter, PathResult, shortest_path
from .matching.fuzzy_matcher import FuzzyPlaceMatcher, suggest_places
from .optimization.campus_navigator import CampusNavigator, NavigationResult, RouteStatus

__all__ = [
    'DijkstraRouter',
    'PathResult',
    'shortest_path',
    'FuzzyPlaceMatcher',
    'suggest_places',
    'CampusNavigator',
    'NavigationResult',
    'RouteStatus'
]
