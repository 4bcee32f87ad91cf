"""
Route orchestration.
"""

from .campus_navigator import CampusNavigator, NavigationResult, RouteStatus

__all__ = [
    'CampusNavigator',
    'NavigationResult',
    'RouteStatus'
]
