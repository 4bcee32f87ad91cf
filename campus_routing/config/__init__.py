"""
Configuration management for campus routing.
"""

from .routing_config import RoutingConfig

__all__ = [
    'RoutingConfig'
]
