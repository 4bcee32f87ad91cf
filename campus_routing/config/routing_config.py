"""
Configuration management for campus routing parameters.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class RoutingConfig:
    """Configuration parameters for campus path routing."""

    # Graph Construction
    coordinate_precision: int = 6  # decimal places in node keys (~0.11 m)
    barrier_tags: Tuple[str, ...] = ('power', 'fence_type', 'barrier')  # tags that exclude a line

    # Place Search
    suggestion_limit: int = 5  # max suggestions returned per query

    # Route Statistics
    walking_speed_mps: float = 5000 / 3600  # 5 km/h walking pace

    # Display
    bounds_padding: float = 0.05  # padding ratio applied to network bounds for map fitting

    # Data Sources (None = bundled campus data)
    paths_data_path: Optional[str] = None
    places_data_path: Optional[str] = None

    def validate(self) -> None:
        """Validate configuration parameters."""
        if not 0 <= self.coordinate_precision <= 12:
            raise ValueError("coordinate_precision must be between 0 and 12")
        if self.suggestion_limit <= 0:
            raise ValueError("suggestion_limit must be positive")
        if self.walking_speed_mps <= 0:
            raise ValueError("walking_speed_mps must be positive")
        if self.bounds_padding < 0:
            raise ValueError("bounds_padding must be >= 0")

    @classmethod
    def create_default_config(cls) -> 'RoutingConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def create_search_box_config(cls) -> 'RoutingConfig':
        """Create configuration for the search-as-you-type suggestion box."""
        return cls(suggestion_limit=6)

    @classmethod
    def create_strict_config(cls) -> 'RoutingConfig':
        """
        Create configuration for datasets that keep retired paths.

        Lines tagged disused or abandoned are dropped along with barriers.
        """
        return cls(
            barrier_tags=('power', 'fence_type', 'barrier', 'disused', 'abandoned')
        )
