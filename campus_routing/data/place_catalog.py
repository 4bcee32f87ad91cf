"""
Named campus places available for search.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PlaceRecord:
    """A catalog entry: display name plus coordinates kept as decimal text."""

    display_name: str
    lat: str
    lon: str

    @property
    def latitude(self) -> float:
        return _parse_coordinate(self.lat, 'lat', self.display_name)

    @property
    def longitude(self) -> float:
        return _parse_coordinate(self.lon, 'lon', self.display_name)

    @property
    def coordinates(self) -> Tuple[float, float]:
        """(lat, lon) as floats."""
        return self.latitude, self.longitude

    def to_dict(self) -> dict:
        return {'display_name': self.display_name, 'lat': self.lat, 'lon': self.lon}


def _parse_coordinate(text: str, field_name: str, display_name: str) -> float:
    try:
        return float(text)
    except (TypeError, ValueError):
        raise ValueError(
            f"Invalid {field_name} {text!r} for place '{display_name}'"
        ) from None
