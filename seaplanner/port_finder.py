"""Port lookup functionality for sea route planning."""

import logging
from typing import Iterable, Optional, Tuple
from .geo_utils import calculate_distance
from .interfaces import NearestPort

logger = logging.getLogger(__name__)

# (name, lon, lat)
DEFAULT_PORTS = (
    ('Dubai Port', 54.32, 24.47),
    ('Abu Dhabi Port', 51.58, 24.47),
    ('Fujairah Port', 55.35, 25.05),
    ('Sharjah Port', 54.72, 24.58),
    ('Ajman Port', 55.05, 24.75),
    ('Ras Al Khaimah Port', 55.55, 25.15),
    ('Muscat Port', 58.57, 23.63),
    ('Karachi Port', 66.98, 24.84),
    ('Mumbai Port', 72.85, 18.92),
    ('Colombo Port', 79.85, 6.95),
    ('Chennai Port', 80.30, 13.10),
    ('Singapore Port', 103.82, 1.26),
    ('Hong Kong Port', 114.17, 22.30),
    ('Shanghai Port', 121.50, 31.23),
    ('Busan Port', 129.04, 35.10),
    ('Tokyo Port', 139.77, 35.62),
)


class PortFinder:
    """Class to find the nearest port to geographic coordinates."""

    def __init__(self, ports: Optional[Iterable[Tuple[str, float, float]]] = None):
        """Initialize the finder with a port catalog of (name, lon, lat)."""
        self.ports = tuple(ports) if ports is not None else DEFAULT_PORTS
        if not self.ports:
            raise ValueError("Port catalog must not be empty")

    def find_nearest_port(self, lon: float, lat: float) -> NearestPort:
        """Find the catalog port closest to a point.

        Args:
            lon: Longitude coordinate
            lat: Latitude coordinate

        Returns:
            NearestPort with the distance in kilometers
        """
        nearest = None
        for name, port_lon, port_lat in self.ports:
            distance = calculate_distance(lon, lat, port_lon, port_lat)
            if nearest is None or distance < nearest.distance:
                nearest = NearestPort(name, distance, (port_lon, port_lat))

        logger.debug(f"Nearest port to ({lon}, {lat}) is {nearest.name} at {nearest.distance:.1f}km")
        return nearest
