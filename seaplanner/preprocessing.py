"""Input preprocessing for route requests."""

import re
import logging
from .exceptions import InvalidRouteOptionsError
from .interfaces import Coordinate, validate_coordinate

logger = logging.getLogger(__name__)

DMS_PATTERN = re.compile(r'(\d+)°(\d+)\'(\d+)"([NS])\s*(\d+)°(\d+)\'(\d+)"([EW])')
CARDINAL_PATTERN = re.compile(r'(\d+\.?\d*)°?\s*([NS])\s*(\d+\.?\d*)°?\s*([EW])')


def parse_coordinate(coord_input: str) -> Coordinate:
    """Parse a coordinate into a (lon, lat) pair of decimal degrees.

    Supports formats:
    - Decimal degrees: lon,lat or [lon, lat]
    - DMS: 25°16'12"N 55°16'12"E
    - Decimal degrees with cardinal directions: 25.27° N 55.27° E
    """
    text = coord_input.strip().strip('[]()')

    if ',' in text:
        try:
            lon, lat = map(float, text.split(','))
        except ValueError as e:
            raise InvalidRouteOptionsError(f"Invalid coordinate '{coord_input}': {e}") from e
    elif DMS_PATTERN.match(text):
        lat_d, lat_m, lat_s, lat_dir, lon_d, lon_m, lon_s, lon_dir = DMS_PATTERN.match(text).groups()
        lat = (int(lat_d) + int(lat_m) / 60 + int(lat_s) / 3600) * (1 if lat_dir == 'N' else -1)
        lon = (int(lon_d) + int(lon_m) / 60 + int(lon_s) / 3600) * (1 if lon_dir == 'E' else -1)
    elif CARDINAL_PATTERN.match(text):
        lat_v, lat_dir, lon_v, lon_dir = CARDINAL_PATTERN.match(text).groups()
        lat = float(lat_v) * (-1 if lat_dir == 'S' else 1)
        lon = float(lon_v) * (-1 if lon_dir == 'W' else 1)
    else:
        raise InvalidRouteOptionsError(f"Invalid coordinate format: '{coord_input}'")

    validate_coordinate((lon, lat))
    logger.debug(f"Parsed '{coord_input}' as ({lon}, {lat})")
    return lon, lat


def convert_speed(speed: float, from_unit: str) -> float:
    """Convert a speed to knots.

    Supported units: knots, km/h, mph
    """
    if from_unit == 'km/h':
        return speed * 0.539957
    if from_unit == 'mph':
        return speed * 0.868976
    if from_unit == 'knots':
        return speed
    raise InvalidRouteOptionsError(f"Unknown speed unit: {from_unit}")
