"""Geographic utility functions for sea route planning.

Positions are (lon, lat) pairs in degrees treated as a plane, except for
calculate_distance which is the single metric used for every distance
that ends up in a route total.
"""

import math
from typing import List, Sequence, Tuple
from geopy.distance import geodesic

Coordinate = Tuple[float, float]


def point_to_segment_distance(point: Coordinate, seg_start: Coordinate, seg_end: Coordinate) -> float:
    """Distance from a point to a segment, in degree units.

    The projection is clamped to the segment ends and no latitude
    correction is applied.
    """
    px, py = point
    x1, y1 = seg_start
    x2, y2 = seg_end
    dx = x2 - x1
    dy = y2 - y1
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(px - x1, py - y1)
    t = max(0.0, min(1.0, ((px - x1) * dx + (py - y1) * dy) / length_sq))
    return math.hypot(px - (x1 + t * dx), py - (y1 + t * dy))


def point_in_polygon(point: Coordinate, ring: Sequence[Coordinate]) -> bool:
    """Even-odd ray casting test of a point against a closed ring."""
    x, y = point
    inside = False
    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if (yi > y) != (yj > y):
            cross_x = (xj - xi) * (y - yi) / (yj - yi) + xi
            if x < cross_x:
                inside = not inside
        j = i
    return inside


def calculate_bearing(start_coord: Coordinate, end_coord: Coordinate) -> float:
    """Calculate the bearing between two coordinates on the lon/lat plane.

    This is a planar approximation of the initial bearing: the longitude
    difference is not scaled by cos(lat), so east-west legs at high
    latitude read steeper than their true course.

    Args:
        start_coord: Starting coordinate (lon, lat)
        end_coord: Ending coordinate (lon, lat)

    Returns:
        Bearing in degrees (0-360), 0 meaning north
    """
    d_lon = end_coord[0] - start_coord[0]
    d_lat = end_coord[1] - start_coord[1]
    if d_lon == 0 and d_lat == 0:
        return 0.0
    bearing = math.degrees(math.atan2(d_lon, d_lat))
    return (bearing + 360) % 360


def calculate_distance(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """Geodesic distance between two points in kilometers."""
    return geodesic((lat1, lon1), (lat2, lon2)).km


def segment_distances(points: Sequence[Coordinate]) -> List[float]:
    """Lengths in kilometers of the legs between consecutive points."""
    return [
        calculate_distance(a[0], a[1], b[0], b[1])
        for a, b in zip(points, points[1:])
    ]


def path_distance(points: Sequence[Coordinate]) -> float:
    """Sum of consecutive segment lengths in kilometers."""
    return sum(segment_distances(points))


def interpolate(start: Coordinate, end: Coordinate, t: float) -> Coordinate:
    return (start[0] + (end[0] - start[0]) * t,
            start[1] + (end[1] - start[1]) * t)


def quadratic_bezier(start: Coordinate, control: Coordinate, end: Coordinate, t: float) -> Coordinate:
    """Point at parameter t on the quadratic Bezier curve start-control-end."""
    u = 1 - t
    x = u * u * start[0] + 2 * u * t * control[0] + t * t * end[0]
    y = u * u * start[1] + 2 * u * t * control[1] + t * t * end[1]
    return x, y


def format_duration(hours: float) -> str:
    """Format a duration as 'Xd Yh', or 'Yh' below one day."""
    days = math.floor(hours / 24)
    remaining_hours = math.floor(hours % 24)
    return f"{days}d {remaining_hours}h" if days > 0 else f"{remaining_hours}h"
