"""Navigable water classification and safe water point search."""

import logging
import math
from typing import Optional
from .config import (
    LANE_TOLERANCE, SHORE_EXCLUSION, SEARCH_RADIUS_START, SEARCH_RADIUS_STEP,
    SEARCH_RADIUS_MAX, FALLBACK_OFFSET, PATH_CHECK_STEPS
)
from .data_loader import LandModel
from .geo_utils import interpolate
from .interfaces import Coordinate

logger = logging.getLogger(__name__)

_DIAG = math.sqrt(0.5)

# Unit search vectors (dlon, dlat): N, NE, E, SE, S, SW, W, NW
SEARCH_DIRECTIONS = (
    (0.0, 1.0), (_DIAG, _DIAG), (1.0, 0.0), (_DIAG, -_DIAG),
    (0.0, -1.0), (-_DIAG, -_DIAG), (-1.0, 0.0), (-_DIAG, _DIAG),
)


class WaterClassifier:
    """Class to decide whether coordinates are navigable water."""

    def __init__(self, land_model: LandModel):
        """Initialize the classifier with a land model."""
        self.land_model = land_model

    def is_water(self, lon: float, lat: float) -> bool:
        """Check whether a point is navigable water.

        Inside a lane-priority region a point close to a shipping lane and
        clear of every coastline vertex only has to lie outside every
        landmass; the regular margins are waived. Otherwise the point must
        keep its landmass's margin from every coastline edge and lie
        outside every landmass.
        """
        model = self.land_model
        candidates = model.candidates(lon, lat)
        if model.in_lane_region(lon, lat) and model.near_lane(lon, lat, LANE_TOLERANCE):
            if not model.near_shore(lon, lat, SHORE_EXCLUSION):
                return not any(landmass.contains(lon, lat) for landmass in candidates)

        for landmass in candidates:
            if landmass.edge_distance(lon, lat) < landmass.margin:
                return False
            if landmass.contains(lon, lat):
                return False
        return True

    def search_water_point(self, lon: float, lat: float) -> Optional[Coordinate]:
        """Search outward from a point for the nearest water point.

        Returns:
            The first water point found, or None when nothing within the
            search radius is water
        """
        if self.is_water(lon, lat):
            return lon, lat

        radius = SEARCH_RADIUS_START
        while radius <= SEARCH_RADIUS_MAX + 1e-9:
            for dx, dy in SEARCH_DIRECTIONS:
                test_lon = lon + dx * radius
                test_lat = lat + dy * radius
                if self.is_water(test_lon, test_lat):
                    logger.debug(f"\tWater found at ({test_lon:.3f}, {test_lat:.3f}), radius {radius}")
                    return test_lon, test_lat
            radius += SEARCH_RADIUS_STEP
        return None

    def find_safe_water_point(self, lon: float, lat: float) -> Coordinate:
        """Find a water point near the given coordinate.

        Water points are returned unchanged. When the search finds nothing
        the fixed fallback offset is applied and the result may still be
        on land; callers must tolerate that.
        """
        found = self.search_water_point(lon, lat)
        if found is not None:
            return found
        fallback = (lon + FALLBACK_OFFSET[0], lat + FALLBACK_OFFSET[1])
        logger.warning(f"No water within {SEARCH_RADIUS_MAX} degrees of ({lon}, {lat}), "
                       f"using fallback ({fallback[0]}, {fallback[1]})")
        return fallback

    def is_path_safe(self, start: Coordinate, end: Coordinate, steps: int = PATH_CHECK_STEPS) -> bool:
        """Check evenly spaced samples of the straight path, ends included."""
        for i in range(steps + 1):
            lon, lat = interpolate(start, end, i / steps)
            if not self.is_water(lon, lat):
                return False
        return True
