"""Sea-only path construction between two ports."""

import logging
import math
from typing import List
from .config import (
    CURVE_THRESHOLD, CURVE_MAX_ATTEMPTS, CURVE_ANGLE_STEP, CURVE_CONTROL_MAX,
    CURVE_SAMPLE_SPACING, SEGMENT_STEP
)
from .exceptions import InvalidRouteOptionsError
from .geo_utils import interpolate, quadratic_bezier
from .interfaces import Coordinate, validate_coordinate
from .route_types import BuildStrategy
from .water_classifier import WaterClassifier

logger = logging.getLogger(__name__)


class SeaRouteBuilder:
    """Class to build waypoint sequences that stay in navigable water."""

    def __init__(self, classifier: WaterClassifier, strategy: str = BuildStrategy.CURVED):
        """Initialize the builder with a water classifier and a strategy."""
        if strategy not in (BuildStrategy.CURVED, BuildStrategy.SEGMENTED):
            raise ValueError(f"Unknown build strategy: {strategy}")
        self.classifier = classifier
        self.strategy = strategy

    def build_sea_route(self, start: Coordinate, end: Coordinate) -> List[Coordinate]:
        """Build a sea route between two port coordinates.

        Args:
            start: Origin port (lon, lat)
            end: Destination port (lon, lat)

        Returns:
            Waypoints starting exactly at start and ending exactly at end
        """
        start = (float(start[0]), float(start[1]))
        end = (float(end[0]), float(end[1]))
        validate_coordinate(start, "start")
        validate_coordinate(end, "end")
        if start == end:
            raise InvalidRouteOptionsError("Invalid route options: start and end coordinates are identical")

        logger.debug("-" * 40)
        logger.debug(f"Building {self.strategy} route from {start} to {end}")

        safe_start = self.classifier.find_safe_water_point(*start)
        safe_end = self.classifier.find_safe_water_point(*end)

        legs = [safe_start]
        for corridor, reverse in self.classifier.land_model.corridors_for(start, end):
            via = list(reversed(corridor.via)) if reverse else list(corridor.via)
            logger.debug(f"\tRouting through corridor {corridor.name}: {via}")
            legs.extend(via)
        legs.append(safe_end)

        route = [start, safe_start]
        for leg_start, leg_end in zip(legs, legs[1:]):
            route.extend(self._build_leg(leg_start, leg_end))
        route.append(end)

        waypoints = self._drop_repeats(route)
        logger.info(f"Built route with {len(waypoints)} waypoints from {start} to {end}")
        return waypoints

    def _build_leg(self, start: Coordinate, end: Coordinate) -> List[Coordinate]:
        """Points after start up to and including end."""
        if self.strategy == BuildStrategy.SEGMENTED:
            return self._segmented_leg(start, end)
        return self._curved_leg(start, end)

    def _curved_leg(self, start: Coordinate, end: Coordinate) -> List[Coordinate]:
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        length = math.hypot(dx, dy)
        if length <= CURVE_THRESHOLD:
            return [end]

        steps = math.ceil(length / CURVE_SAMPLE_SPACING)
        control_dist = min(length / 4, CURVE_CONTROL_MAX)
        heading = math.atan2(dy, dx)

        for attempt in range(CURVE_MAX_ATTEMPTS):
            # +30, -30, +60, -60, ... degrees off the direct heading
            sign = 1 if attempt % 2 == 0 else -1
            offset = math.radians(CURVE_ANGLE_STEP) * sign * (attempt // 2 + 1)
            control = (start[0] + control_dist * math.cos(heading + offset),
                       start[1] + control_dist * math.sin(heading + offset))

            samples = [quadratic_bezier(start, control, end, step / steps) for step in range(1, steps + 1)]
            samples[-1] = end
            if all(self.classifier.is_water(x, y) for x, y in samples[:-1]):
                logger.debug(f"\tCurve accepted on attempt {attempt + 1}")
                return samples

        logger.debug(f"\tNo curve found in {CURVE_MAX_ATTEMPTS} attempts, repairing straight leg")
        return self._segmented_leg(start, end, steps)

    def _segmented_leg(self, start: Coordinate, end: Coordinate, steps: int = None) -> List[Coordinate]:
        if steps is None:
            length = math.hypot(end[0] - start[0], end[1] - start[1])
            steps = max(1, math.ceil(length / SEGMENT_STEP))

        points = []
        for step in range(1, steps):
            lon, lat = interpolate(start, end, step / steps)
            repaired = self.classifier.search_water_point(lon, lat)
            if repaired is None:
                # keep the unsafe point so the route still progresses
                logger.debug(f"\tNo water near ({lon:.3f}, {lat:.3f}), keeping point")
                repaired = (lon, lat)
            points.append(repaired)
        points.append(end)
        return points

    @staticmethod
    def _drop_repeats(points: List[Coordinate]) -> List[Coordinate]:
        result = [points[0]]
        for point in points[1:]:
            if point != result[-1]:
                result.append(point)
        return result
