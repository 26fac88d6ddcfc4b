"""Journey synthesis: route metrics and per-checkpoint enrichment."""

import asyncio
import logging
from dataclasses import fields
from datetime import datetime, timedelta
from typing import List, Mapping, Optional, Sequence
from .config import (
    KNOTS_TO_KMH, CHECKPOINT_FUEL_RATE, FUEL_RATES, FUEL_EFFICIENT_FACTOR,
    WEATHER_FUEL_MULTIPLIERS, FUEL_PRICE_PER_TON, TIMESTAMP_FORMAT, WEATHER_UNAVAILABLE
)
from .exceptions import InvalidRouteOptionsError
from .geo_utils import calculate_bearing, calculate_distance, format_duration, segment_distances
from .interfaces import (
    Checkpoint, Coordinate, JourneyDetails, NavigationInfo, RouteOptions, RouteResult,
    SafetyInfo, WeatherForecast, WeatherRisk, WeatherService, as_utc
)
from .port_finder import PortFinder
from .risk_assessment import assess_risk, max_risk
from .route_types import RiskLevel

logger = logging.getLogger(__name__)

UNAVAILABLE_RISK = WeatherRisk(
    level=RiskLevel.LOW,
    description='Weather data unavailable',
    recommendations=('Check weather service status',)
)

# Values assumed for fields a live forecast leaves out
FORECAST_DEFAULTS = {
    'temperature': 20.0, 'wind_speed': 0, 'wind_direction': 0, 'wave_height': 0.0,
    'precipitation': 0.0, 'visibility': 10, 'pressure': 1013, 'humidity': 70,
    'sea_temp': 20.0, 'current_speed': 0.0, 'current_direction': 0,
}


def format_timestamp(when: datetime) -> str:
    return as_utc(when).strftime(TIMESTAMP_FORMAT)


def normalize_forecast(response) -> WeatherForecast:
    """Turn a collaborator response into a complete WeatherForecast.

    Accepts a forecast, a mapping of forecast fields, or a list of either
    (the first entry is used). Missing values take FORECAST_DEFAULTS.
    """
    if isinstance(response, (list, tuple)):
        if not response:
            raise ValueError("Weather service returned no forecast")
        response = response[0]
    if isinstance(response, WeatherForecast):
        values = {f.name: getattr(response, f.name) for f in fields(WeatherForecast)}
    elif isinstance(response, Mapping):
        values = {f.name: response.get(f.name) for f in fields(WeatherForecast)}
    else:
        raise TypeError(f"Unsupported forecast type: {type(response).__name__}")

    for name, default in FORECAST_DEFAULTS.items():
        if values[name] is None:
            values[name] = default
    values['description'] = values['description'] or 'No data available'
    return WeatherForecast(**values)


class JourneySynthesizer:
    """Class to turn a waypoint path into a RouteResult."""

    def __init__(self, weather_service: WeatherService, port_finder: Optional[PortFinder] = None):
        self.weather_service = weather_service
        self.port_finder = port_finder or PortFinder()

    async def synthesize(
        self,
        waypoints: Sequence[Coordinate],
        options: RouteOptions,
        start_port: Optional[str] = None,
        end_port: Optional[str] = None
    ) -> RouteResult:
        """Compute journey metrics and checkpoints for a path.

        Weather lookups run concurrently, one per waypoint. A failed lookup
        yields a degraded checkpoint instead of failing the journey.

        Args:
            waypoints: Route waypoints (lon, lat), origin first
            options: Ship parameters
            start_port: Optional origin port name
            end_port: Optional destination port name

        Returns:
            The RouteResult for the path
        """
        options.validate()
        waypoints = tuple((float(lon), float(lat)) for lon, lat in waypoints)
        if len(waypoints) < 2:
            raise InvalidRouteOptionsError("Invalid route options: a route needs at least two waypoints")
        if waypoints[0] == waypoints[-1]:
            raise InvalidRouteOptionsError("Invalid route options: start and end coordinates are identical")

        segments = segment_distances(waypoints)
        total_distance = sum(segments)
        speed_kmh = options.ship_speed * KNOTS_TO_KMH
        duration_hours = total_distance / speed_kmh

        cumulative = [0.0]
        for length in segments:
            cumulative.append(cumulative[-1] + length)

        # scheduled times are proportional to distance travelled
        departure = as_utc(options.departure_time)
        schedule = [
            departure + timedelta(hours=duration_hours * (c / total_distance if total_distance else 0))
            for c in cumulative
        ]

        logger.debug(f"Synthesizing journey: {len(waypoints)} waypoints, "
                     f"{total_distance:.1f}km, {duration_hours:.1f}h")

        checkpoints: List[Checkpoint] = await asyncio.gather(*(
            self._checkpoint(i, waypoints, segments, cumulative, schedule, options, speed_kmh)
            for i in range(len(waypoints))
        ))

        weather_risk = max_risk(cp.weather_risk for cp in checkpoints)
        base_rate = FUEL_RATES[options.ship_type]
        if options.fuel_efficient:
            base_rate *= FUEL_EFFICIENT_FACTOR
        fuel_consumption = round(total_distance * base_rate * WEATHER_FUEL_MULTIPLIERS[weather_risk.level])

        result = RouteResult(
            waypoints=waypoints,
            distance=round(total_distance),
            duration=format_duration(duration_hours),
            fuel_consumption=fuel_consumption,
            weather_risk=weather_risk,
            journey_details=JourneyDetails(
                estimated_arrival=checkpoints[-1].estimated_time,
                fuel_cost_estimate=round(fuel_consumption * FUEL_PRICE_PER_TON),
                total_duration_hours=duration_hours,
                checkpoints=tuple(checkpoints),
            ),
            start_port=start_port,
            end_port=end_port,
        )
        logger.info(f"Journey synthesized: {result.distance}km, {result.duration}, "
                    f"{result.fuel_consumption}t fuel, {weather_risk.level} weather risk")
        return result

    async def _checkpoint(
        self,
        i: int,
        waypoints: Sequence[Coordinate],
        segments: Sequence[float],
        cumulative: Sequence[float],
        schedule: Sequence[datetime],
        options: RouteOptions,
        speed_kmh: float
    ) -> Checkpoint:
        point = waypoints[i]
        origin = waypoints[0]
        when = schedule[i]
        distance_from_start = calculate_distance(origin[0], origin[1], point[0], point[1])

        try:
            response = await self.weather_service.get_route_weather_forecast([point], when)
            forecast = normalize_forecast(response)

            is_last = i == len(waypoints) - 1
            distance_to_next = 0.0 if is_last else segments[i]
            bearing = 0.0 if is_last else calculate_bearing(point, waypoints[i + 1])
            time_to_next = '0h' if is_last else format_duration(distance_to_next / speed_kmh)

            nearest = self.port_finder.find_nearest_port(point[0], point[1])
            risk = assess_risk(forecast)
        except Exception as e:
            logger.warning(f"Weather lookup failed at waypoint {i} {point}: {e}")
            return self._unavailable_checkpoint(point, when, cumulative[i], distance_from_start, options)

        warnings = tuple(risk.description.split(', ')) if risk.level != RiskLevel.LOW else ()
        return Checkpoint(
            position=point,
            scheduled_at=when,
            estimated_time=format_timestamp(when),
            distance=round(cumulative[i]),
            weather_forecast=forecast,
            navigation_info=NavigationInfo(
                distance_from_start=round(distance_from_start),
                distance_to_next=round(distance_to_next),
                bearing=round(bearing),
                estimated_speed=options.ship_speed,
                fuel_consumption=round(distance_to_next * CHECKPOINT_FUEL_RATE),
                time_to_next=time_to_next,
            ),
            safety_info=SafetyInfo(
                nearest_port=nearest.name,
                nearest_port_distance=round(nearest.distance),
                risk_level=risk.level,
                warnings=warnings,
                recommendations=risk.recommendations,
            ),
            weather_risk=risk,
        )

    @staticmethod
    def _unavailable_checkpoint(
        point: Coordinate,
        when: datetime,
        distance: float,
        distance_from_start: float,
        options: RouteOptions
    ) -> Checkpoint:
        return Checkpoint(
            position=point,
            scheduled_at=when,
            estimated_time=format_timestamp(when),
            distance=round(distance),
            weather_forecast=WeatherForecast(description=WEATHER_UNAVAILABLE),
            navigation_info=NavigationInfo(
                distance_from_start=round(distance_from_start),
                distance_to_next=0,
                bearing=0,
                estimated_speed=options.ship_speed,
                fuel_consumption=0,
                time_to_next='0h',
            ),
            safety_info=SafetyInfo(
                nearest_port='Unknown',
                nearest_port_distance=0,
                risk_level=UNAVAILABLE_RISK.level,
                warnings=(UNAVAILABLE_RISK.description,),
                recommendations=UNAVAILABLE_RISK.recommendations,
            ),
            weather_risk=UNAVAILABLE_RISK,
        )
