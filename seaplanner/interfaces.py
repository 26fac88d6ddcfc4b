"""Type definitions and interfaces for sea route planning."""

from datetime import datetime, timezone
from typing import List, Optional, Protocol, Sequence, Tuple, Union
from dataclasses import dataclass, field

from .exceptions import InvalidRouteOptionsError
from .route_types import RiskLevel, ShipType

Coordinate = Tuple[float, float]  # (lon, lat) in degrees


def as_utc(when: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)


def validate_coordinate(coord: Coordinate, label: str = "coordinate") -> None:
    """Raise InvalidRouteOptionsError unless coord is a valid (lon, lat) pair."""
    lon, lat = coord
    if not (-180 <= lon <= 180):
        raise InvalidRouteOptionsError(f"Invalid route options: {label} longitude {lon} must be between -180 and 180")
    if not (-90 <= lat <= 90):
        raise InvalidRouteOptionsError(f"Invalid route options: {label} latitude {lat} must be between -90 and 90")


@dataclass(frozen=True)
class RouteOptions:
    """Ship parameters and optimization policy for one route computation."""
    ship_speed: float  # knots
    departure_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    consider_weather: bool = False
    fuel_efficient: bool = False
    ship_type: str = ShipType.CONTAINER

    def validate(self) -> None:
        if self.ship_speed is None or not self.ship_speed > 0:
            raise InvalidRouteOptionsError(
                f"Invalid route options: ship speed must be greater than 0 knots, got {self.ship_speed}")
        if self.ship_type not in ShipType.ALL:
            raise InvalidRouteOptionsError(
                f"Invalid route options: unknown ship type '{self.ship_type}'")


@dataclass(frozen=True)
class WeatherForecast:
    """Weather snapshot at one point and time. Fields are None when unknown."""
    description: str
    temperature: Optional[float] = None  # deg C
    wind_speed: Optional[float] = None  # knots
    wind_direction: Optional[float] = None  # degrees
    wave_height: Optional[float] = None  # m
    precipitation: Optional[float] = None  # mm
    visibility: Optional[float] = None  # km
    pressure: Optional[float] = None  # hPa
    humidity: Optional[float] = None  # %
    sea_temp: Optional[float] = None  # deg C
    current_speed: Optional[float] = None  # knots
    current_direction: Optional[float] = None  # degrees


@dataclass(frozen=True)
class WeatherRisk:
    level: str = RiskLevel.LOW
    description: str = "Good conditions"
    recommendations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class NavigationInfo:
    distance_from_start: float  # km, straight from the origin port
    distance_to_next: float  # km
    bearing: float  # degrees
    estimated_speed: float  # knots
    fuel_consumption: float  # tons to the next checkpoint
    time_to_next: str


@dataclass(frozen=True)
class SafetyInfo:
    nearest_port: str
    nearest_port_distance: float  # km
    risk_level: str
    warnings: Tuple[str, ...]
    recommendations: Tuple[str, ...]


@dataclass(frozen=True)
class Checkpoint:
    """A waypoint enriched with schedule, weather, navigation and safety data."""
    position: Coordinate
    scheduled_at: datetime
    estimated_time: str
    distance: float  # km along the path from the origin
    weather_forecast: WeatherForecast
    navigation_info: NavigationInfo
    safety_info: SafetyInfo
    weather_risk: WeatherRisk


@dataclass(frozen=True)
class JourneyDetails:
    estimated_arrival: str
    fuel_cost_estimate: float  # USD
    total_duration_hours: float
    checkpoints: Tuple[Checkpoint, ...]


@dataclass(frozen=True)
class RouteResult:
    """A planned route and its journey metrics."""
    waypoints: Tuple[Coordinate, ...]
    distance: float  # km
    duration: str
    fuel_consumption: float  # tons
    weather_risk: WeatherRisk
    journey_details: JourneyDetails
    start_port: Optional[str] = None
    end_port: Optional[str] = None
    route_type: Optional[str] = None


@dataclass(frozen=True)
class NearestPort:
    name: str
    distance: float  # km
    coordinates: Coordinate


class WeatherService(Protocol):
    """Forecast collaborator consumed by the journey synthesizer."""

    async def get_route_weather_forecast(
        self,
        points: Sequence[Coordinate],
        when: datetime
    ) -> Union[List[WeatherForecast], WeatherForecast]:
        ...
