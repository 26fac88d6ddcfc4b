"""Sea route planning package."""

from .exceptions import RoutePlanningError, InvalidRouteOptionsError, WeatherServiceError
from .interfaces import (
    RouteOptions, RouteResult, Checkpoint, JourneyDetails, NavigationInfo, SafetyInfo,
    WeatherForecast, WeatherRisk, NearestPort, WeatherService
)
from .route_types import ShipType, RiskLevel, RouteVariant, BuildStrategy
from .data_loader import LandModel, LandModelLoader, default_land_model
from .water_classifier import WaterClassifier
from .route_builder import SeaRouteBuilder
from .risk_assessment import assess_risk
from .port_finder import PortFinder
from .weather_service import OpenMeteoWeatherService, CalmWeatherService
from .journey import JourneySynthesizer
from .route_planner import RoutePlanner, create_planner
from .geo_utils import calculate_bearing, calculate_distance, path_distance

__all__ = [
    'RoutePlanningError', 'InvalidRouteOptionsError', 'WeatherServiceError',
    'RouteOptions', 'RouteResult', 'Checkpoint', 'JourneyDetails', 'NavigationInfo',
    'SafetyInfo', 'WeatherForecast', 'WeatherRisk', 'NearestPort', 'WeatherService',
    'ShipType', 'RiskLevel', 'RouteVariant', 'BuildStrategy',
    'LandModel', 'LandModelLoader', 'default_land_model', 'WaterClassifier',
    'SeaRouteBuilder', 'assess_risk', 'PortFinder', 'OpenMeteoWeatherService',
    'CalmWeatherService', 'JourneySynthesizer', 'RoutePlanner', 'create_planner',
    'calculate_bearing', 'calculate_distance', 'path_distance'
]
