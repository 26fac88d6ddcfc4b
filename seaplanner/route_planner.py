"""Route planning entry points: single routes and labeled alternatives."""

import asyncio
import dataclasses
import logging
from typing import List, Optional
from .data_loader import LandModel, default_land_model
from .exceptions import InvalidRouteOptionsError
from .interfaces import Coordinate, RouteOptions, RouteResult, WeatherService
from .journey import JourneySynthesizer
from .port_finder import PortFinder
from .route_builder import SeaRouteBuilder
from .route_types import BuildStrategy, RouteVariant
from .water_classifier import WaterClassifier
from .weather_service import OpenMeteoWeatherService

logger = logging.getLogger(__name__)


class RoutePlanner:
    """Class to plan sea routes and their journey reports."""

    def __init__(self, builder: SeaRouteBuilder, synthesizer: JourneySynthesizer):
        self.builder = builder
        self.synthesizer = synthesizer

    async def plan_route(
        self,
        start: Coordinate,
        end: Coordinate,
        options: RouteOptions,
        start_port: Optional[str] = None,
        end_port: Optional[str] = None
    ) -> RouteResult:
        """Build a sea route between two ports and synthesize its journey."""
        options.validate()
        waypoints = await asyncio.to_thread(self.builder.build_sea_route, start, end)
        return await self.synthesizer.synthesize(waypoints, options, start_port, end_port)

    async def compute_alternatives(
        self,
        start: Coordinate,
        end: Coordinate,
        options: RouteOptions,
        start_port: Optional[str] = None,
        end_port: Optional[str] = None
    ) -> List[RouteResult]:
        """Plan the standard, weather-optimized and fuel-efficient variants.

        The variants run concurrently and come back in that order. Every
        variant runs to completion; if any of them fails, only the standard
        variant is computed again and returned.
        """
        options.validate()
        variants = [
            (RouteVariant.STANDARD, dataclasses.replace(options, consider_weather=False, fuel_efficient=False)),
            (RouteVariant.WEATHER_OPTIMIZED, dataclasses.replace(options, consider_weather=True, fuel_efficient=False)),
            (RouteVariant.FUEL_EFFICIENT, dataclasses.replace(options, consider_weather=False, fuel_efficient=True)),
        ]

        results = await asyncio.gather(*(
            self.plan_route(start, end, variant_options, start_port, end_port)
            for _, variant_options in variants
        ), return_exceptions=True)

        failures = [r for r in results if isinstance(r, Exception)]
        for failure in failures:
            if isinstance(failure, InvalidRouteOptionsError):
                raise failure
        if failures:
            logger.error(f"Error calculating route alternatives: {failures[0]}")
            label, standard_options = variants[0]
            standard = await self.plan_route(start, end, standard_options, start_port, end_port)
            return [dataclasses.replace(standard, route_type=label)]

        alternatives = [
            dataclasses.replace(result, route_type=label)
            for (label, _), result in zip(variants, results)
        ]
        logger.info(f"Computed {len(alternatives)} route alternatives from {start} to {end}")
        return alternatives


def create_planner(
    weather_service: Optional[WeatherService] = None,
    land_model: Optional[LandModel] = None,
    port_finder: Optional[PortFinder] = None,
    strategy: str = BuildStrategy.CURVED
) -> RoutePlanner:
    """Wire a RoutePlanner, defaulting to the built-in land model and Open-Meteo."""
    classifier = WaterClassifier(land_model or default_land_model())
    builder = SeaRouteBuilder(classifier, strategy)
    synthesizer = JourneySynthesizer(weather_service or OpenMeteoWeatherService(), port_finder)
    return RoutePlanner(builder, synthesizer)
