import argparse
import asyncio
import logging
from datetime import datetime, timezone

from dotenv import load_dotenv

load_dotenv()

from seaplanner import (  # noqa: E402
    BuildStrategy, CalmWeatherService, InvalidRouteOptionsError, RouteOptions, ShipType, create_planner
)
from seaplanner.preprocessing import convert_speed, parse_coordinate  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args():
    parser = argparse.ArgumentParser(description="Plan a sea route between two ports.")
    parser.add_argument('--start', required=True, help='Origin as "lon,lat" or DMS')
    parser.add_argument('--end', required=True, help='Destination as "lon,lat" or DMS')
    parser.add_argument('--start-port', default=None)
    parser.add_argument('--end-port', default=None)
    parser.add_argument('--speed', type=float, default=15.0)
    parser.add_argument('--speed-unit', default='knots', choices=['knots', 'km/h', 'mph'])
    parser.add_argument('--ship-type', default=ShipType.CONTAINER, choices=ShipType.ALL)
    parser.add_argument('--departure', default=None, help='ISO timestamp, defaults to now (UTC)')
    parser.add_argument('--strategy', default=BuildStrategy.CURVED,
                        choices=[BuildStrategy.CURVED, BuildStrategy.SEGMENTED])
    parser.add_argument('--alternatives', action='store_true', help='Plan all three route variants')
    parser.add_argument('--fuel-efficient', action='store_true')
    parser.add_argument('--consider-weather', action='store_true')
    parser.add_argument('--offline', action='store_true', help='Use calm weather instead of Open-Meteo')
    parser.add_argument('--log-level', default='INFO')
    return parser.parse_args()


def print_route(route):
    label = route.route_type or 'Route'
    print(f"\n=== {label}: {route.start_port or route.waypoints[0]} -> {route.end_port or route.waypoints[-1]} ===")
    print(f"Distance: {route.distance} km, duration: {route.duration}")
    print(f"Fuel: {route.fuel_consumption} t (~${route.journey_details.fuel_cost_estimate:,})")
    print(f"Weather risk: {route.weather_risk.level} - {route.weather_risk.description}")
    for rec in route.weather_risk.recommendations:
        print(f"  * {rec}")
    print(f"Arrival: {route.journey_details.estimated_arrival}")
    for i, cp in enumerate(route.journey_details.checkpoints):
        lon, lat = cp.position
        print(f"  [{i:2d}] ({lon:8.3f}, {lat:7.3f}) {cp.estimated_time} "
              f"{cp.distance:6.0f}km brg {cp.navigation_info.bearing:3.0f} "
              f"{cp.safety_info.risk_level:6s} {cp.weather_forecast.description}")


async def main():
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        start = parse_coordinate(args.start)
        end = parse_coordinate(args.end)
        departure = datetime.fromisoformat(args.departure) if args.departure else datetime.now(timezone.utc)
        options = RouteOptions(
            ship_speed=convert_speed(args.speed, args.speed_unit),
            departure_time=departure,
            consider_weather=args.consider_weather,
            fuel_efficient=args.fuel_efficient,
            ship_type=args.ship_type,
        )
    except (InvalidRouteOptionsError, ValueError) as e:
        logger.error(f"Invalid input: {e}")
        raise SystemExit(2)

    planner = create_planner(
        weather_service=CalmWeatherService() if args.offline else None,
        strategy=args.strategy,
    )

    if args.alternatives:
        routes = await planner.compute_alternatives(start, end, options, args.start_port, args.end_port)
    else:
        routes = [await planner.plan_route(start, end, options, args.start_port, args.end_port)]

    for route in routes:
        print_route(route)


if __name__ == "__main__":
    asyncio.run(main())
