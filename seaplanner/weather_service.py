"""Weather forecast collaborators for journey synthesis."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence
import requests
from .config import FORECAST_URL, MARINE_URL, WEATHER_TIMEOUT, KNOTS_TO_KMH
from .exceptions import WeatherServiceError
from .interfaces import Coordinate, WeatherForecast, as_utc

logger = logging.getLogger(__name__)

FORECAST_FIELDS = ('temperature_2m', 'relative_humidity_2m', 'precipitation', 'pressure_msl',
                   'visibility', 'wind_speed_10m', 'wind_direction_10m', 'weather_code')
MARINE_FIELDS = ('wave_height', 'sea_surface_temperature',
                 'ocean_current_velocity', 'ocean_current_direction')

# WMO weather interpretation codes, grouped
WEATHER_CODES = (
    (0, 'Clear sky'),
    (3, 'Partly cloudy'),
    (48, 'Fog'),
    (57, 'Drizzle'),
    (67, 'Rain'),
    (77, 'Snow'),
    (82, 'Rain showers'),
    (86, 'Snow showers'),
    (99, 'Thunderstorm'),
)


def describe_weather_code(code: Optional[float]) -> str:
    if code is None:
        return 'No data available'
    for upper, description in WEATHER_CODES:
        if code <= upper:
            return description
    return 'Unknown conditions'


def _round(value: Optional[float], digits: int = 0) -> Optional[float]:
    return None if value is None else round(value, digits)


class OpenMeteoWeatherService:
    """Forecast collaborator backed by the Open-Meteo forecast and marine APIs."""

    def __init__(self, forecast_url: str = FORECAST_URL, marine_url: str = MARINE_URL,
                 timeout: float = WEATHER_TIMEOUT):
        self.forecast_url = forecast_url
        self.marine_url = marine_url
        self.timeout = timeout

    async def get_route_weather_forecast(self, points: Sequence[Coordinate], when: datetime) -> List[WeatherForecast]:
        """Fetch one forecast per point for the hour nearest to when.

        The HTTP calls run in a worker thread so concurrent lookups do not
        block each other.
        """
        forecasts = []
        for lon, lat in points:
            forecasts.append(await asyncio.to_thread(self.get_point_forecast, lon, lat, when))
        return forecasts

    def get_point_forecast(self, lon: float, lat: float, when: datetime) -> WeatherForecast:
        logger.debug(f"Requesting forecast for ({lon}, {lat}) at {when.isoformat()}")
        day = as_utc(when).strftime('%Y-%m-%d')
        common = {
            'latitude': round(lat, 4),
            'longitude': round(lon, 4),
            'start_date': day,
            'end_date': day,
            'timezone': 'UTC',
        }
        try:
            weather = self._fetch(self.forecast_url, dict(common, hourly=','.join(FORECAST_FIELDS), wind_speed_unit='kn'))
            marine = self._fetch(self.marine_url, dict(common, hourly=','.join(MARINE_FIELDS)))
            w = self._sample(weather['hourly'], when)
            m = self._sample(marine['hourly'], when)
        except (requests.RequestException, ValueError, KeyError, IndexError) as e:
            raise WeatherServiceError(f"Forecast unavailable for ({lon}, {lat}): {e}") from e

        visibility = w.get('visibility')
        current = m.get('ocean_current_velocity')
        return WeatherForecast(
            description=f"{describe_weather_code(w.get('weather_code'))} (Live)",
            temperature=_round(w.get('temperature_2m'), 1),
            wind_speed=_round(w.get('wind_speed_10m')),
            wind_direction=_round(w.get('wind_direction_10m')),
            wave_height=_round(m.get('wave_height'), 1),
            precipitation=_round(w.get('precipitation'), 2),
            visibility=_round(visibility / 1000 if visibility is not None else None),
            pressure=_round(w.get('pressure_msl')),
            humidity=_round(w.get('relative_humidity_2m')),
            sea_temp=_round(m.get('sea_surface_temperature'), 1),
            current_speed=_round(current / KNOTS_TO_KMH if current is not None else None, 1),
            current_direction=_round(m.get('ocean_current_direction')),
        )

    def _fetch(self, url: str, params: Dict) -> Dict:
        response = requests.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def _sample(self, hourly: Dict, when: datetime) -> Dict:
        """Values of the hourly series at the time nearest to when."""
        times = [datetime.fromisoformat(t).replace(tzinfo=timezone.utc) for t in hourly['time']]
        if not times:
            raise ValueError("Empty hourly series")
        target = as_utc(when)
        i = min(range(len(times)), key=lambda k: abs((times[k] - target).total_seconds()))
        return {key: values[i] for key, values in hourly.items() if key != 'time'}


class CalmWeatherService:
    """Offline collaborator that reports the same forecast everywhere."""

    def __init__(self, forecast: WeatherForecast = None):
        self.forecast = forecast or WeatherForecast(
            description='Calm (offline)', temperature=20.0, wind_speed=8, wind_direction=0,
            wave_height=0.5, precipitation=0.0, visibility=10, pressure=1013, humidity=70,
            sea_temp=20.0, current_speed=0.5, current_direction=0,
        )

    async def get_route_weather_forecast(self, points: Sequence[Coordinate], when: datetime) -> List[WeatherForecast]:
        return [self.forecast for _ in points]
