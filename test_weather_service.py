import unittest
from datetime import datetime, timezone
from unittest.mock import patch, MagicMock
import requests
from seaplanner.exceptions import WeatherServiceError
from seaplanner.weather_service import CalmWeatherService, OpenMeteoWeatherService, describe_weather_code

TIMES = ['2025-01-01T00:00', '2025-01-01T01:00', '2025-01-01T02:00']

FORECAST_PAYLOAD = {
    'hourly': {
        'time': TIMES,
        'temperature_2m': [18.0, 19.34, 20.0],
        'relative_humidity_2m': [60, 65, 70],
        'precipitation': [0.0, 0.1, 0.0],
        'pressure_msl': [1012.0, 1013.4, 1014.0],
        'visibility': [10000.0, 24140.0, 5000.0],
        'wind_speed_10m': [8.0, 12.4, 15.0],
        'wind_direction_10m': [90, 180, 270],
        'weather_code': [0, 3, 61],
    }
}

MARINE_PAYLOAD = {
    'hourly': {
        'time': TIMES,
        'wave_height': [0.5, 1.24, 2.0],
        'sea_surface_temperature': [24.0, 24.51, 25.0],
        'ocean_current_velocity': [1.852, 3.704, 5.556],
        'ocean_current_direction': [10, 20, 30],
    }
}


def make_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status = MagicMock()
    return response


class TestDescribeWeatherCode(unittest.TestCase):
    def test_groups(self):
        self.assertEqual(describe_weather_code(0), 'Clear sky')
        self.assertEqual(describe_weather_code(2), 'Partly cloudy')
        self.assertEqual(describe_weather_code(45), 'Fog')
        self.assertEqual(describe_weather_code(63), 'Rain')
        self.assertEqual(describe_weather_code(95), 'Thunderstorm')
        self.assertEqual(describe_weather_code(None), 'No data available')


class TestOpenMeteoWeatherService(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.service = OpenMeteoWeatherService('http://forecast', 'http://marine', timeout=5)
        self.when = datetime(2025, 1, 1, 1, 20, tzinfo=timezone.utc)

    @patch('seaplanner.weather_service.requests.get')
    async def test_get_route_weather_forecast(self, mock_get):
        mock_get.side_effect = [make_response(FORECAST_PAYLOAD), make_response(MARINE_PAYLOAD)]

        forecasts = await self.service.get_route_weather_forecast([(55.5, 25.5)], self.when)

        self.assertEqual(len(forecasts), 1)
        forecast = forecasts[0]
        self.assertEqual(forecast.description, 'Partly cloudy (Live)')
        self.assertEqual(forecast.temperature, 19.3)
        self.assertEqual(forecast.wind_speed, 12)
        self.assertEqual(forecast.wind_direction, 180)
        self.assertEqual(forecast.visibility, 24)
        self.assertEqual(forecast.wave_height, 1.2)
        self.assertEqual(forecast.sea_temp, 24.5)
        self.assertEqual(forecast.current_speed, 2.0)
        self.assertEqual(forecast.current_direction, 20)

        self.assertEqual(mock_get.call_count, 2)
        first, second = mock_get.call_args_list
        self.assertEqual(first.args[0], 'http://forecast')
        self.assertEqual(first.kwargs['params']['wind_speed_unit'], 'kn')
        self.assertEqual(first.kwargs['params']['start_date'], '2025-01-01')
        self.assertEqual(first.kwargs['timeout'], 5)
        self.assertEqual(second.args[0], 'http://marine')
        self.assertEqual(second.kwargs['params']['latitude'], 25.5)

    @patch('seaplanner.weather_service.requests.get')
    async def test_missing_marine_values(self, mock_get):
        marine = {'hourly': {'time': TIMES, 'wave_height': [None, None, None]}}
        mock_get.side_effect = [make_response(FORECAST_PAYLOAD), make_response(marine)]

        forecast = self.service.get_point_forecast(55.5, 25.5, self.when)
        self.assertIsNone(forecast.wave_height)
        self.assertIsNone(forecast.current_speed)
        self.assertEqual(forecast.wind_speed, 12)

    @patch('seaplanner.weather_service.requests.get')
    async def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("unreachable")
        with self.assertRaises(WeatherServiceError):
            await self.service.get_route_weather_forecast([(55.5, 25.5)], self.when)

    @patch('seaplanner.weather_service.requests.get')
    async def test_http_error(self, mock_get):
        response = MagicMock()
        response.raise_for_status = MagicMock(side_effect=requests.HTTPError("500"))
        mock_get.return_value = response
        with self.assertRaises(WeatherServiceError):
            self.service.get_point_forecast(55.5, 25.5, self.when)

    @patch('seaplanner.weather_service.requests.get')
    async def test_malformed_payload(self, mock_get):
        mock_get.side_effect = [make_response({'error': True}), make_response(MARINE_PAYLOAD)]
        with self.assertRaises(WeatherServiceError):
            self.service.get_point_forecast(55.5, 25.5, self.when)


class TestCalmWeatherService(unittest.IsolatedAsyncioTestCase):
    async def test_same_forecast_everywhere(self):
        service = CalmWeatherService()
        forecasts = await service.get_route_weather_forecast([(0, 0), (1, 1)], datetime.now(timezone.utc))
        self.assertEqual(len(forecasts), 2)
        self.assertEqual(forecasts[0], forecasts[1])
        self.assertEqual(forecasts[0].description, 'Calm (offline)')


if __name__ == "__main__":
    unittest.main()
