"""Configuration constants for sea route planning."""

import os

# Land model data source (GeoJSON); empty means use the built-in coastlines
DEFAULT_LAND_DATA = os.getenv('SEAPLANNER_LAND_DATA', '')

# Water classification
DEFAULT_SAFETY_MARGIN = 0.5  # degrees from any coastline edge
LANE_TOLERANCE = 1.5  # degrees from a shipping lane segment
SHORE_EXCLUSION = 0.2  # degrees from any coastline vertex, applies inside lanes

# Safe water point search
SEARCH_RADIUS_START = 0.5  # degrees
SEARCH_RADIUS_STEP = 0.5
SEARCH_RADIUS_MAX = 2.0
FALLBACK_OFFSET = (1.5, -1.0)  # (dlon, dlat) used when the search finds nothing

# Path construction
CURVE_THRESHOLD = 5.0  # degrees; shorter legs are joined directly
CURVE_MAX_ATTEMPTS = 12
CURVE_ANGLE_STEP = 30.0  # degrees added per attempt pair
CURVE_CONTROL_MAX = 4.0  # degrees
CURVE_SAMPLE_SPACING = 3.0  # degrees between curve samples
SEGMENT_STEP = 1.0  # degrees between samples of the segmented strategy
PATH_CHECK_STEPS = 10

# Journey metrics
KNOTS_TO_KMH = 1.852
CHECKPOINT_FUEL_RATE = 0.3  # tons per km
FUEL_RATES = {  # tons per km by ship type
    'container': 0.3,
    'bulk': 0.25,
    'tanker': 0.28,
    'cruise': 0.35,
    'ferry': 0.2,
}
FUEL_EFFICIENT_FACTOR = 0.85
WEATHER_FUEL_MULTIPLIERS = {'low': 1.0, 'medium': 1.15, 'high': 1.3}
FUEL_PRICE_PER_TON = 500  # USD
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M UTC'

# Weather collaborator
FORECAST_URL = os.getenv('SEAPLANNER_FORECAST_URL', 'https://api.open-meteo.com/v1/forecast')
MARINE_URL = os.getenv('SEAPLANNER_MARINE_URL', 'https://marine-api.open-meteo.com/v1/marine')
WEATHER_TIMEOUT = float(os.getenv('SEAPLANNER_WEATHER_TIMEOUT', '10'))
WEATHER_UNAVAILABLE = 'Live weather data unavailable'
