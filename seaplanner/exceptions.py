"""Exceptions raised by the sea route planner."""


class RoutePlanningError(Exception):
    """Base class for route planning errors."""


class InvalidRouteOptionsError(RoutePlanningError, ValueError):
    """Raised when route inputs cannot produce a meaningful route."""


class WeatherServiceError(RoutePlanningError):
    """Raised by weather collaborators when a forecast cannot be produced."""
