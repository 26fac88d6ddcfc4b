"""Constant definitions for sea route planning."""


class ShipType:
    """Constants for ship types."""
    CONTAINER = "container"
    BULK = "bulk"
    TANKER = "tanker"
    CRUISE = "cruise"
    FERRY = "ferry"

    ALL = (CONTAINER, BULK, TANKER, CRUISE, FERRY)


class RiskLevel:
    """Constants for weather risk levels, ordered low < medium < high."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    ORDER = {LOW: 0, MEDIUM: 1, HIGH: 2}

    @classmethod
    def ordinal(cls, level: str) -> int:
        return cls.ORDER[level]


class RouteVariant:
    """Labels attached to route alternatives."""
    STANDARD = "Standard"
    WEATHER_OPTIMIZED = "Weather Optimized"
    FUEL_EFFICIENT = "Fuel Efficient"


class BuildStrategy:
    """Path construction strategies."""
    CURVED = "curved"
    SEGMENTED = "segmented"
