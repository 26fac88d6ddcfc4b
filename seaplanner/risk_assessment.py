"""Threshold-based weather risk assessment."""

from typing import Iterable, List
from .interfaces import WeatherForecast, WeatherRisk
from .route_types import RiskLevel

HIGH_WIND = 30  # knots
MODERATE_WIND = 20
HIGH_WAVES = 4  # m
MODERATE_WAVES = 2
POOR_VISIBILITY = 1  # km
REDUCED_VISIBILITY = 3


def _escalate(current: str, level: str) -> str:
    return level if RiskLevel.ordinal(level) > RiskLevel.ordinal(current) else current


def assess_risk(forecast: WeatherForecast) -> WeatherRisk:
    """Assess the weather risk of a single forecast.

    The level only escalates across checks. Missing values never trigger
    a condition.
    """
    level = RiskLevel.LOW
    risks: List[str] = []
    recommendations: List[str] = []

    wind = forecast.wind_speed
    if wind is not None:
        if wind > HIGH_WIND:
            risks.append('High winds')
            level = _escalate(level, RiskLevel.HIGH)
            recommendations.append('Consider alternative route or delay departure')
        elif wind > MODERATE_WIND:
            risks.append('Moderate winds')
            level = _escalate(level, RiskLevel.MEDIUM)
            recommendations.append('Monitor wind conditions')

    waves = forecast.wave_height
    if waves is not None:
        if waves > HIGH_WAVES:
            risks.append('High waves')
            level = _escalate(level, RiskLevel.HIGH)
            recommendations.append('Avoid area if possible')
        elif waves > MODERATE_WAVES:
            risks.append('Moderate waves')
            level = _escalate(level, RiskLevel.MEDIUM)
            recommendations.append('Prepare for rough seas')

    visibility = forecast.visibility
    if visibility is not None:
        if visibility < POOR_VISIBILITY:
            risks.append('Poor visibility')
            level = _escalate(level, RiskLevel.HIGH)
            recommendations.append('Use radar and reduce speed')
        elif visibility < REDUCED_VISIBILITY:
            risks.append('Reduced visibility')
            level = _escalate(level, RiskLevel.MEDIUM)
            recommendations.append('Maintain proper lookout')

    return WeatherRisk(
        level=level,
        description=', '.join(risks) or 'Good conditions',
        recommendations=tuple(recommendations)
    )


def max_risk(risks: Iterable[WeatherRisk]) -> WeatherRisk:
    """The highest risk, keeping the first seen on ties."""
    worst = None
    for risk in risks:
        if worst is None or RiskLevel.ordinal(risk.level) > RiskLevel.ordinal(worst.level):
            worst = risk
    return worst if worst is not None else WeatherRisk()
