import unittest
from seaplanner.interfaces import WeatherForecast, WeatherRisk
from seaplanner.risk_assessment import assess_risk, max_risk
from seaplanner.route_types import RiskLevel


class TestAssessRisk(unittest.TestCase):
    def test_good_conditions(self):
        risk = assess_risk(WeatherForecast('Clear sky', wind_speed=10, wave_height=1.0, visibility=10))
        self.assertEqual(risk.level, RiskLevel.LOW)
        self.assertEqual(risk.description, 'Good conditions')
        self.assertEqual(risk.recommendations, ())

    def test_missing_values_never_trigger(self):
        risk = assess_risk(WeatherForecast('No data available'))
        self.assertEqual(risk, WeatherRisk())

    def test_high_winds(self):
        risk = assess_risk(WeatherForecast('Storm', wind_speed=35))
        self.assertEqual(risk.level, RiskLevel.HIGH)
        self.assertEqual(risk.description, 'High winds')
        self.assertEqual(risk.recommendations, ('Consider alternative route or delay departure',))

    def test_thresholds_are_exclusive(self):
        risk = assess_risk(WeatherForecast('Windy', wind_speed=30, wave_height=4, visibility=3))
        self.assertEqual(risk.level, RiskLevel.MEDIUM)
        self.assertEqual(risk.description, 'Moderate winds, Moderate waves')
        risk = assess_risk(WeatherForecast('Breezy', wind_speed=20, wave_height=2, visibility=1))
        self.assertEqual(risk.level, RiskLevel.MEDIUM)
        self.assertEqual(risk.description, 'Reduced visibility')

    def test_combined_conditions_keep_order(self):
        risk = assess_risk(WeatherForecast('Fog', wind_speed=25, wave_height=5, visibility=0.5))
        self.assertEqual(risk.level, RiskLevel.HIGH)
        self.assertEqual(risk.description, 'Moderate winds, High waves, Poor visibility')
        self.assertEqual(risk.recommendations, (
            'Monitor wind conditions', 'Avoid area if possible', 'Use radar and reduce speed'
        ))

    def test_level_never_decreases(self):
        """A later moderate condition does not lower an earlier high one"""
        risk = assess_risk(WeatherForecast('Gale', wind_speed=40, wave_height=3))
        self.assertEqual(risk.level, RiskLevel.HIGH)
        self.assertEqual(risk.description, 'High winds, Moderate waves')

    def test_monotonic_in_wind(self):
        previous = RiskLevel.LOW
        for wind in range(0, 60, 2):
            level = assess_risk(WeatherForecast('', wind_speed=wind, wave_height=1, visibility=10)).level
            self.assertGreaterEqual(RiskLevel.ordinal(level), RiskLevel.ordinal(previous))
            previous = level

    def test_monotonic_in_waves(self):
        previous = RiskLevel.LOW
        for step in range(0, 17):
            waves = step * 0.5
            level = assess_risk(WeatherForecast('', wind_speed=5, wave_height=waves, visibility=10)).level
            self.assertGreaterEqual(RiskLevel.ordinal(level), RiskLevel.ordinal(previous), waves)
            previous = level
        self.assertEqual(previous, RiskLevel.HIGH)

    def test_monotonic_in_falling_visibility(self):
        previous = RiskLevel.LOW
        for step in range(20, -1, -1):
            visibility = step * 0.5
            level = assess_risk(WeatherForecast('', wind_speed=5, wave_height=1, visibility=visibility)).level
            self.assertGreaterEqual(RiskLevel.ordinal(level), RiskLevel.ordinal(previous), visibility)
            previous = level
        self.assertEqual(previous, RiskLevel.HIGH)


class TestMaxRisk(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(max_risk([]), WeatherRisk())

    def test_highest_wins(self):
        low = WeatherRisk()
        medium = WeatherRisk(RiskLevel.MEDIUM, 'Moderate waves', ('Prepare for rough seas',))
        high = WeatherRisk(RiskLevel.HIGH, 'High winds', ('Consider alternative route or delay departure',))
        self.assertIs(max_risk([low, high, medium]), high)

    def test_first_seen_on_ties(self):
        first = WeatherRisk(RiskLevel.MEDIUM, 'Moderate winds', ('Monitor wind conditions',))
        second = WeatherRisk(RiskLevel.MEDIUM, 'Moderate waves', ('Prepare for rough seas',))
        self.assertIs(max_risk([WeatherRisk(), first, second]), first)


if __name__ == "__main__":
    unittest.main()
