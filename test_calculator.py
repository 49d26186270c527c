"""
Unit tests for PolygonClippingCalculator and the strategy lookup.
"""

import unittest
from unittest.mock import Mock

from polyclip.engine import (
    ClippingStrategy,
    PolygonClippingCalculator,
    SutherlandHodgman,
    available_strategies,
    get_strategy,
)
from polyclip.geometry import Point2D, Polygon

WINDOW = Polygon([Point2D(0, 0), Point2D(10, 0), Point2D(10, 10), Point2D(0, 10)])
SUBJECT = Polygon([Point2D(5, 2), Point2D(15, 2), Point2D(15, 8), Point2D(5, 8)])


class TestStrategyLookup(unittest.TestCase):

    def test_sutherland_hodgman_is_registered(self):
        self.assertIn("sutherland_hodgman", available_strategies())
        self.assertIsInstance(get_strategy("sutherland_hodgman"), SutherlandHodgman)
        self.assertEqual(SutherlandHodgman.name, "sutherland_hodgman")

    def test_unknown_strategy_raises_key_error(self):
        with self.assertRaises(KeyError) as ctx:
            get_strategy("weiler_atherton")
        self.assertIn("weiler_atherton", str(ctx.exception))


class TestPolygonClippingCalculator(unittest.TestCase):

    def test_default_strategy(self):
        calc = PolygonClippingCalculator()
        self.assertIsInstance(calc.strategy, SutherlandHodgman)

    def test_forwards_to_strategy(self):
        expected = Polygon([Point2D(1, 1), Point2D(2, 1), Point2D(2, 2)])
        strategy = Mock(spec=ClippingStrategy)
        strategy.clip.return_value = expected

        calc = PolygonClippingCalculator(strategy)
        self.assertIs(calc.clip(WINDOW, SUBJECT), expected)
        strategy.clip.assert_called_once_with(WINDOW, SUBJECT)

    def test_same_result_as_strategy(self):
        calc = PolygonClippingCalculator.from_name("sutherland_hodgman")
        self.assertEqual(calc.clip(WINDOW, SUBJECT), SutherlandHodgman().clip(WINDOW, SUBJECT))

    def test_absent_result(self):
        far = Polygon([Point2D(20, 20), Point2D(30, 20), Point2D(30, 30)])
        self.assertIsNone(PolygonClippingCalculator().clip(WINDOW, far))

    def test_repeated_calls_are_independent(self):
        calc = PolygonClippingCalculator()
        first = calc.clip(WINDOW, SUBJECT)
        second = calc.clip(WINDOW, SUBJECT)
        self.assertEqual(first, second)
        self.assertIsNot(first, second)


if __name__ == "__main__":
    unittest.main()
