"""
Тесты для модуля temperature
"""

import unittest

from basic_types.components.temperature import TemperatureConverter
from basic_types.interfaces import Scale, WaterState


class TestTemperatureConverter(unittest.TestCase):
    """Тесты для класса TemperatureConverter"""

    def setUp(self):
        """Настройка перед каждым тестом"""
        self.converter = TemperatureConverter()

    def test_celsius_to_fahrenheit(self):
        self.assertAlmostEqual(self.converter.celsius_to_fahrenheit(0), 32.0)
        self.assertAlmostEqual(self.converter.celsius_to_fahrenheit(100), 212.0)
        self.assertAlmostEqual(self.converter.celsius_to_fahrenheit(-40), -40.0)
        self.assertAlmostEqual(self.converter.celsius_to_fahrenheit(36.6), 97.88)

    def test_fahrenheit_to_celsius(self):
        self.assertAlmostEqual(self.converter.fahrenheit_to_celsius(32), 0.0)
        self.assertAlmostEqual(self.converter.fahrenheit_to_celsius(212), 100.0)
        self.assertAlmostEqual(self.converter.fahrenheit_to_celsius(-40), -40.0)

    def test_round_trip(self):
        for value in (-273.15, -10.5, 0.0, 21.0, 100.0, 451.0):
            back = self.converter.fahrenheit_to_celsius(self.converter.celsius_to_fahrenheit(value))
            self.assertAlmostEqual(back, value)

    def test_water_state_celsius(self):
        self.assertEqual(self.converter.water_state(-5, Scale.CELSIUS), WaterState.FREEZING)
        self.assertEqual(self.converter.water_state(0, Scale.CELSIUS), WaterState.FREEZING)
        self.assertEqual(self.converter.water_state(50, Scale.CELSIUS), WaterState.NORMAL)
        self.assertEqual(self.converter.water_state(100, Scale.CELSIUS), WaterState.BOILING)

    def test_water_state_fahrenheit(self):
        # 20°F ниже точки замерзания, хотя по Цельсию 20 было бы нормой
        self.assertEqual(self.converter.water_state(20, Scale.FAHRENHEIT), WaterState.FREEZING)
        self.assertEqual(self.converter.water_state(32, Scale.FAHRENHEIT), WaterState.FREEZING)
        self.assertEqual(self.converter.water_state(150, Scale.FAHRENHEIT), WaterState.NORMAL)
        self.assertEqual(self.converter.water_state(212, Scale.FAHRENHEIT), WaterState.BOILING)

    def test_convert_from_celsius(self):
        result = self.converter.convert(100, Scale.CELSIUS)
        self.assertEqual(result.scale, Scale.CELSIUS)
        self.assertEqual(result.target_scale, Scale.FAHRENHEIT)
        self.assertAlmostEqual(result.converted, 212.0)
        self.assertEqual(result.water_state, WaterState.BOILING)

    def test_convert_from_fahrenheit(self):
        result = self.converter.convert(50, Scale.FAHRENHEIT)
        self.assertEqual(result.target_scale, Scale.CELSIUS)
        self.assertAlmostEqual(result.converted, 10.0)
        self.assertEqual(result.water_state, WaterState.NORMAL)

    def test_convert_accepts_scale_value(self):
        result = self.converter.convert(0, "C")
        self.assertEqual(result.scale, Scale.CELSIUS)
        self.assertAlmostEqual(result.converted, 32.0)

    def test_convert_rejects_non_finite(self):
        with self.assertRaises(ValueError):
            self.converter.convert(float("nan"), Scale.CELSIUS)
        with self.assertRaises(ValueError):
            self.converter.convert(float("inf"), Scale.FAHRENHEIT)

    def test_convert_rejects_unknown_scale(self):
        with self.assertRaises(ValueError):
            self.converter.convert(10, "K")


if __name__ == '__main__':
    unittest.main()
