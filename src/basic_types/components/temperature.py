"""
Компонент для перевода температуры между шкалами Цельсия и Фаренгейта.

Помимо перевода определяет, замерзает или кипит вода при исходной температуре.
"""

import logging
import math

from ..interfaces.analyzers import (
    ConversionResult,
    Scale,
    TemperatureConverterInterface,
    WaterState,
)

logger = logging.getLogger(__name__)

FREEZING_C = 0.0
BOILING_C = 100.0
FREEZING_F = 32.0
BOILING_F = 212.0

# Точки замерзания/кипения для каждой шкалы
_WATER_POINTS = {
    Scale.CELSIUS: (FREEZING_C, BOILING_C),
    Scale.FAHRENHEIT: (FREEZING_F, BOILING_F),
}


class TemperatureConverter(TemperatureConverterInterface):
    """Конвертер температуры."""

    def celsius_to_fahrenheit(self, celsius: float) -> float:
        return celsius * 9 / 5 + 32

    def fahrenheit_to_celsius(self, fahrenheit: float) -> float:
        return (fahrenheit - 32) * 5 / 9

    def water_state(self, value: float, scale: Scale) -> WaterState:
        """
        Определяет состояние воды при температуре в указанной шкале.

        Args:
            value: Температура
            scale: Шкала, в которой задана температура

        Returns:
            FREEZING, BOILING или NORMAL
        """
        freezing, boiling = _WATER_POINTS[Scale(scale)]
        if value <= freezing:
            return WaterState.FREEZING
        if value >= boiling:
            return WaterState.BOILING
        return WaterState.NORMAL

    def convert(self, value: float, scale: Scale) -> ConversionResult:
        """
        Переводит температуру в противоположную шкалу.

        Args:
            value: Исходная температура
            scale: Исходная шкала

        Returns:
            ConversionResult с результатом и состоянием воды

        Raises:
            ValueError: Если значение не является конечным числом
        """
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Температура должна быть конечным числом: {value}")

        scale = Scale(scale)
        if scale is Scale.CELSIUS:
            converted = self.celsius_to_fahrenheit(value)
            target = Scale.FAHRENHEIT
        else:
            converted = self.fahrenheit_to_celsius(value)
            target = Scale.CELSIUS

        logger.debug(f"Перевод {value}°{scale.value} -> {converted}°{target.value}")
        return ConversionResult(
            value=value,
            scale=scale,
            converted=converted,
            target_scale=target,
            water_state=self.water_state(value, scale),
        )
