"""
Интерфейсы для компонентов упражнений.

Определяет абстрактные базовые классы и структуры результатов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .analyzers import (
    Scale,
    WaterState,
    TextStats,
    ConversionResult,
    NumbersReport,
    TextAnalyzerInterface,
    TemperatureConverterInterface,
)

__all__ = [
    'Scale',
    'WaterState',
    'TextStats',
    'ConversionResult',
    'NumbersReport',
    'TextAnalyzerInterface',
    'TemperatureConverterInterface',
]
