"""
Абстрактные интерфейсы для компонентов упражнений.

Определяет контракты, которые должны реализовывать все компоненты,
обеспечивая единообразный API и возможность замены реализаций.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Scale(str, Enum):
    """Температурная шкала."""
    CELSIUS = "C"
    FAHRENHEIT = "F"


class WaterState(str, Enum):
    """Состояние воды при заданной температуре."""
    FREEZING = "freezing"
    NORMAL = "normal"
    BOILING = "boiling"


@dataclass
class TextStats:
    """Результат анализа строки."""
    text: str
    length: int
    reversed_text: str
    vowel_count: int
    # Длина в байтах (UTF-8), заполняется только по запросу
    byte_length: Optional[int] = None


@dataclass
class ConversionResult:
    """Результат перевода температуры из одной шкалы в другую."""
    value: float
    scale: Scale
    converted: float
    target_scale: Scale
    water_state: WaterState


@dataclass
class NumbersReport:
    """Результаты демонстрации числовых типов."""
    sum_int_int32: float
    product_float_int: float
    quotient_int_float: float
    radius: float
    circle_area: float
    overflow_before: int
    overflow_after: int


class TextAnalyzerInterface(ABC):
    """Интерфейс для анализа строк."""

    @abstractmethod
    def length(self, text: str) -> int:
        """Возвращает длину строки в символах."""
        pass

    @abstractmethod
    def reverse(self, text: str) -> str:
        """Переворачивает строку посимвольно."""
        pass

    @abstractmethod
    def count_vowels(self, text: str) -> int:
        """Подсчитывает гласные буквы."""
        pass


class TemperatureConverterInterface(ABC):
    """Интерфейс для перевода температуры."""

    @abstractmethod
    def celsius_to_fahrenheit(self, celsius: float) -> float:
        """Цельсий -> Фаренгейт."""
        pass

    @abstractmethod
    def fahrenheit_to_celsius(self, fahrenheit: float) -> float:
        """Фаренгейт -> Цельсий."""
        pass

    @abstractmethod
    def convert(self, value: float, scale: Scale) -> ConversionResult:
        """Переводит значение из указанной шкалы в противоположную."""
        pass
