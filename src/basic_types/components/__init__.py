"""
Компоненты упражнений.

Каждый компонент отвечает за одну конкретную задачу:
- TextAnalyzer - длина, переворот строки и подсчёт гласных
- TemperatureConverter - перевод температуры между шкалами
- NumbersDemo - арифметика разных типов и переполнение
"""

from .text_analyzer import TextAnalyzer, VOWELS, length, reverse, count_vowels
from .temperature import (
    TemperatureConverter,
    FREEZING_C,
    BOILING_C,
    FREEZING_F,
    BOILING_F,
)
from .numbers import NumbersDemo, uint8_increment, wrap_to_dtype

__all__ = [
    'TextAnalyzer',
    'VOWELS',
    'length',
    'reverse',
    'count_vowels',
    'TemperatureConverter',
    'FREEZING_C',
    'BOILING_C',
    'FREEZING_F',
    'BOILING_F',
    'NumbersDemo',
    'uint8_increment',
    'wrap_to_dtype',
]
