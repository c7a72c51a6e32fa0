"""
Basic Types - упражнения по базовым типам данных

Этот модуль предоставляет инструменты для:
- Анализа строк (длина в символах, переворот, подсчёт гласных)
- Перевода температуры между шкалами Цельсия и Фаренгейта
- Демонстрации числовых типов и переполнения
"""

__version__ = "0.1.0"
__author__ = "Sergey"

from .components.text_analyzer import TextAnalyzer, length, reverse, count_vowels
from .components.temperature import TemperatureConverter
from .components.numbers import NumbersDemo
from . import cli

__all__ = [
    "TextAnalyzer",
    "TemperatureConverter",
    "NumbersDemo",
    "length",
    "reverse",
    "count_vowels",
    "cli",
]
