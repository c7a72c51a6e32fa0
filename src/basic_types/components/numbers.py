"""
Демонстрация числовых типов.

Показывает арифметику над значениями разных типов с явным приведением,
вычисление площади круга и переполнение целых фиксированной ширины
(uint8: 255 + 1 = 0). Типы фиксированной ширины берутся из NumPy.
"""

import logging
from typing import Union

import numpy as np

from ..interfaces.analyzers import NumbersReport

logger = logging.getLogger(__name__)

DtypeLike = Union[str, type, np.dtype]


def wrap_to_dtype(value: int, dtype: DtypeLike = np.uint8) -> int:
    """
    Приводит целое к диапазону целочисленного типа с переполнением по модулю.

    Args:
        value: Произвольное целое
        dtype: Целочисленный тип NumPy (uint8, int8, int32 ...)

    Returns:
        Значение после циклического переполнения

    Raises:
        ValueError: Если тип не целочисленный
    """
    dt = np.dtype(dtype)
    if dt.kind not in ('i', 'u'):
        raise ValueError(f"Ожидался целочисленный тип, получен {dt}")
    info = np.iinfo(dt)
    span = int(info.max) - int(info.min) + 1
    return (int(value) - int(info.min)) % span + int(info.min)


def uint8_increment(value: int) -> int:
    """
    Увеличивает значение uint8 на единицу; 255 переходит в 0.

    Raises:
        ValueError: Если значение вне диапазона [0, 255]
    """
    info = np.iinfo(np.uint8)
    if not info.min <= value <= info.max:
        raise ValueError(f"Значение {value} вне диапазона uint8 [{info.min}, {info.max}]")
    # Массив, а не скаляр: переполнение в массивах NumPy циклическое и без предупреждений
    x = np.array([value], dtype=np.uint8)
    x += 1
    return int(x[0])


class NumbersDemo:
    """Демонстрация арифметики и переполнения."""

    def __init__(self, a: int = 10, b: float = 3.14, c: int = 5,
                 radius: float = 5.0, overflow_start: int = 255):
        self.a = int(a)
        self.b = np.float64(b)
        self.c = np.int32(c)
        self.radius = float(radius)
        self.overflow_start = int(overflow_start)

    def circle_area(self, radius: float) -> float:
        """Площадь круга заданного радиуса."""
        if radius < 0:
            raise ValueError(f"Радиус не может быть отрицательным: {radius}")
        return float(np.pi * radius * radius)

    def run(self) -> NumbersReport:
        """Выполняет все демонстрации и возвращает отчёт."""
        report = NumbersReport(
            sum_int_int32=float(np.float64(self.a) + np.float64(self.c)),
            product_float_int=float(self.b * np.float64(self.a)),
            quotient_int_float=float(np.float64(self.a) / self.b),
            radius=self.radius,
            circle_area=self.circle_area(self.radius),
            overflow_before=self.overflow_start,
            overflow_after=uint8_increment(self.overflow_start),
        )
        logger.debug(f"Демонстрация чисел: {report}")
        return report
