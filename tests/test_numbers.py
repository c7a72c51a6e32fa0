"""
Тесты для демонстрации числовых типов.
"""

import math

import numpy as np
import pytest

from basic_types.components.numbers import NumbersDemo, uint8_increment, wrap_to_dtype


class TestOverflow:
    """Тесты переполнения целых фиксированной ширины."""

    def test_uint8_wraps_to_zero(self):
        assert uint8_increment(255) == 0

    def test_uint8_regular_increment(self):
        assert uint8_increment(0) == 1
        assert uint8_increment(254) == 255

    @pytest.mark.parametrize("value", [-1, 256, 1000])
    def test_uint8_out_of_range(self, value):
        with pytest.raises(ValueError):
            uint8_increment(value)

    @pytest.mark.parametrize(
        "value, dtype, expected",
        [
            (256, "uint8", 0),
            (-1, "uint8", 255),
            (128, "int8", -128),
            (-129, "int8", 127),
            (2 ** 31, np.int32, -(2 ** 31)),
            (42, np.uint16, 42),
        ],
    )
    def test_wrap_to_dtype(self, value, dtype, expected):
        assert wrap_to_dtype(value, dtype) == expected

    def test_wrap_to_dtype_rejects_float(self):
        with pytest.raises(ValueError):
            wrap_to_dtype(1, np.float64)


class TestNumbersDemo:
    """Тесты для NumbersDemo."""

    def test_default_report(self):
        report = NumbersDemo().run()
        assert report.sum_int_int32 == pytest.approx(15.0)
        assert report.product_float_int == pytest.approx(31.4)
        assert report.quotient_int_float == pytest.approx(10 / 3.14)
        assert report.radius == 5.0
        assert report.circle_area == pytest.approx(math.pi * 25)
        assert report.overflow_before == 255
        assert report.overflow_after == 0

    def test_custom_parameters(self):
        report = NumbersDemo(a=2, b=0.5, c=3, radius=1.0, overflow_start=7).run()
        assert report.sum_int_int32 == pytest.approx(5.0)
        assert report.product_float_int == pytest.approx(1.0)
        assert report.quotient_int_float == pytest.approx(4.0)
        assert report.circle_area == pytest.approx(math.pi)
        assert report.overflow_after == 8

    def test_circle_area_negative_radius(self):
        with pytest.raises(ValueError):
            NumbersDemo().circle_area(-1.0)

    def test_report_values_are_python_types(self):
        report = NumbersDemo().run()
        assert type(report.overflow_after) is int
        assert type(report.circle_area) is float
