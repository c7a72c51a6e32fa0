#!/usr/bin/env python3
"""
Интерфейс командной строки для упражнений Basic Types

Этот модуль предоставляет единый CLI для всех упражнений:
1. Strings - длина строки, переворот и подсчёт гласных
2. Temperature - калькулятор температуры (Цельсий/Фаренгейт)
3. Numbers - арифметика разных типов и переполнение uint8
"""

import argparse
import logging
import math
import sys
from typing import List, Optional

from .components.numbers import NumbersDemo
from .components.temperature import TemperatureConverter
from .components.text_analyzer import TextAnalyzer
from .config import config
from .interfaces.analyzers import NumbersReport, Scale, TextStats, WaterState

logger = logging.getLogger(__name__)

_SCALE_BY_CHOICE = {
    '1': Scale.CELSIUS,
    '2': Scale.FAHRENHEIT,
}

_NUMBERS_PARAMS = ('a', 'b', 'c', 'radius', 'overflow_start')

_SCALE_NAMES = {
    Scale.CELSIUS: "Цельсия",
    Scale.FAHRENHEIT: "Фаренгейта",
}


def _read_line(prompt: str) -> Optional[str]:
    """Читает строку из stdin; None при EOF."""
    try:
        return input(prompt)
    except EOFError:
        return None


def parse_temperature(raw: str) -> float:
    """
    Разбирает введённую температуру.

    Допускает запятую как десятичный разделитель.

    Raises:
        ValueError: Если строка не является конечным числом
    """
    value = float(raw.strip().replace(',', '.'))
    if not math.isfinite(value):
        raise ValueError(f"недопустимое значение: {raw!r}")
    return value


def run_strings(text: Optional[str] = None) -> TextStats:
    """Запускает упражнение со строками"""
    if text is None:
        text = _read_line("Введите строку: ") or ""

    analyzer = TextAnalyzer()
    stats = analyzer.analyze(text, with_bytes=config.show_byte_length())

    print(f"\nДлина строки: {stats.length} символов")
    if stats.byte_length is not None:
        print(f"Длина строки в байтах (UTF-8): {stats.byte_length}")
    print(f"Перевернутая строка: {stats.reversed_text}")
    print(f"Количество гласных букв: {stats.vowel_count}")
    return stats


def _read_temperature(scale: Scale) -> Optional[float]:
    """Запрашивает температуру, пока не будет введено корректное число."""
    while True:
        raw = _read_line(f"Введите температуру в градусах {_SCALE_NAMES[scale]}: ")
        if raw is None:
            return None
        try:
            return parse_temperature(raw)
        except ValueError:
            logger.debug(f"Некорректный ввод температуры: {raw!r}")
            print("❌ Некорректное число. Попробуйте снова.")


def run_temperature() -> int:
    """
    Калькулятор температуры с меню.

    Returns:
        Количество выполненных переводов
    """
    converter = TemperatureConverter()
    places = config.get_decimal_places()
    conversions = 0

    while True:
        print("\nКалькулятор температуры")
        print("1. Цельсий -> Фаренгейт")
        print("2. Фаренгейт -> Цельсий")
        print("3. Выход")
        choice = _read_line("Выберите действие (1-3): ")

        if choice is None or choice.strip() == '3':
            print("До свидания!")
            break

        scale = _SCALE_BY_CHOICE.get(choice.strip())
        if scale is None:
            print("Неверный выбор. Пожалуйста, выберите 1, 2 или 3.")
            continue

        value = _read_temperature(scale)
        if value is None:
            print("До свидания!")
            break

        result = converter.convert(value, scale)
        conversions += 1
        print(
            f"{result.value:.{places}f}°{result.scale.value} = "
            f"{result.converted:.{places}f}°{result.target_scale.value}"
        )
        if result.water_state is WaterState.FREEZING:
            print("Вода замерзает при этой температуре!")
        elif result.water_state is WaterState.BOILING:
            print("Вода кипит при этой температуре!")

    return conversions


def run_numbers() -> Optional[NumbersReport]:
    """
    Запускает демонстрацию числовых типов.

    Returns:
        Отчёт или None, если параметры из конфигурации некорректны
    """
    params = config.get_numbers_config()
    try:
        demo = NumbersDemo(**{k: params[k] for k in _NUMBERS_PARAMS if k in params})
        report = demo.run()
    except (TypeError, ValueError) as e:
        logger.debug(f"Некорректные параметры numbers: {params}")
        print(f"❌ Некорректные параметры демонстрации чисел: {e}")
        return None

    print("Демонстрация арифметических операций:")
    print(f"a + float64(c) = {report.sum_int_int32:.2f}")
    print(f"b * float64(a) = {report.product_float_int:.2f}")
    print(f"float64(a) / b = {report.quotient_int_float:.2f}")
    print(f"\nПлощадь круга с радиусом {report.radius:.1f}: {report.circle_area:.2f}")
    print("\nДемонстрация переполнения uint8:")
    print(f"x = {report.overflow_before}")
    print(f"После x++ = {report.overflow_after}")
    return report


def _interactive_menu() -> None:
    while True:
        print("\n📋 Доступные упражнения:")
        print("1. 🔤 Strings - длина, переворот строки и гласные")
        print("2. 🌡️ Temperature - калькулятор температуры")
        print("3. 🔢 Numbers - типы и переполнение")
        print("4. 🚪 Выход")

        choice = _read_line("\nВыберите упражнение (1-4): ")
        if choice is None:
            print("👋 До свидания!")
            break
        choice = choice.strip()

        if choice == '1':
            run_strings()
        elif choice == '2':
            run_temperature()
        elif choice == '3':
            run_numbers()
        elif choice == '4':
            print("👋 До свидания!")
            break
        else:
            print("❌ Неверный выбор. Попробуйте снова.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="basic-types",
        description="Basic Types - упражнения со строками, температурой и числами",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m basic_types.cli --strings              # Анализ строки (ввод с клавиатуры)
  python -m basic_types.cli --text "привет"        # Анализ переданной строки
  python -m basic_types.cli --temperature          # Калькулятор температуры
  python -m basic_types.cli --numbers              # Демонстрация типов
  python -m basic_types.cli --all                  # Все упражнения
  python -m basic_types.cli                        # Интерактивный режим
        """
    )
    parser.add_argument('--strings', action='store_true', help='Запустить упражнение со строками')
    parser.add_argument('--text', default=None, help='Строка для анализа (подразумевает --strings)')
    parser.add_argument('--temperature', action='store_true', help='Запустить калькулятор температуры')
    parser.add_argument('--numbers', action='store_true', help='Запустить демонстрацию чисел')
    parser.add_argument('--all', action='store_true', help='Запустить все упражнения')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    if config.is_debug():
        config.set('logging.level', 'DEBUG')
    config._configure_logging_if_needed(force=True)

    args = build_parser().parse_args(argv)
    logger.debug(f"Аргументы CLI: {args}")

    ok = True
    try:
        if args.all:
            run_strings(args.text)
            print("\n" + "=" * 50)
            run_temperature()
            print("\n" + "=" * 50)
            ok = run_numbers() is not None
        elif args.strings or args.text is not None:
            run_strings(args.text)
        elif args.temperature:
            run_temperature()
        elif args.numbers:
            ok = run_numbers() is not None
        else:
            _interactive_menu()
    except KeyboardInterrupt:
        print("\n\n👋 Работа прервана пользователем")
        return 130
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
