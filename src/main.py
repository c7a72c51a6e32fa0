#!/usr/bin/env python3
"""
Основной скрипт Basic Types

Простая точка входа для демонстрации возможностей проекта.
Для полного функционала используйте: python -m basic_types.cli
"""

import sys
from pathlib import Path

# Добавляем путь к модулям
sys.path.insert(0, str(Path(__file__).parent))

from basic_types import TextAnalyzer, TemperatureConverter
from basic_types.interfaces import Scale


def demo_analysis():
    """Демонстрация основных возможностей"""
    print("=== Демонстрация Basic Types ===\n")

    analyzer = TextAnalyzer()
    converter = TemperatureConverter()

    print("📝 Анализ строк:")
    for i, text in enumerate(["hello", "привет", "AEIOUaeiou"], 1):
        stats = analyzer.analyze(text, with_bytes=True)
        print(f"{i}. {text!r}: {stats.length} символов ({stats.byte_length} байт), "
              f"перевёрнуто {stats.reversed_text!r}, гласных {stats.vowel_count}")

    print("\n🌡️ Перевод температуры:")
    for value, scale in [(0, Scale.CELSIUS), (36.6, Scale.CELSIUS), (212, Scale.FAHRENHEIT)]:
        result = converter.convert(value, scale)
        print(f"   • {result.value:.2f}°{result.scale.value} = "
              f"{result.converted:.2f}°{result.target_scale.value} ({result.water_state.value})")

    print("\n" + "=" * 50)
    print("🚀 Для полного функционала используйте:")
    print("   python -m basic_types.cli")
    print("=" * 50)


def main():
    """Основная функция"""
    try:
        demo_analysis()
    except KeyboardInterrupt:
        print("\n\n👋 Работа прервана пользователем")


if __name__ == "__main__":
    main()
