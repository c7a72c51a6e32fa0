"""
Компонент для анализа строк.

Считает длину строки в символах, переворачивает её и подсчитывает гласные.
Все операции работают с символами Unicode, а не с байтами, поэтому
кириллица обрабатывается корректно.
"""

import logging
from typing import List

from ..interfaces.analyzers import TextAnalyzerInterface, TextStats

logger = logging.getLogger(__name__)

# Фиксированный набор гласных: латиница и кириллица в обоих регистрах
VOWELS = frozenset("аеёиоуыэюяАЕЁИОУЫЭЮЯaeiouAEIOU")


class TextAnalyzer(TextAnalyzerInterface):
    """Анализатор строк без состояния."""

    def __init__(self, vowels: frozenset = VOWELS):
        """
        Инициализирует анализатор.

        Args:
            vowels: Множество символов, считающихся гласными
        """
        self.vowels = vowels

    def length(self, text: str) -> int:
        """
        Возвращает длину строки в символах (не в байтах).

        Args:
            text: Исходная строка

        Returns:
            Количество символов
        """
        return len(text)

    def byte_length(self, text: str, encoding: str = 'utf-8') -> int:
        """Возвращает длину строки в байтах в указанной кодировке."""
        return len(text.encode(encoding))

    def reverse(self, text: str) -> str:
        """
        Переворачивает строку посимвольно.

        Args:
            text: Исходная строка

        Returns:
            Перевёрнутая строка
        """
        chars: List[str] = list(text)
        i, j = 0, len(chars) - 1
        while i < j:
            chars[i], chars[j] = chars[j], chars[i]
            i += 1
            j -= 1
        return ''.join(chars)

    def count_vowels(self, text: str) -> int:
        """
        Подсчитывает гласные буквы латиницы и кириллицы.

        Args:
            text: Исходная строка

        Returns:
            Количество гласных
        """
        count = 0
        for char in text:
            if char in self.vowels:
                count += 1
        return count

    def analyze(self, text: str, with_bytes: bool = False) -> TextStats:
        """
        Полный анализ строки.

        Args:
            text: Исходная строка
            with_bytes: Заполнять ли длину в байтах

        Returns:
            TextStats с длиной, перевёрнутой строкой и числом гласных
        """
        stats = TextStats(
            text=text,
            length=self.length(text),
            reversed_text=self.reverse(text),
            vowel_count=self.count_vowels(text),
        )
        if with_bytes:
            stats.byte_length = self.byte_length(text)
        logger.debug(f"Анализ строки: длина={stats.length}, гласных={stats.vowel_count}")
        return stats


_default_analyzer = TextAnalyzer()


def length(text: str) -> int:
    """Длина строки в символах."""
    return _default_analyzer.length(text)


def reverse(text: str) -> str:
    """Перевёрнутая строка."""
    return _default_analyzer.reverse(text)


def count_vowels(text: str) -> int:
    """Количество гласных в строке."""
    return _default_analyzer.count_vowels(text)
