import sys
from pathlib import Path

import pytest

# В тестах явно добавляем путь к src, чтобы импортировать пакет без установки
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fixtures.sample_texts import (  # noqa: E402
    SAMPLE_CYRILLIC,
    SAMPLE_EMOJI,
    SAMPLE_LATIN,
    SAMPLE_MIXED,
)


@pytest.fixture(scope="session")
def sample_texts():
    """Простые наборы строк для тестирования."""
    return {
        "latin": SAMPLE_LATIN,
        "cyrillic": SAMPLE_CYRILLIC,
        "mixed": SAMPLE_MIXED,
        "emoji": SAMPLE_EMOJI,
    }


@pytest.fixture
def clean_env(monkeypatch):
    """Убирает переменные BASIC_TYPES_* из окружения на время теста."""
    import os

    for key in list(os.environ):
        if key.startswith("BASIC_TYPES_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def feed_input(monkeypatch):
    """Подменяет input() последовательностью ответов; по окончании — EOF."""

    def _feed(*answers):
        it = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
