"""Тестовые данные."""
