"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс BASIC_TYPES_, вложенность через __)
- Валидация значений
- Настройка логирования
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

ENV_PREFIX = 'BASIC_TYPES_'


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}
        self.env_data: Dict[str, Any] = {}

        self._load_config()
        self._load_env()
        try:
            self._apply_env_overrides()
            self._validate()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")

    def _resolve_config_path(self) -> Path:
        env = os.getenv(f'{ENV_PREFIX}ENV', '').lower().strip()
        root = self.config_path.parent if self.config_path else Path.cwd()
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        return self.config_path

    def _load_config(self):
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        try:
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                if isinstance(loaded, dict):
                    self._merge(self.config_data, loaded)
                    logger.info(f"Конфигурация загружена: {self.config_path}")
                else:
                    logger.error(
                        f"Конфигурация {self.config_path} должна быть словарём, "
                        f"получено {type(loaded).__name__}; используются значения по умолчанию"
                    )
            else:
                logger.debug(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = self._get_default_config()

    def _load_env(self):
        """Загружает переменные окружения из .env файла"""
        load_dotenv()
        self.env_data = {
            'DEBUG': os.getenv(f'{ENV_PREFIX}DEBUG'),
            'ENV': os.getenv(f'{ENV_PREFIX}ENV'),
        }

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    @staticmethod
    def _parse_env_value(val: str) -> Any:
        if val.lower() in ('true', 'false'):
            return val.lower() == 'true'
        try:
            if '.' in val:
                return float(val)
            return int(val)
        except ValueError:
            return val

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (BASIC_TYPES_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            # Служебные переменные
            if key in (f'{ENV_PREFIX}ENV', f'{ENV_PREFIX}DEBUG'):
                continue
            dotted = key[len(ENV_PREFIX):].replace('__', '.').lower()
            self._set_nested(self.config_data, dotted, self._parse_env_value(val))
        if os.getenv(f'{ENV_PREFIX}ENV'):
            logger.info(f"Активирован профиль: {os.getenv(f'{ENV_PREFIX}ENV')}")

    def _validate(self) -> None:
        """Проверяет диапазоны значений."""
        try:
            places = int(self.get('temperature.decimal_places', 2))
        except (TypeError, ValueError):
            places = 2
        if places < 0:
            logger.warning("decimal_places < 0 — принудительно установлено в 0")
            places = 0
        self._set_nested(self.config_data, 'temperature.decimal_places', places)
        self._validate_numbers()

    def _validate_numbers(self) -> None:
        """Проверяет параметры демонстрации чисел; некорректные заменяет дефолтными."""
        defaults = self._get_default_config()['numbers']
        numbers = self.get('numbers')
        if not isinstance(numbers, dict):
            logger.warning("Секция numbers должна быть словарём — используются значения по умолчанию")
            self.config_data['numbers'] = dict(defaults)
            return

        casts = {'a': int, 'b': float, 'c': int, 'radius': float, 'overflow_start': int}
        for key, cast in casts.items():
            try:
                numbers[key] = cast(numbers.get(key, defaults[key]))
            except (TypeError, ValueError):
                logger.warning(f"numbers.{key}={numbers.get(key)!r} не является числом — установлено {defaults[key]}")
                numbers[key] = defaults[key]

        if numbers['radius'] < 0:
            logger.warning(f"numbers.radius < 0 — установлено {defaults['radius']}")
            numbers['radius'] = defaults['radius']
        if not 0 <= numbers['overflow_start'] <= 255:
            logger.warning(f"numbers.overflow_start вне [0, 255] — установлено {defaults['overflow_start']}")
            numbers['overflow_start'] = defaults['overflow_start']

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если ранее не конфигурировалось,
        изменились уровень/формат/файл логирования, или указан force=True.
        """
        root = logging.getLogger()

        level_name = str(self.get_logging_level()).upper()
        level = getattr(logging, level_name, logging.WARNING)
        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_basic_types_configured", False) and not force:
            if (
                getattr(root, "_basic_types_level", None) == level_name and
                getattr(root, "_basic_types_format", None) == desired_fmt and
                getattr(root, "_basic_types_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(logging.DEBUG)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        root_level = logging.DEBUG if desired_file else level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_basic_types_configured", True)
        setattr(root, "_basic_types_level", level_name)
        setattr(root, "_basic_types_format", desired_fmt)
        setattr(root, "_basic_types_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'strings': {
                # Показывать ли длину в байтах рядом с длиной в символах
                'show_byte_length': False,
            },
            'temperature': {
                'decimal_places': 2,
            },
            'numbers': {
                'a': 10,
                'b': 3.14,
                'c': 5,
                'radius': 5.0,
                'overflow_start': 255,
            },
            'logging': {
                'level': "WARNING",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/basic_types.log",
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_env(self, key: str, default: Any = None) -> Any:
        """Получает значение служебной переменной окружения (без префикса)"""
        value = self.env_data.get(key)
        return default if value is None else value

    def set(self, key: str, value: Any) -> None:
        """Устанавливает значение по ключу 'section.parameter' только в этом экземпляре"""
        self._set_nested(self.config_data, key, value)

    def is_debug(self) -> bool:
        return self.get_env('DEBUG') == '1'

    def show_byte_length(self) -> bool:
        return bool(self.get('strings.show_byte_length', False))

    def get_decimal_places(self) -> int:
        """Количество знаков после запятой при выводе температуры"""
        return int(self.get('temperature.decimal_places', 2))

    def get_numbers_config(self) -> Dict[str, Any]:
        """Параметры демонстрации чисел"""
        return dict(self.get('numbers', {}) or {})

    def get_logging_level(self) -> str:
        return self.get('logging.level', "WARNING")

    def get_logging_format(self) -> str:
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def get_logging_file(self) -> str:
        return self.get('logging.log_file', "logs/basic_types.log")

    def is_logging_to_file_enabled(self) -> bool:
        return bool(self.get('logging.log_to_file', False))


# Глобальный экземпляр конфигурации
config = Config()
