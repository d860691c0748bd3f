"""
Logging — Централизованная настройка логирования

Все модули получают логгер через get_logger(__name__). Логгеры
пакета подвешиваются к корневому логгеру "bigint". Обработчик stderr
устанавливает только точка входа (configure_logging); библиотечный код
обработчиков не добавляет, записи распространяются к корневому логгеру
приложения.

Уровень задаётся переменной окружения BIGINT_LOG_LEVEL (по умолчанию
WARNING) или явно через configure_logging().

Использование:
    from src.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("divide: %d dividend digits", n)
"""

import logging
import os
import sys
from typing import Final, Optional, Union

ROOT_LOGGER_NAME: Final[str] = "bigint"
LOG_LEVEL_ENV_VAR: Final[str] = "BIGINT_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[int] = logging.WARNING

# Формат: [TIMESTAMP] [LEVEL] [COMPONENT] MESSAGE
LOG_FORMAT: Final[str] = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Имя обработчика stderr, по нему повторная настройка находит установленный
HANDLER_NAME: Final[str] = "bigint-stderr"


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: Union[int, str, None] = None) -> logging.Logger:
    """
    Установка обработчика и уровня на корневой логгер пакета.

    Повторный вызов меняет только уровень (обработчик не дублируется).

    Args:
        level: Уровень (int или имя, например 'DEBUG'); None => из окружения

    Returns:
        Корневой логгер пакета

    Raises:
        ValueError: если имя уровня неизвестно
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(_resolve_level(level))

    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        root.addHandler(handler)

    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Логгер компонента, дочерний к корневому логгеру пакета.

    Args:
        name: Обычно __name__ модуля (например, 'src.core.math.division')

    Returns:
        logging.Logger с именем 'bigint.<name>'
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
