"""
Errors — Таксономия ошибок длинной арифметики

Три вида ошибок:
- INVALID_FORMAT: текст не является десятичным целым (опциональный '-' + цифры)
- DIVISION_BY_ZERO: делитель равен нулю (divide и modulo)
- NEGATIVE_RESULT: нарушение внутреннего инварианта subtract_magnitude
  (уменьшаемое меньше вычитаемого). Наружу через знаковую диспетчеризацию
  никогда не выходит; если выходит, это дефект, а не ошибка пользователя.

Все ошибки детерминированы: повтор с теми же входами даёт тот же результат.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Вид ошибки арифметической операции"""

    INVALID_FORMAT = "invalid_format"
    DIVISION_BY_ZERO = "division_by_zero"
    NEGATIVE_RESULT = "negative_result"


class BigIntError(Exception):
    """Базовое исключение длинной арифметики."""

    kind: ErrorKind


class InvalidFormat(BigIntError, ValueError):
    """
    Текст не является десятичной записью целого числа.

    Допустимо: опциональный ведущий '-' и непустая последовательность
    ASCII-цифр 0-9. Пробелы, '+', точки и прочие символы запрещены.
    """

    kind = ErrorKind.INVALID_FORMAT


class DivisionByZero(BigIntError, ZeroDivisionError):
    """Деление (или остаток) на ноль."""

    kind = ErrorKind.DIVISION_BY_ZERO


class NegativeResult(BigIntError):
    """
    Нарушение предусловия subtract_magnitude: |a| < |b|.

    ВНИМАНИЕ: это не пользовательская ошибка. Знаковая диспетчеризация
    всегда вычитает меньший модуль из большего, поэтому появление этого
    исключения означает дефект в самой диспетчеризации.
    """

    kind = ErrorKind.NEGATIVE_RESULT
