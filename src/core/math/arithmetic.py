"""
Arithmetic — Знаковые операции над BigInt

Публичный фасад над движками:
- add / subtract — через общую знаковую диспетчеризацию (additive.signed_sum)
- multiply — столбиком, знак XOR
- divide — усечение к нулю, знак XOR
- modulo — a - divide(a, b) * b (знак остатка следует из усечённого деления)
- absolute_value / negate

Все операции чистые: операнды не изменяются, результат всегда новый.
"""

from src.core.domain.bigint import BigInt, normalize
from src.core.math.additive import signed_sum
from src.core.math.division import signed_quotient
from src.core.math.multiplicative import signed_product


def add(a: BigInt, b: BigInt) -> BigInt:
    """
    Сумма a + b.

    Examples:
        >>> add(from_text("-123"), from_text("456"))  # doctest: +SKIP
        BigInt('333')
    """
    return signed_sum(a, b)


def subtract(a: BigInt, b: BigInt) -> BigInt:
    """Разность a - b (эффективный знак b инвертируется при диспетчеризации)."""
    return signed_sum(a, b, negate_b=True)


def multiply(a: BigInt, b: BigInt) -> BigInt:
    return signed_product(a, b)


def divide(a: BigInt, b: BigInt) -> BigInt:
    """
    Частное с усечением к нулю.

    Raises:
        DivisionByZero: если b == 0

    Examples:
        >>> divide(from_text("456"), from_text("-123"))  # doctest: +SKIP
        BigInt('-3')
        >>> divide(from_text("-7"), from_text("2"))  # doctest: +SKIP
        BigInt('-3')
    """
    return signed_quotient(a, b)


def modulo(a: BigInt, b: BigInt) -> BigInt:
    """
    Остаток, согласованный с усечённым делением: a - divide(a, b) * b.

    Остаток отрицателен при отрицательном a (в отличие от % для int).

    Raises:
        DivisionByZero: если b == 0

    Examples:
        >>> modulo(from_text("456"), from_text("-123"))  # doctest: +SKIP
        BigInt('87')
        >>> modulo(from_text("-7"), from_text("2"))  # doctest: +SKIP
        BigInt('-1')
    """
    return subtract(a, multiply(divide(a, b), b))


def absolute_value(a: BigInt) -> BigInt:
    return normalize(a.magnitude, False)


def negate(a: BigInt) -> BigInt:
    """Смена знака; ноль остаётся неотрицательным."""
    return normalize(a.magnitude, not a.negative)
