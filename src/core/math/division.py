"""
Division Engine — Деление модулей столбиком повторным вычитанием

Алгоритм (от старшей цифры делимого к младшей):
1. Цифра делимого приписывается к текущему остатку справа (остаток * 10 + d)
2. Из остатка вычитается делитель, пока остаток не станет меньше делителя
3. Число вычитаний (0-9) — очередная цифра частного

Оценка цифр частного (digit estimation) сознательно не применяется:
наблюдаемые частное и остаток совпадают с классическим делением,
но каждая цифра стоит до 10 вычитаний.

Знак частного = XOR знаков, применяется к уже усечённому модулю,
поэтому деление округляет к нулю (не floor).
"""

from typing import Sequence

from src.core.domain.bigint import BigInt, Ordering, normalize, trim_magnitude
from src.core.domain.errors import DivisionByZero
from src.core.logging_config import get_logger
from src.core.math.additive import subtract_magnitude
from src.core.math.comparator import compare_magnitude

logger = get_logger(__name__)


def divmod_magnitude(
    dividend: Sequence[int], divisor: Sequence[int]
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Усечённое деление модулей.

    Args:
        dividend: Делимое (цифры младшая первой)
        divisor: Делитель (цифры младшая первой)

    Returns:
        (quotient, remainder) — канонические модули

    Raises:
        DivisionByZero: если делитель равен нулю

    Examples:
        >>> divmod_magnitude([6, 5, 4], [3, 2, 1])
        ((3,), (7, 8))
    """
    divisor = trim_magnitude(divisor)
    if divisor == (0,):
        raise DivisionByZero("division by zero")

    remainder: tuple[int, ...] = ()
    quotient_msb_first = []
    subtractions = 0

    for index in range(len(dividend) - 1, -1, -1):
        remainder = trim_magnitude((dividend[index],) + remainder)

        count = 0
        while compare_magnitude(remainder, divisor) is not Ordering.LESS:
            remainder = subtract_magnitude(remainder, divisor)
            count += 1
        quotient_msb_first.append(count)
        subtractions += count

    logger.debug(
        "divmod_magnitude: %d dividend digits, %d divisor digits, %d subtractions",
        len(dividend),
        len(divisor),
        subtractions,
    )

    quotient = trim_magnitude(quotient_msb_first[::-1])
    return quotient, trim_magnitude(remainder)


def signed_quotient(a: BigInt, b: BigInt) -> BigInt:
    """Частное с усечением к нулю: |a| // |b| со знаком XOR."""
    quotient, _ = divmod_magnitude(a.magnitude, b.magnitude)
    return normalize(quotient, a.negative != b.negative)
