"""
Additive Engine — Сложение и вычитание модулей, знаковая диспетчеризация

- add_magnitude: поразрядное сложение с переносом, длина <= max(len) + 1
- subtract_magnitude: поразрядное вычитание с заёмом, только для |a| >= |b|
- signed_sum: общая знаковая диспетчеризация для add и subtract

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. subtract_magnitude вызывается только с большим по модулю операндом первым
2. Знак результата при разных знаках = знак операнда с большим (или равным) модулем
3. Все результаты проходят через normalize
"""

from typing import Sequence

from src.core.domain.bigint import BASE, BigInt, Ordering, normalize, trim_magnitude
from src.core.domain.errors import NegativeResult
from src.core.logging_config import get_logger
from src.core.math.comparator import compare_magnitude

logger = get_logger(__name__)


# =============================================================================
# БЕЗЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


def add_magnitude(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    Сложение модулей с переносом от младшей цифры к старшей.

    Буфер результата имеет длину max(len(a), len(b)) + 1 и обрезается
    от старшего нуля. Всегда успешно.

    Examples:
        >>> add_magnitude([9, 9], [1])
        (0, 0, 1)
    """
    width = max(len(a), len(b))
    result = [0] * (width + 1)
    carry = 0

    for index in range(width):
        total = carry
        if index < len(a):
            total += a[index]
        if index < len(b):
            total += b[index]
        carry, result[index] = divmod(total, BASE)

    result[width] = carry
    return trim_magnitude(result)


def subtract_magnitude(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    Вычитание модулей с заёмом: |a| - |b| при |a| >= |b|.

    Args:
        a: Уменьшаемое (цифры младшая первой, канонические)
        b: Вычитаемое

    Returns:
        Канонический модуль разности

    Raises:
        NegativeResult: если |a| < |b| (дефект вызывающего кода)

    Examples:
        >>> subtract_magnitude([0, 0, 1], [1])
        (9, 9)
    """
    if compare_magnitude(a, b) is Ordering.LESS:
        logger.error(
            "subtract_magnitude invariant violated: minuend has %d digits, "
            "subtrahend has %d digits",
            len(a),
            len(b),
        )
        raise NegativeResult(
            "subtract_magnitude requires |a| >= |b|; "
            "sign dispatch passed the smaller magnitude first"
        )

    result = [0] * len(a)
    borrow = 0

    for index in range(len(a)):
        difference = a[index] - borrow
        if index < len(b):
            difference -= b[index]
        if difference < 0:
            difference += BASE
            borrow = 1
        else:
            borrow = 0
        result[index] = difference

    return trim_magnitude(result)


# =============================================================================
# ЗНАКОВАЯ ДИСПЕТЧЕРИЗАЦИЯ
# =============================================================================


def signed_sum(a: BigInt, b: BigInt, negate_b: bool = False) -> BigInt:
    """
    Знаковая сумма a + (±b) без материализации -b.

    Общая ветка для add (negate_b=False) и subtract (negate_b=True):
    - Знаки равны: сложение модулей, знак общий
    - Знаки разные: из большего модуля вычитается меньший,
      знак берётся у операнда с большим (или равным) модулем

    Args:
        a: Левый операнд
        b: Правый операнд
        negate_b: Инвертировать эффективный знак b

    Returns:
        Нормализованный результат
    """
    b_negative = b.negative != negate_b

    if a.negative == b_negative:
        return normalize(add_magnitude(a.magnitude, b.magnitude), a.negative)

    if compare_magnitude(a.magnitude, b.magnitude) is Ordering.LESS:
        return normalize(subtract_magnitude(b.magnitude, a.magnitude), b_negative)

    return normalize(subtract_magnitude(a.magnitude, b.magnitude), a.negative)
